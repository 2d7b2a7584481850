"""Full-flow E2E tests — the platform lifecycle through the API alone.

Learn: These walk the same path a frontend would: register both sides,
schedule a session, see it from the mentee's side, tear it down, and
leave feedback. Every request carries a real token.
"""

import pytest

from conftest import register


@pytest.mark.asyncio
async def test_session_lifecycle(client):
    """Mentor A schedules for mentee B; B sees it; A deletes it; B gets 404."""
    mentor = await register(client, "mentor", name="A")
    mentee = await register(client, "mentee", name="B")

    r = await client.post(
        "/api/sessions",
        json={
            "title": "Resume review",
            "description": "Walk through the latest draft",
            "menteeId": mentee.id,
            "scheduledDate": "2030-03-10T15:00:00Z",
        },
        headers=mentor.headers,
    )
    assert r.status_code == 201
    session_id = r.json()["session"]["id"]

    r = await client.get("/api/sessions", headers=mentee.headers)
    assert r.status_code == 200
    assert [s["id"] for s in r.json()["sessions"]] == [session_id]

    r = await client.get(f"/api/sessions/{session_id}", headers=mentee.headers)
    assert r.status_code == 200

    r = await client.delete(f"/api/sessions/{session_id}", headers=mentor.headers)
    assert r.status_code == 200

    r = await client.get(f"/api/sessions/{session_id}", headers=mentee.headers)
    assert r.status_code == 404

    r = await client.get("/api/sessions", headers=mentee.headers)
    assert r.json()["sessions"] == []


@pytest.mark.asyncio
async def test_feedback_resubmission(client):
    """Rating 6 is rejected; resubmitting with 4 is stored as 4."""
    mentee = await register(client, "mentee")

    r = await client.post(
        "/api/feedback",
        json={"sessionId": "s-100", "rating": 6, "comments": "Too good"},
        headers=mentee.headers,
    )
    assert r.status_code == 400

    r = await client.post(
        "/api/feedback",
        json={"sessionId": "s-100", "rating": 4, "comments": "Great"},
        headers=mentee.headers,
    )
    assert r.status_code == 201
    assert r.json()["feedback"]["rating"] == 4

    r = await client.get("/api/feedback/session/s-100", headers=mentee.headers)
    feedbacks = r.json()["feedbacks"]
    assert len(feedbacks) == 1
    assert feedbacks[0]["rating"] == 4


@pytest.mark.asyncio
async def test_feedback_survives_session_deletion(client):
    """No cascade: deleting a session leaves its feedback in place."""
    mentor = await register(client, "mentor")
    mentee = await register(client, "mentee")

    r = await client.post(
        "/api/sessions",
        json={
            "title": "T",
            "description": "D",
            "menteeId": mentee.id,
            "scheduledDate": "2030-01-01T00:00:00Z",
        },
        headers=mentor.headers,
    )
    session_id = r.json()["session"]["id"]

    r = await client.post(
        "/api/feedback",
        json={"sessionId": session_id, "rating": 5},
        headers=mentee.headers,
    )
    assert r.status_code == 201

    await client.delete(f"/api/sessions/{session_id}", headers=mentor.headers)

    r = await client.get(f"/api/feedback/session/{session_id}", headers=mentor.headers)
    assert len(r.json()["feedbacks"]) == 1


@pytest.mark.asyncio
async def test_login_token_works_across_resources(client):
    mentor = await register(client, "mentor")
    r = await client.post(
        "/api/auth/login",
        json={"email": mentor.email, "password": mentor.password},
    )
    headers = {"Authorization": f"Bearer {r.json()['token']}"}

    r = await client.get("/api/sessions", headers=headers)
    assert r.status_code == 200
    r = await client.get("/api/feedback/user", headers=headers)
    assert r.status_code == 200
