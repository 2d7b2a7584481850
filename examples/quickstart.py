#!/usr/bin/env python3
"""
MentorHub Quickstart — full mentor/mentee lifecycle in one script.

Registers a mentor and a mentee → schedules a session → mentee sees it →
mentee leaves feedback → mentor completes the session.
Run with: python examples/quickstart.py

Requires: pip install httpx
Backend must be running: mentorhub serve  (http://localhost:5000)
"""

import sys
import uuid

import httpx

BASE = "http://localhost:5000/api"


def register(client: httpx.Client, name: str, role: str) -> tuple[dict, dict]:
    """Register a fresh account, return (user, auth headers)."""
    resp = client.post("/auth/register", json={
        "name": name,
        "email": f"{role}-{uuid.uuid4().hex[:8]}@example.com",
        "password": "demo-password-123",
        "role": role,
    })
    assert resp.status_code == 201, f"Failed: {resp.text}"
    data = resp.json()
    return data["user"], {"Authorization": f"Bearer {data['token']}"}


def main():
    client = httpx.Client(base_url=BASE, timeout=10)

    # ── Health check ──────────────────────────────────────────────
    print("Checking backend health...")
    try:
        resp = client.get("/health")
    except httpx.ConnectError:
        print(f"Backend not reachable at {BASE}")
        sys.exit(1)
    health = resp.json()
    print(f"  Version: {health['version']}")
    if health["insecure_secret"]:
        print("  WARNING: server is signing tokens with the default secret")

    # ── Accounts ──────────────────────────────────────────────────
    print("\n1. Registering mentor and mentee...")
    mentor, mentor_auth = register(client, "Ada (mentor)", "mentor")
    mentee, mentee_auth = register(client, "Grace (mentee)", "mentee")
    print(f"   Mentor: {mentor['name']} ({mentor['id'][:8]}...)")
    print(f"   Mentee: {mentee['name']} ({mentee['id'][:8]}...)")

    # ── Schedule ──────────────────────────────────────────────────
    print("\n2. Mentor schedules a session...")
    resp = client.post("/sessions", headers=mentor_auth, json={
        "title": "First 1:1",
        "description": "Goals for the next quarter",
        "menteeId": mentee["id"],
        "scheduledDate": "2030-01-15T10:00:00Z",
    })
    assert resp.status_code == 201, f"Failed: {resp.text}"
    session = resp.json()["session"]
    print(f"   Session: {session['title']} on {session['scheduledDate']}")

    print("\n3. Mentee tries to schedule one too (should be refused)...")
    resp = client.post("/sessions", headers=mentee_auth, json={
        "title": "Nope", "description": "-", "menteeId": mentor["id"],
        "scheduledDate": "2030-01-16T10:00:00Z",
    })
    print(f"   {resp.status_code}: {resp.json()['message']}")

    # ── Mentee's view ─────────────────────────────────────────────
    print("\n4. Mentee lists their sessions...")
    resp = client.get("/sessions", headers=mentee_auth)
    for s in resp.json()["sessions"]:
        print(f"   - {s['title']} [{s['status']}]")

    # ── Feedback ──────────────────────────────────────────────────
    print("\n5. Mentee leaves feedback...")
    resp = client.post("/feedback", headers=mentee_auth, json={
        "sessionId": session["id"], "rating": 5, "comments": "Super useful",
    })
    assert resp.status_code == 201, f"Failed: {resp.text}"
    print(f"   Rating: {resp.json()['feedback']['rating']}/5")

    # ── Complete ──────────────────────────────────────────────────
    print("\n6. Mentor marks the session completed...")
    resp = client.put(f"/sessions/{session['id']}", headers=mentor_auth, json={
        "status": "completed",
    })
    print(f"   Status: {resp.json()['session']['status']}")

    print("\nDone.")


if __name__ == "__main__":
    main()
