"""Test fixtures — fresh in-memory stores for every test.

Learn: Testing pattern for FastAPI + httpx:

1. Each test gets brand-new stores, swapped in through
   app.dependency_overrides (the same hook a real backend would use).
2. The client talks to the ASGI app in-process via httpx.ASGITransport,
   so no server or port is involved.
3. bcrypt rounds are dropped to the minimum (4). Hashes stay real, only
   cheaper to compute.

The auth gate is NOT mocked. Fixtures like `mentor` and `mentee` register
real accounts and carry real Bearer tokens, so every API test exercises
the full token → identity → policy path.
"""

import uuid
from dataclasses import dataclass

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from mentorhub.config import settings
from mentorhub.db.engine import get_feedback_store, get_session_store, get_user_store
from mentorhub.db.models import Feedback, Session
from mentorhub.db.store import InMemoryStore, UserStore
from mentorhub.main import app


@dataclass
class Stores:
    users: UserStore
    sessions: InMemoryStore[Session]
    feedbacks: InMemoryStore[Feedback]


@dataclass
class Account:
    """A registered user plus ready-made auth headers."""

    id: str
    name: str
    email: str
    role: str
    password: str
    token: str

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    monkeypatch.setattr(settings, "bcrypt_rounds", 4)


@pytest.fixture()
def stores():
    return Stores(users=UserStore(), sessions=InMemoryStore(), feedbacks=InMemoryStore())


@pytest_asyncio.fixture()
async def client(stores):
    """HTTP client with the app's stores overridden for isolation."""
    app.dependency_overrides[get_user_store] = lambda: stores.users
    app.dependency_overrides[get_session_store] = lambda: stores.sessions
    app.dependency_overrides[get_feedback_store] = lambda: stores.feedbacks

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def register(client, role: str, name: str | None = None) -> Account:
    """Register a fresh account with the given role and return it."""
    email = f"{role}-{uuid.uuid4().hex[:8]}@example.com"
    password = "password_123"
    r = await client.post(
        "/api/auth/register",
        json={
            "name": name or role.title(),
            "email": email,
            "password": password,
            "role": role,
        },
    )
    assert r.status_code == 201, r.text
    body = r.json()
    return Account(
        id=body["user"]["id"],
        name=body["user"]["name"],
        email=email,
        role=role,
        password=password,
        token=body["token"],
    )


@pytest_asyncio.fixture()
async def mentor(client) -> Account:
    return await register(client, "mentor", name="Mentor A")


@pytest_asyncio.fixture()
async def mentee(client) -> Account:
    return await register(client, "mentee", name="Mentee B")


@pytest_asyncio.fixture()
async def outsider(client) -> Account:
    """A second mentee with no relation to the mentor/mentee pair."""
    return await register(client, "mentee", name="Mentee C")


async def create_session(client, mentor: Account, mentee: Account, **overrides) -> dict:
    body = {
        "title": "Career planning",
        "description": "Quarterly goals review",
        "menteeId": mentee.id,
        "scheduledDate": "2030-01-15T10:00:00Z",
        **overrides,
    }
    r = await client.post("/api/sessions", json=body, headers=mentor.headers)
    assert r.status_code == 201, r.text
    return r.json()["session"]
