"""Domain records — users, mentoring sessions, feedback.

Learn: Records are frozen dataclasses. A store never mutates a record in
place; an update swaps in a new instance built with dataclasses.replace(),
so a reader always sees either the old or the new version, never half of
each. IDs are random UUID4 strings, which are safe under concurrent
creation (timestamp IDs collide when two records share a millisecond).
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Role(str, Enum):
    MENTOR = "mentor"
    MENTEE = "mentee"


class SessionStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# ─── Users ──────────────────────────────────────────────


@dataclass(frozen=True)
class User:
    name: str
    email: str
    password_hash: str = field(repr=False)
    role: Role
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)


# ─── Sessions ───────────────────────────────────────────


@dataclass(frozen=True)
class Session:
    """A scheduled meeting between a mentor and a mentee."""

    title: str
    description: str
    mentor_id: str
    mentee_id: str
    scheduled_date: datetime
    status: SessionStatus = SessionStatus.SCHEDULED
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)


# ─── Feedback ───────────────────────────────────────────


@dataclass(frozen=True)
class Feedback:
    """A rating left by any user about a session.

    session_id is stored as given. It is not checked against the session
    store, so feedback can outlive (or predate) the session it names.
    """

    session_id: str
    user_id: str
    user_role: Role
    rating: int
    comments: str = ""
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: Optional[datetime] = None
