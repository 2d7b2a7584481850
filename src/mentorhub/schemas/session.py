"""Pydantic schemas for mentoring sessions.

Learn: SessionCreate takes scheduledDate as whatever the client sent.
SessionService parses it only after the role check, so a mentee posting
a malformed date still gets 403. SessionRead lists its fields
explicitly. Whatever else a stored record might carry, only these fields
are serialized.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import field_validator

from mentorhub.db.models import SessionStatus
from mentorhub.schemas.base import CamelModel


class SessionCreate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    mentee_id: Optional[str] = None
    scheduled_date: Any = None


class SessionUpdate(CamelModel):
    """Partial update. Omitted or empty fields keep their current value."""

    title: Optional[str] = None
    description: Optional[str] = None
    scheduled_date: Optional[datetime] = None
    status: Optional[SessionStatus] = None

    @field_validator("scheduled_date", "status", mode="before")
    @classmethod
    def empty_means_unchanged(cls, v: Any) -> Any:
        return None if v == "" else v


class SessionRead(CamelModel):
    id: str
    title: str
    description: str
    mentor_id: str
    mentee_id: str
    scheduled_date: datetime
    status: SessionStatus
    created_at: datetime
    updated_at: datetime


class SessionEnvelope(CamelModel):
    message: str
    session: SessionRead


class SessionList(CamelModel):
    sessions: list[SessionRead]


class SessionDetail(CamelModel):
    session: SessionRead
