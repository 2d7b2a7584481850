"""Pydantic schemas for session feedback.

Learn: rating is a StrictInt. JSON true, "4" and 4.5 are rejected as 400
rather than coerced into a stored rating.
"""

from datetime import datetime
from typing import Optional

from pydantic import StrictInt

from mentorhub.db.models import Role
from mentorhub.schemas.base import CamelModel


class FeedbackCreate(CamelModel):
    session_id: Optional[str] = None
    rating: Optional[StrictInt] = None
    comments: Optional[str] = None


class FeedbackUpdate(CamelModel):
    rating: Optional[StrictInt] = None
    comments: Optional[str] = None


class FeedbackRead(CamelModel):
    id: str
    session_id: str
    user_id: str
    user_role: Role
    rating: int
    comments: str
    created_at: datetime
    updated_at: Optional[datetime] = None


class FeedbackEnvelope(CamelModel):
    message: str
    feedback: FeedbackRead


class FeedbackList(CamelModel):
    feedbacks: list[FeedbackRead]
