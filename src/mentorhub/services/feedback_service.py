"""Feedback service — ratings and comments on sessions.

Learn: Any authenticated user can leave feedback on any session id, and
read all feedback for a session id. Neither path looks at the session
store (see the gaps listed in auth/policy.py). Only the author may
change or delete a piece of feedback.
"""

from typing import Optional

import structlog

from mentorhub.auth.dependencies import CurrentIdentity
from mentorhub.auth.policy import Action, authorize, feedback_scope
from mentorhub.db.models import Feedback, utcnow
from mentorhub.db.store import Store
from mentorhub.errors import BadRequest, NotFound

logger = structlog.get_logger()

MIN_RATING = 1
MAX_RATING = 5


def validate_rating(rating: int) -> int:
    if not MIN_RATING <= rating <= MAX_RATING:
        raise BadRequest(f"Rating must be between {MIN_RATING} and {MAX_RATING}.")
    return rating


class FeedbackService:
    """Business logic for session feedback."""

    def __init__(self, feedbacks: Store[Feedback]):
        self.feedbacks = feedbacks

    async def submit(
        self,
        identity: CurrentIdentity,
        session_id: Optional[str],
        rating: Optional[int],
        comments: Optional[str] = None,
    ) -> Feedback:
        authorize(identity, Action.FEEDBACK_CREATE)

        if not session_id or rating is None:
            raise BadRequest("Session ID and rating are required.")
        validate_rating(rating)

        feedback = await self.feedbacks.insert(
            Feedback(
                session_id=session_id,
                user_id=identity.id,
                user_role=identity.role,
                rating=rating,
                comments=comments or "",
            )
        )
        logger.info(
            "feedback.submitted",
            feedback_id=feedback.id,
            session_id=session_id,
            user_id=identity.id,
        )
        return feedback

    async def list_for_session(
        self, identity: CurrentIdentity, session_id: str
    ) -> list[Feedback]:
        authorize(identity, Action.FEEDBACK_READ_SESSION)
        return await self.feedbacks.find(lambda f: f.session_id == session_id)

    async def list_mine(self, identity: CurrentIdentity) -> list[Feedback]:
        return await self.feedbacks.find(feedback_scope(identity))

    async def update(
        self,
        identity: CurrentIdentity,
        feedback_id: str,
        rating: Optional[int] = None,
        comments: Optional[str] = None,
    ) -> Feedback:
        feedback = await self._get_or_404(feedback_id)
        authorize(identity, Action.FEEDBACK_UPDATE, feedback)

        changes: dict = {"updated_at": utcnow()}
        if rating is not None:
            changes["rating"] = validate_rating(rating)
        if comments is not None:
            changes["comments"] = comments

        updated = await self.feedbacks.update(feedback_id, **changes)
        if updated is None:
            raise NotFound("Feedback not found.")

        logger.info("feedback.updated", feedback_id=feedback_id)
        return updated

    async def delete(self, identity: CurrentIdentity, feedback_id: str) -> None:
        feedback = await self._get_or_404(feedback_id)
        authorize(identity, Action.FEEDBACK_DELETE, feedback)

        if not await self.feedbacks.delete(feedback_id):
            raise NotFound("Feedback not found.")
        logger.info("feedback.deleted", feedback_id=feedback_id)

    async def _get_or_404(self, feedback_id: str) -> Feedback:
        feedback = await self.feedbacks.get(feedback_id)
        if not feedback:
            raise NotFound("Feedback not found.")
        return feedback
