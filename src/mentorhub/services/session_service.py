"""Session service — scheduling mentor↔mentee meetings.

Learn: Every method takes the caller's CurrentIdentity and consults the
access policy before the store is written. The order of checks is fixed:
role, then input, then existence, then ownership. The first failure
wins.
"""

from datetime import datetime
from typing import Any, Optional

import structlog
from pydantic import TypeAdapter, ValidationError

from mentorhub.auth.dependencies import CurrentIdentity
from mentorhub.auth.policy import Action, authorize, session_scope
from mentorhub.db.models import Session, SessionStatus, utcnow
from mentorhub.db.store import Store
from mentorhub.errors import BadRequest, NotFound

logger = structlog.get_logger()

_datetime = TypeAdapter(datetime)


def parse_scheduled_date(value: Any) -> datetime:
    """Parse a client-supplied date the same way the request models do."""
    try:
        return _datetime.validate_python(value)
    except ValidationError:
        raise BadRequest("Invalid scheduled date.")


class SessionService:
    """Business logic for mentoring sessions."""

    def __init__(self, sessions: Store[Session]):
        self.sessions = sessions

    async def list_sessions(self, identity: CurrentIdentity) -> list[Session]:
        return await self.sessions.find(session_scope(identity))

    async def get_session(self, identity: CurrentIdentity, session_id: str) -> Session:
        session = await self._get_or_404(session_id)
        authorize(identity, Action.SESSION_READ, session)
        return session

    async def create_session(
        self,
        identity: CurrentIdentity,
        title: Optional[str],
        description: Optional[str],
        mentee_id: Optional[str],
        scheduled_date: Any,
    ) -> Session:
        """Schedule a session. The caller becomes its mentor.

        mentee_id is not checked against the user store. A mentor may
        name any mentee id. scheduled_date arrives raw and is parsed only
        once the caller is known to be a mentor.
        """
        authorize(identity, Action.SESSION_CREATE)

        if not title or not description or not mentee_id or not scheduled_date:
            raise BadRequest(
                "Title, description, mentee ID, and scheduled date are required."
            )

        session = await self.sessions.insert(
            Session(
                title=title,
                description=description,
                mentor_id=identity.id,
                mentee_id=mentee_id,
                scheduled_date=parse_scheduled_date(scheduled_date),
            )
        )
        logger.info(
            "sessions.created",
            session_id=session.id,
            mentor_id=session.mentor_id,
            mentee_id=session.mentee_id,
        )
        return session

    async def update_session(
        self,
        identity: CurrentIdentity,
        session_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
        scheduled_date: Optional[datetime] = None,
        status: Optional[SessionStatus] = None,
    ) -> Session:
        session = await self._get_or_404(session_id)
        authorize(identity, Action.SESSION_UPDATE, session)

        changes: dict = {"updated_at": utcnow()}
        if title:
            changes["title"] = title
        if description:
            changes["description"] = description
        if scheduled_date:
            changes["scheduled_date"] = scheduled_date
        if status:
            changes["status"] = SessionStatus(status)

        updated = await self.sessions.update(session_id, **changes)
        if updated is None:
            # Deleted between the read and the write.
            raise NotFound("Session not found.")

        logger.info("sessions.updated", session_id=session_id, fields=sorted(changes))
        return updated

    async def delete_session(self, identity: CurrentIdentity, session_id: str) -> None:
        session = await self._get_or_404(session_id)
        authorize(identity, Action.SESSION_DELETE, session)

        if not await self.sessions.delete(session_id):
            raise NotFound("Session not found.")
        logger.info("sessions.deleted", session_id=session_id)

    async def _get_or_404(self, session_id: str) -> Session:
        session = await self.sessions.get(session_id)
        if not session:
            raise NotFound("Session not found.")
        return session
