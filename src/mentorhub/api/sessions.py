"""Session API routes — scheduling mentor↔mentee meetings.

Learn: Handlers stay thin. They unpack the body, pass the caller's
identity to SessionService, and wrap the result in the response
envelope. All role and ownership rules run inside the service.
"""

from fastapi import APIRouter, Depends

from mentorhub.auth.dependencies import CurrentIdentity, get_current_user
from mentorhub.db.engine import get_session_store
from mentorhub.schemas.base import MessageResponse
from mentorhub.schemas.session import (
    SessionCreate,
    SessionDetail,
    SessionEnvelope,
    SessionList,
    SessionRead,
    SessionUpdate,
)
from mentorhub.services.session_service import SessionService

router = APIRouter(prefix="/sessions")


def _svc(store=Depends(get_session_store)) -> SessionService:
    return SessionService(store)


@router.get("", response_model=SessionList)
async def list_sessions(
    identity: CurrentIdentity = Depends(get_current_user),
    svc: SessionService = Depends(_svc),
):
    """List sessions the caller runs (mentor) or attends (mentee)."""
    sessions = await svc.list_sessions(identity)
    return SessionList(sessions=[SessionRead.model_validate(s) for s in sessions])


@router.get("/{session_id}", response_model=SessionDetail)
async def get_session(
    session_id: str,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: SessionService = Depends(_svc),
):
    session = await svc.get_session(identity, session_id)
    return SessionDetail(session=SessionRead.model_validate(session))


@router.post("", response_model=SessionEnvelope, status_code=201)
async def create_session(
    body: SessionCreate,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: SessionService = Depends(_svc),
):
    """Schedule a new session. Mentors only."""
    session = await svc.create_session(
        identity,
        title=body.title,
        description=body.description,
        mentee_id=body.mentee_id,
        scheduled_date=body.scheduled_date,
    )
    return SessionEnvelope(
        message="Session created successfully",
        session=SessionRead.model_validate(session),
    )


@router.put("/{session_id}", response_model=SessionEnvelope)
async def update_session(
    session_id: str,
    body: SessionUpdate,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: SessionService = Depends(_svc),
):
    session = await svc.update_session(
        identity,
        session_id,
        title=body.title,
        description=body.description,
        scheduled_date=body.scheduled_date,
        status=body.status,
    )
    return SessionEnvelope(
        message="Session updated successfully",
        session=SessionRead.model_validate(session),
    )


@router.delete("/{session_id}", response_model=MessageResponse)
async def delete_session(
    session_id: str,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: SessionService = Depends(_svc),
):
    await svc.delete_session(identity, session_id)
    return MessageResponse(message="Session deleted successfully")
