"""Feedback API routes — ratings and comments on sessions.

Learn: Route order matters here. /feedback/user and /feedback/session/{id}
are GET-only, while /feedback/{id} is PUT/DELETE-only, so the literal
"user" segment never collides with a feedback id.
"""

from fastapi import APIRouter, Depends

from mentorhub.auth.dependencies import CurrentIdentity, get_current_user
from mentorhub.db.engine import get_feedback_store
from mentorhub.schemas.base import MessageResponse
from mentorhub.schemas.feedback import (
    FeedbackCreate,
    FeedbackEnvelope,
    FeedbackList,
    FeedbackRead,
    FeedbackUpdate,
)
from mentorhub.services.feedback_service import FeedbackService

router = APIRouter(prefix="/feedback")


def _svc(store=Depends(get_feedback_store)) -> FeedbackService:
    return FeedbackService(store)


def _list(feedbacks) -> FeedbackList:
    return FeedbackList(feedbacks=[FeedbackRead.model_validate(f) for f in feedbacks])


@router.post("", response_model=FeedbackEnvelope, status_code=201)
async def submit_feedback(
    body: FeedbackCreate,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: FeedbackService = Depends(_svc),
):
    """Submit feedback for a session."""
    feedback = await svc.submit(
        identity,
        session_id=body.session_id,
        rating=body.rating,
        comments=body.comments,
    )
    return FeedbackEnvelope(
        message="Feedback submitted successfully",
        feedback=FeedbackRead.model_validate(feedback),
    )


@router.get("/session/{session_id}", response_model=FeedbackList)
async def list_session_feedback(
    session_id: str,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: FeedbackService = Depends(_svc),
):
    """All feedback left for a session, by anyone."""
    return _list(await svc.list_for_session(identity, session_id))


@router.get("/user", response_model=FeedbackList)
async def list_my_feedback(
    identity: CurrentIdentity = Depends(get_current_user),
    svc: FeedbackService = Depends(_svc),
):
    """Feedback written by the caller."""
    return _list(await svc.list_mine(identity))


@router.put("/{feedback_id}", response_model=FeedbackEnvelope)
async def update_feedback(
    feedback_id: str,
    body: FeedbackUpdate,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: FeedbackService = Depends(_svc),
):
    feedback = await svc.update(
        identity,
        feedback_id,
        rating=body.rating,
        comments=body.comments,
    )
    return FeedbackEnvelope(
        message="Feedback updated successfully",
        feedback=FeedbackRead.model_validate(feedback),
    )


@router.delete("/{feedback_id}", response_model=MessageResponse)
async def delete_feedback(
    feedback_id: str,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: FeedbackService = Depends(_svc),
):
    await svc.delete(identity, feedback_id)
    return MessageResponse(message="Feedback deleted successfully")
