"""Health check endpoints.

Learn: /test is the plain liveness probe the frontend pings. /health adds
the version and the store sizes, plus a flag for the insecure default
signing secret so a misconfigured deploy is visible from outside.
"""

from fastapi import APIRouter, Depends

from mentorhub import __version__
from mentorhub.config import settings
from mentorhub.db.engine import get_feedback_store, get_session_store, get_user_store

router = APIRouter()


@router.get("/test")
async def api_test():
    return {"message": "Backend API is working!"}


@router.get("/health")
async def health_check(
    users=Depends(get_user_store),
    sessions=Depends(get_session_store),
    feedbacks=Depends(get_feedback_store),
):
    """Report server status, version and record counts."""
    return {
        "status": "healthy",
        "server": "ok",
        "version": __version__,
        "insecure_secret": settings.uses_insecure_secret,
        "records": {
            "users": len(users),
            "sessions": len(sessions),
            "feedbacks": len(feedbacks),
        },
    }
