"""API route aggregation.

All routers registered here get mounted in main.py.

Learn: Auth is applied at the include_router level using FastAPI's
dependencies parameter, so no protected route can be added without the
gate. Handlers that need to know WHO is calling also declare
get_current_user as a parameter. FastAPI resolves it once per request.
Health and auth routers are open (profile guards itself).
"""

from fastapi import APIRouter, Depends

from mentorhub.api.auth import router as auth_router
from mentorhub.api.feedback import router as feedback_router
from mentorhub.api.health import router as health_router
from mentorhub.api.sessions import router as sessions_router
from mentorhub.auth.dependencies import get_current_user

# All protected routers require authentication
_auth = [Depends(get_current_user)]

api_router = APIRouter(prefix="/api")

# Open routes — no auth required
api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, tags=["auth"])

# Protected routes — require a valid Bearer token
api_router.include_router(sessions_router, tags=["sessions"], dependencies=_auth)
api_router.include_router(feedback_router, tags=["feedback"], dependencies=_auth)
