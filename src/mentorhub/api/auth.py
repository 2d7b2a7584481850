"""Auth API — registration, login, profile.

Learn: Routes for account lifecycle:
- POST /auth/register → create a user, return it with a token
- POST /auth/login → email/password → token
- GET /auth/profile → current user info (Bearer token required)

Register and login are open. Profile goes through the auth gate.
"""

from fastapi import APIRouter, Depends

from mentorhub.auth.dependencies import CurrentIdentity, get_current_user
from mentorhub.db.engine import get_user_store
from mentorhub.db.store import UserStore
from mentorhub.schemas.auth import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    UserRead,
)
from mentorhub.services.user_service import UserService

router = APIRouter(prefix="/auth")


def _svc(users: UserStore = Depends(get_user_store)) -> UserService:
    return UserService(users)


# ─── Register ────────────────────────────────────────────


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(body: RegisterRequest, svc: UserService = Depends(_svc)):
    """Create a new user account."""
    user, token = await svc.register(
        name=body.name,
        email=body.email,
        password=body.password,
        role=body.role,
    )
    return AuthResponse(
        message="User registered successfully",
        user=UserRead.model_validate(user),
        token=token,
    )


# ─── Login ───────────────────────────────────────────────


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest, svc: UserService = Depends(_svc)):
    """Login with email and password → JWT token."""
    user, token = await svc.login(email=body.email, password=body.password)
    return AuthResponse(
        message="Login successful",
        user=UserRead.model_validate(user),
        token=token,
    )


# ─── Current user ───────────────────────────────────────


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    identity: CurrentIdentity = Depends(get_current_user),
    svc: UserService = Depends(_svc),
):
    """Get the current authenticated user's info."""
    user = await svc.get_profile(identity.id)
    return ProfileResponse(user=UserRead.model_validate(user))
