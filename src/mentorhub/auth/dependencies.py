"""FastAPI auth dependencies — the auth gate.

Learn: get_current_user is used as Depends() on every protected router
AND as a handler parameter. FastAPI caches a dependency per request, so
the token is verified once, and the handler receives the identity as an
explicit argument instead of fishing it out of a request global.

Gate order:
1. No Authorization header, or no token after the scheme → 401
2. Token fails verification (bad signature, malformed, expired) → 401
3. Token is fine but the user is gone from the store → 404
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header

from mentorhub.auth.jwt import TokenError, verify_token
from mentorhub.db.engine import get_user_store
from mentorhub.db.models import Role
from mentorhub.db.store import UserStore
from mentorhub.errors import NotFound, Unauthenticated


@dataclass(frozen=True)
class CurrentIdentity:
    """The authenticated user making the request."""

    id: str
    email: str
    role: Role


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the second whitespace-separated part of the header, if any."""
    if not authorization:
        return None
    parts = authorization.split()
    return parts[1] if len(parts) > 1 else None


async def get_current_user(
    authorization: Optional[str] = Header(None),
    users: UserStore = Depends(get_user_store),
) -> CurrentIdentity:
    """Resolve the request's Bearer token to a CurrentIdentity."""
    token = extract_bearer_token(authorization)
    if not token:
        raise Unauthenticated("Access denied. No token provided.")

    try:
        claims = verify_token(token)
    except TokenError as e:
        raise Unauthenticated(str(e))

    user = await users.find_by_id(claims.user_id)
    if not user:
        raise NotFound("User not found.")

    return CurrentIdentity(id=user.id, email=user.email, role=user.role)
