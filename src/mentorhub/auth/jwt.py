"""JWT token creation and verification.

Learn: JWT (JSON Web Token) provides stateless authentication. The token
carries the user's id (sub), email and role, plus issued-at and a 24-hour
expiry. It is signed with settings.jwt_secret, so any edit to the payload
breaks the signature.

There is no revocation list: a token stays valid until it expires.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
import structlog

from mentorhub.config import settings
from mentorhub.db.models import Role

logger = structlog.get_logger()


class TokenError(Exception):
    """Raised when token verification fails (invalid or expired token)."""


@dataclass(frozen=True)
class TokenClaims:
    user_id: str
    email: str
    role: Role


def create_access_token(
    user_id: str,
    email: str,
    role: Role | str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a signed access token for a user."""
    issued_at = datetime.now(timezone.utc)
    expires = issued_at + (
        expires_delta or timedelta(hours=settings.access_token_expire_hours)
    )
    payload = {
        "sub": user_id,
        "email": email,
        "role": Role(role).value,
        "iat": issued_at,
        "exp": expires,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> TokenClaims:
    """Verify and decode an access token.

    Returns the claims on success.
    Raises TokenError on a bad signature, malformed token, missing claim,
    unknown role, or expiry.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "email", "role", "iat", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenError("Token has expired.")
    except jwt.InvalidTokenError as e:
        logger.debug("auth.token_rejected", reason=str(e))
        raise TokenError("Invalid token.")

    try:
        role = Role(payload["role"])
    except ValueError:
        raise TokenError("Invalid token.")

    return TokenClaims(user_id=str(payload["sub"]), email=payload["email"], role=role)
