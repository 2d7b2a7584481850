"""User service — registration, login and profile lookup.

Learn: Login must not reveal whether an email is registered. An unknown
email and a wrong password raise the exact same Unauthenticated error,
so a client cannot probe for accounts. The password is hashed (and
checked) off the event loop; see auth/password.py.
"""

import structlog

from mentorhub.auth.jwt import create_access_token
from mentorhub.auth.password import hash_password_async, verify_password_async
from mentorhub.db.models import Role, User
from mentorhub.db.store import DuplicateEmailError, UserStore
from mentorhub.errors import BadRequest, Conflict, NotFound, Unauthenticated

logger = structlog.get_logger()

INVALID_CREDENTIALS = "Invalid email or password."


def issue_token(user: User) -> str:
    return create_access_token(user.id, user.email, user.role)


class UserService:
    """Business logic for accounts and credentials."""

    def __init__(self, users: UserStore):
        self.users = users

    async def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        role: str | None,
    ) -> tuple[User, str]:
        """Create an account and return it with a fresh token."""
        if not name or not email or not password or not role:
            raise BadRequest("All fields (name, email, password, role) are required.")

        try:
            role = Role(role)
        except ValueError:
            raise BadRequest('Role must be either "mentor" or "mentee".')

        # Checked again, atomically, by UserStore.create().
        if await self.users.find_by_email(email):
            raise Conflict("User with this email already exists.")

        user = User(
            name=name,
            email=email,
            password_hash=await hash_password_async(password),
            role=role,
        )
        try:
            await self.users.create(user)
        except DuplicateEmailError:
            raise Conflict("User with this email already exists.")

        logger.info("auth.user_registered", user_id=user.id, role=user.role.value)
        return user, issue_token(user)

    async def login(self, email: str | None, password: str | None) -> tuple[User, str]:
        """Check credentials and return the user with a fresh token."""
        if not email or not password:
            raise BadRequest("Email and password are required.")

        user = await self.users.find_by_email(email)
        if not user or not await verify_password_async(password, user.password_hash):
            logger.info("auth.login_failed")
            raise Unauthenticated(INVALID_CREDENTIALS)

        logger.info("auth.login_succeeded", user_id=user.id)
        return user, issue_token(user)

    async def get_profile(self, user_id: str) -> User:
        user = await self.users.find_by_id(user_id)
        if not user:
            raise NotFound("User not found.")
        return user
