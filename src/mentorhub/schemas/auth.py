"""Pydantic schemas for registration, login and profile.

Learn: Request fields are Optional. A missing field is a
business-level 400 with a specific message, produced by UserService, and
not a generic validation error. UserRead is the only shape a user ever
leaves the API in. It has no password field, so a hash cannot leak
through a response.
"""

from typing import Optional

from pydantic import BaseModel

from mentorhub.db.models import Role
from mentorhub.schemas.base import CamelModel


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserRead(CamelModel):
    id: str
    name: str
    email: str
    role: Role


class AuthResponse(BaseModel):
    message: str
    user: UserRead
    token: str


class ProfileResponse(BaseModel):
    user: UserRead
