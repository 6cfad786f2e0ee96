"""
Pydantic schemas for the auth API.

Request fields are optional on purpose: a missing or empty field is
answered with the same 400 message whichever one it is, so the route
does the presence check instead of the schema.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class SignupRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserProfile(BaseModel):
    """Public view of a user. Never includes the password hash."""
    id: UUID
    email: str
    name: str

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    """Returned by signup and login."""
    message: str
    token: str
    user: UserProfile
