# groupboard/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Fields are optional at the parsing layer so that a missing field is reported
as a 400 validation error by the service, not as FastAPI's 422.
"""
from pydantic import BaseModel


class RegisterIn(BaseModel):
    """Request body for account registration."""
    username: str | None = None
    displayName: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    """Request body for login."""
    username: str | None = None
    password: str | None = None


class Claims(BaseModel):
    """
    Identity carried by a verified session token.
    This is what protected routes receive from the auth dependency.
    """
    id: str  # User unique identifier
    username: str  # User login name
    displayName: str  # Name shown in the UI
