"""
Path2Hack Backend: User Schemas
================================

What:  Request/response models for POST /api/register.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Registration payload sent by the frontend after sign-in."""
    username: str = Field(description="Display name")
    email: str = Field(description="Identity key; one record per address")


class RegisterCreatedResponse(BaseModel):
    """201 body when a new user record was inserted."""
    message: str = Field(default="User registered successfully")


class RegisterExistsResponse(BaseModel):
    """200 body when the email is already registered (not treated as an error)."""
    exists: bool = Field(default=True)
