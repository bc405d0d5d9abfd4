"""
Pydantic models for sign‑in.

``LoginForm`` is what the credentials provider accepts from the login
form; ``Session`` is the signed payload stored in the session cookie.
``UserCreate``/``UserRead`` are used by the management CLI that seeds
dashboard users.
"""

from typing import Optional

from pydantic import BaseModel, Field


EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class LoginForm(BaseModel):
    email: str = Field(..., pattern=EMAIL_PATTERN, examples=["user@nextmail.com"])
    password: str = Field(..., min_length=6, examples=["123456"])


class UserCreate(BaseModel):
    """Schema for registering a dashboard user."""

    name: str = Field(..., min_length=1, examples=["User"])
    email: str = Field(..., pattern=EMAIL_PATTERN, examples=["user@nextmail.com"])
    password: str = Field(..., min_length=6)


class UserRead(BaseModel):
    id: str
    name: str
    email: str


class Session(BaseModel):
    """Claims carried by the session token."""

    sub: str
    user_id: Optional[str] = None
    name: Optional[str] = None
    exp: Optional[int] = None
