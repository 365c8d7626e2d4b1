"""
Pydantic schemas for user (job seeker) registration and profile management.
"""

from pydantic import BaseModel, EmailStr, Field, UUID4
from typing import Optional
from datetime import datetime


class UserCreateRequest(BaseModel):
    """Request schema for user registration."""
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(
        ...,
        min_length=6,
        max_length=72,  # bcrypt limit
        description="Password must be 6-72 characters"
    )
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    resume_url: Optional[str] = None


class UserUpdateRequest(BaseModel):
    """Partial profile update. Passwords change through the password endpoint."""
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    resume_url: Optional[str] = None


class UserResponse(BaseModel):
    """User profile response (no sensitive data)."""
    id: UUID4
    name: str
    email: str
    phone: Optional[str]
    avatar_url: Optional[str]
    resume_url: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True
