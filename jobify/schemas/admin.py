"""
Pydantic schemas for admin provisioning and the system statistics endpoint.
"""

from pydantic import BaseModel, EmailStr, Field, UUID4
from typing import Optional
from datetime import datetime

from jobify.models.principal import AdminRole


class AdminCreateRequest(BaseModel):
    """Request schema for provisioning a new admin."""
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    role: AdminRole = AdminRole.MODERATOR


class AdminUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    role: Optional[AdminRole] = None


class AdminResponse(BaseModel):
    """Admin profile response (no sensitive data)."""
    id: UUID4
    name: str
    email: str
    role: AdminRole
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


class SystemStatsResponse(BaseModel):
    """Record counts per principal type."""
    total_users: int
    total_companies: int
    total_admins: int
