"""
Pydantic schemas for company (employer) registration and profile management.
"""

from pydantic import BaseModel, EmailStr, Field, UUID4
from typing import Optional
from datetime import datetime


class CompanyCreateRequest(BaseModel):
    """Request schema for company registration."""
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    description: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    location: Optional[str] = None


class CompanyUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    description: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    location: Optional[str] = None


class CompanyResponse(BaseModel):
    """Company profile response (no sensitive data)."""
    id: UUID4
    name: str
    email: str
    description: Optional[str]
    website: Optional[str]
    logo_url: Optional[str]
    location: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True
