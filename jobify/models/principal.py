"""
Shared pieces of the three credential models (users, companies, admins).

Every principal type keeps its own table, but all of them carry the same
identity and credential columns so authentication can treat them uniformly.
"""

import enum
import uuid
from sqlalchemy import Column, String, DateTime, Uuid, func


class PrincipalType(str, enum.Enum):
    """Kind of authenticable identity, carried in the token's "type" claim."""
    USER = "user"
    COMPANY = "company"
    ADMIN = "admin"


class AdminRole(str, enum.Enum):
    """Role attached to admin principals only."""
    SUPERADMIN = "superadmin"
    MODERATOR = "moderator"


class CredentialMixin:
    """Identity + password hash columns common to every principal table."""

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    # Unique per table, compared exactly as stored
    email = Column(String, unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)

    name = Column(String, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<{type(self).__name__}(id={self.id}, email='{self.email}')>"
