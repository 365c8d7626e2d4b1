"""
User model: job seekers who apply to posts and save jobs.
"""

from sqlalchemy import Column, String
from jobify.core.database import Base
from jobify.models.principal import CredentialMixin, PrincipalType


class User(CredentialMixin, Base):
    __tablename__ = "users"

    principal_type = PrincipalType.USER

    phone = Column(String, nullable=True)
    avatar_url = Column(String, nullable=True)
    resume_url = Column(String, nullable=True)
