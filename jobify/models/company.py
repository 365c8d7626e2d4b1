"""
Company model: employers that publish job posts.
"""

from sqlalchemy import Column, String, Text
from jobify.core.database import Base
from jobify.models.principal import CredentialMixin, PrincipalType


class Company(CredentialMixin, Base):
    __tablename__ = "companies"

    principal_type = PrincipalType.COMPANY

    description = Column(Text, nullable=True)
    website = Column(String, nullable=True)
    logo_url = Column(String, nullable=True)
    location = Column(String, nullable=True)
