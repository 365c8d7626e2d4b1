"""
Admin model.

Admins are the only principals with a role; the role is copied into the JWT
and checked by the route guard for administrative endpoints.
"""

from sqlalchemy import Column, Enum
from jobify.core.database import Base
from jobify.models.principal import AdminRole, CredentialMixin, PrincipalType


class Admin(CredentialMixin, Base):
    __tablename__ = "admins"

    principal_type = PrincipalType.ADMIN

    role = Column(
        Enum(AdminRole, name="adminrole", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=AdminRole.MODERATOR,
    )
