"""
Database models package.
"""

from jobify.models.principal import AdminRole, PrincipalType
from jobify.models.user import User
from jobify.models.company import Company
from jobify.models.admin import Admin

# Credential table for each principal type
PRINCIPAL_MODELS = {
    PrincipalType.USER: User,
    PrincipalType.COMPANY: Company,
    PrincipalType.ADMIN: Admin,
}

__all__ = ["AdminRole", "PrincipalType", "User", "Company", "Admin", "PRINCIPAL_MODELS"]
