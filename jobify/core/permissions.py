"""
Declarative access rules for every API route.

Each route is looked up by name in ROUTE_POLICIES. A policy either marks the
route public (no token needed) or requires a valid token, optionally limited
to a set of admin roles. Routes missing from the table require a valid token.

Administrative routes are never public: the first superadmin is created with
create_admin.py rather than through an open endpoint.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional
from uuid import UUID

from jobify.core.exceptions import AuthorizationError
from jobify.models.principal import AdminRole, PrincipalType
from jobify.schemas.auth import TokenPayload


@dataclass(frozen=True)
class RoutePolicy:
    public: bool = False
    roles: FrozenSet[AdminRole] = frozenset()

    def __post_init__(self):
        if self.public and self.roles:
            raise ValueError("A route cannot be public and role-restricted at the same time")


def require_roles(*roles: AdminRole) -> RoutePolicy:
    return RoutePolicy(roles=frozenset(roles))


PUBLIC = RoutePolicy(public=True)
AUTHENTICATED = RoutePolicy()
SUPERADMIN_ONLY = require_roles(AdminRole.SUPERADMIN)
ANY_ADMIN = require_roles(AdminRole.SUPERADMIN, AdminRole.MODERATOR)


ROUTE_POLICIES: Dict[str, RoutePolicy] = {
    # Authentication
    "login_user": PUBLIC,
    "login_company": PUBLIC,
    "login_admin": PUBLIC,
    "validate_token": PUBLIC,
    "refresh_token": AUTHENTICATED,
    "read_current_principal": AUTHENTICATED,

    # Users
    "register_user": PUBLIC,
    "read_user": AUTHENTICATED,
    "update_user": AUTHENTICATED,
    "change_user_password": AUTHENTICATED,
    "delete_user": SUPERADMIN_ONLY,

    # Companies
    "register_company": PUBLIC,
    "read_company": AUTHENTICATED,
    "update_company": AUTHENTICATED,
    "change_company_password": AUTHENTICATED,
    "delete_company": SUPERADMIN_ONLY,

    # Admins
    "create_admin": SUPERADMIN_ONLY,
    "list_admins": SUPERADMIN_ONLY,
    "read_system_stats": ANY_ADMIN,
    "read_admin": SUPERADMIN_ONLY,
    "update_admin": SUPERADMIN_ONLY,
    "change_admin_password": SUPERADMIN_ONLY,
    "delete_admin": SUPERADMIN_ONLY,
}


def policy_for(route_name: Optional[str]) -> RoutePolicy:
    return ROUTE_POLICIES.get(route_name, AUTHENTICATED)


def check_roles(policy: RoutePolicy, payload: TokenPayload) -> None:
    """
    Raise AuthorizationError when the policy lists roles and the token's role
    is not one of them. Non-admin tokens carry no role and always fail here.
    """
    if policy.roles and payload.role not in policy.roles:
        raise AuthorizationError()


def check_owner(payload: TokenPayload, principal_type: PrincipalType, record_id: UUID) -> None:
    """Allow a principal to manage its own record; superadmins may manage any."""
    if payload.role == AdminRole.SUPERADMIN:
        return
    if payload.type != principal_type or payload.sub != str(record_id):
        raise AuthorizationError()
