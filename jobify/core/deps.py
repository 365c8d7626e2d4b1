"""
FastAPI dependencies for authentication and authorization.

route_guard is attached to every API router and enforces the policy the
matched route has in ROUTE_POLICIES before any handler code runs.
"""

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional

from jobify.core.database import get_db
from jobify.core.exceptions import AuthenticationError
from jobify.core.permissions import check_roles, policy_for
from jobify.core.security import TokenService, get_token_service
from jobify.schemas.auth import TokenPayload
from jobify.services.auth_service import AuthService


# HTTP Bearer token scheme (Authorization: Bearer <token>).
# auto_error is off so a missing header becomes our 401, not FastAPI's 403.
bearer_scheme = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """Return the raw token from the Authorization header, or raise 401."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Invalid token")
    return credentials.credentials


async def route_guard(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> None:
    """
    Enforce the matched route's access policy.

    1. Public routes pass without looking at the header
    2. Otherwise the bearer token must verify (401 if missing or invalid)
    3. Declared admin roles must include the token's role (403 otherwise)

    The verified payload is left on request.state.principal.
    """
    route = request.scope.get("route")
    policy = policy_for(getattr(route, "name", None))

    if policy.public:
        return

    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Invalid token")

    payload = tokens.verify(credentials.credentials)
    check_roles(policy, payload)
    request.state.principal = payload


def get_current_principal(request: Request) -> TokenPayload:
    """Payload of the token route_guard accepted for this request."""
    payload = getattr(request.state, "principal", None)
    if payload is None:
        raise AuthenticationError()
    return payload


def get_auth_service(
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(db, tokens)
