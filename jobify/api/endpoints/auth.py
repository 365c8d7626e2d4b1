"""
Authentication endpoints shared by users, companies and admins.

- POST /auth/login/user, /auth/login/company, /auth/login/admin
- POST /auth/validate: check a bearer token and echo its payload
- POST /auth/refresh: exchange a valid token for a fresh one
- GET /auth/me: profile of the token's principal
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobify.core.database import get_db
from jobify.core.deps import get_auth_service, get_bearer_token, get_current_principal, route_guard
from jobify.crud import principal as principal_crud
from jobify.models import PRINCIPAL_MODELS
from jobify.schemas.auth import (
    AuthResponse,
    LoginRequest,
    PrincipalProfile,
    TokenPayload,
    TokenRefreshResponse,
    TokenValidationResponse,
)
from jobify.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"], dependencies=[Depends(route_guard)])
logger = logging.getLogger(__name__)


@router.post(
    "/login/user",
    response_model=AuthResponse,
    response_model_exclude_none=True,
    responses={401: {"description": "Invalid credentials"}},
)
def login_user(request: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    """Authenticate a job seeker and return an access token."""
    return auth.login_user(request)


@router.post(
    "/login/company",
    response_model=AuthResponse,
    response_model_exclude_none=True,
    responses={401: {"description": "Invalid credentials"}},
)
def login_company(request: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    """Authenticate a company and return an access token."""
    return auth.login_company(request)


@router.post(
    "/login/admin",
    response_model=AuthResponse,
    response_model_exclude_none=True,
    responses={401: {"description": "Invalid credentials"}},
)
def login_admin(request: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    """Authenticate an admin; the admin's role is included in the token."""
    return auth.login_admin(request)


@router.post(
    "/validate",
    response_model=TokenValidationResponse,
    response_model_exclude_none=True,
    responses={401: {"description": "Invalid token"}},
)
def validate_token(
    token: str = Depends(get_bearer_token),
    auth: AuthService = Depends(get_auth_service),
):
    """Validate the bearer token and return its payload."""
    return TokenValidationResponse(valid=True, payload=auth.validate_token(token))


@router.post(
    "/refresh",
    response_model=TokenRefreshResponse,
    responses={401: {"description": "Invalid token"}},
)
def refresh_token(
    token: str = Depends(get_bearer_token),
    auth: AuthService = Depends(get_auth_service),
):
    """
    Exchange the current bearer token for a new one with a fresh expiry.

    The password is not re-checked and neither is the account itself.
    """
    return auth.refresh_token(token)


@router.get("/me", response_model=PrincipalProfile, response_model_exclude_none=True)
def read_current_principal(
    principal: TokenPayload = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """Get the profile of the authenticated principal."""
    model = PRINCIPAL_MODELS[principal.type]
    record = principal_crud.get_or_404(db, model, principal.sub)
    return PrincipalProfile(
        id=str(record.id),
        email=record.email,
        name=record.name,
        type=principal.type,
        role=getattr(record, "role", None),
    )
