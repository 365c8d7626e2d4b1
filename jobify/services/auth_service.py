"""
Login, token validation and token refresh for all principal types.

The three login flows differ only in which credential table is searched, so
a single dispatcher picks the table from PRINCIPAL_MODELS by principal type.
"""

import logging
from sqlalchemy.orm import Session

from jobify.core.exceptions import AuthenticationError
from jobify.core.security import TokenService, dummy_verify, verify_password
from jobify.crud import principal as principal_crud
from jobify.models import PRINCIPAL_MODELS
from jobify.models.principal import PrincipalType
from jobify.schemas.auth import (
    AuthResponse,
    LoginRequest,
    PrincipalProfile,
    TokenPayload,
    TokenRefreshResponse,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    def __init__(self, db: Session, tokens: TokenService):
        self.db = db
        self.tokens = tokens

    def login(self, principal_type: PrincipalType, credentials: LoginRequest) -> AuthResponse:
        """
        Authenticate a principal of the given type and issue an access token.

        Unknown email and wrong password raise the same AuthenticationError so
        the response never reveals whether an account exists.
        """
        model = PRINCIPAL_MODELS[principal_type]
        record = principal_crud.get_by_email(self.db, model, credentials.email)

        if record is None:
            dummy_verify()
            logger.warning(f"Failed {principal_type.value} login: unknown account")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not verify_password(credentials.password, record.hashed_password):
            logger.warning(f"Failed {principal_type.value} login for {record.id}: wrong password")
            raise AuthenticationError(INVALID_CREDENTIALS)

        role = getattr(record, "role", None)
        payload = TokenPayload(
            sub=str(record.id),
            email=record.email,
            type=principal_type,
            role=role,
        )

        logger.info(f"{principal_type.value.capitalize()} logged in: {record.id}")

        return AuthResponse(
            access_token=self.tokens.issue(payload),
            user=PrincipalProfile(
                id=str(record.id),
                email=record.email,
                name=record.name,
                type=principal_type,
                role=role,
            ),
        )

    def login_user(self, credentials: LoginRequest) -> AuthResponse:
        return self.login(PrincipalType.USER, credentials)

    def login_company(self, credentials: LoginRequest) -> AuthResponse:
        return self.login(PrincipalType.COMPANY, credentials)

    def login_admin(self, credentials: LoginRequest) -> AuthResponse:
        return self.login(PrincipalType.ADMIN, credentials)

    def validate_token(self, token: str) -> TokenPayload:
        return self.tokens.verify(token)

    def refresh_token(self, old_token: str) -> TokenRefreshResponse:
        # Trust comes from the old token alone; the account is not re-checked.
        return TokenRefreshResponse(access_token=self.tokens.refresh(old_token))
