"""
Pydantic schemas for login, token validation and token refresh.

Auth responses are serialized in camelCase ("accessToken") to match what the
frontend client expects.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from typing import Optional

from jobify.models.principal import AdminRole, PrincipalType


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequest(BaseModel):
    """Request schema shared by the user, company and admin login endpoints."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class PasswordChangeRequest(BaseModel):
    """Request schema shared by the user, company and admin password endpoints."""
    new_password: str = Field(
        ...,
        min_length=6,
        max_length=72,  # bcrypt limit
    )


class TokenPayload(BaseModel):
    """
    Claims carried by an access token.

    "role" is only present for admin principals. "iat", "exp" and "jti" are added by
    the issuer and ignored when building a new token from an old one.
    """
    sub: str
    email: str
    type: PrincipalType
    role: Optional[AdminRole] = None
    iat: Optional[int] = None
    exp: Optional[int] = None
    jti: Optional[str] = None

    def claims(self) -> dict:
        """Identity claims only, ready to be signed into a fresh token."""
        return self.model_dump(mode="json", exclude={"iat", "exp", "jti"}, exclude_none=True)


class PrincipalProfile(CamelModel):
    """Public profile returned after login (never contains the password hash)."""
    id: str
    email: str
    name: str
    type: PrincipalType
    role: Optional[AdminRole] = None


class AuthResponse(CamelModel):
    access_token: str
    user: PrincipalProfile


class TokenValidationResponse(CamelModel):
    valid: bool = True
    payload: TokenPayload


class TokenRefreshResponse(CamelModel):
    access_token: str
