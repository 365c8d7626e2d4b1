"""
Security utilities for JWT authentication and password hashing.

Implements stateless JWT authentication (HS256, shared secret) for the three
principal types. Passwords are hashed using bcrypt.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError

from jobify.core.config import settings
from jobify.core.exceptions import AuthenticationError
from jobify.schemas.auth import TokenPayload

logger = logging.getLogger(__name__)

# Password hashing context (bcrypt)
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def _truncate(password: str) -> bytes:
    # Bcrypt has a 72-byte limit
    return password.encode('utf-8')[:72]


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Returns False for any mismatch, including hashes passlib does not
    recognize.
    """
    try:
        return pwd_context.verify(_truncate(plain_password), hashed_password)
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Note: Bcrypt has a 72-byte limit. Passwords longer than 72 bytes
    are automatically truncated to comply with this limitation.
    """
    return pwd_context.hash(_truncate(password))


def dummy_verify() -> None:
    """Spend one hash verification so unknown emails cost as much as wrong passwords."""
    pwd_context.dummy_verify()


class TokenService:
    """
    Issues, verifies and refreshes signed access tokens.

    The signing secret is injected at construction and never exposed; one
    instance is built from settings at import time (token_service below).
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60 * 24):
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def __repr__(self):
        return f"TokenService(algorithm={self.algorithm!r}, expire_minutes={self.expire_minutes})"

    @classmethod
    def from_settings(cls, config=settings) -> "TokenService":
        return cls(
            secret_key=config.SECRET_KEY.get_secret_value(),
            algorithm=config.ALGORITHM,
            expire_minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES,
        )

    def issue(self, payload: TokenPayload, expires_delta: Optional[timedelta] = None) -> str:
        """
        Create a JWT access token.

        Args:
            payload: Identity claims (sub, email, type, role for admins)
            expires_delta: Optional lifetime (default: ACCESS_TOKEN_EXPIRE_MINUTES)

        Returns:
            Encoded JWT token as a string
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else timedelta(minutes=self.expire_minutes))

        to_encode = payload.claims()
        to_encode.update({"iat": now, "exp": expire, "jti": uuid.uuid4().hex})
        return jwt.encode(to_encode, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenPayload:
        """
        Decode and validate a JWT token.

        Raises:
            AuthenticationError: If the token is malformed, forged, expired, or
                its claims are not a valid payload
        """
        if not token:
            raise AuthenticationError("Invalid token")

        try:
            claims = jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
            return TokenPayload.model_validate(claims)
        except (JWTError, ValidationError) as e:
            logger.info(f"Token rejected: {type(e).__name__}")
            raise AuthenticationError("Invalid token")

    def refresh(self, old_token: str) -> str:
        """
        Issue a new token carrying the same identity claims as old_token.

        Only the old token's signature and expiry are checked; the credential
        store is not consulted, so a deleted account can keep refreshing
        until its current token lapses.
        """
        payload = self.verify(old_token)
        return self.issue(payload)


token_service = TokenService.from_settings()


def get_token_service() -> TokenService:
    """FastAPI dependency returning the process-wide token service."""
    return token_service
