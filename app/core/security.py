"""
Security utilities for authentication.
Handles password hashing, login claims and JWT signing.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, List, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import settings
from app.core.exceptions import HashingError
from app.core.logging import get_logger
from app.schemas.base import BaseSchema

logger = get_logger(__name__)

CLAIMS_ISSUER = "service project"
CLAIMS_AUDIENCE = "users"
CLAIMS_TTL = timedelta(hours=1)


# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class PasswordHasher:
    """One-way hashing and verification of user passwords."""

    def __init__(self, context: CryptContext = pwd_context):
        self.context = context

    def hash(self, password: str) -> str:
        """
        Hash a password.

        Raises:
            HashingError: If the backend rejects the password.
        """
        try:
            return self.context.hash(password)
        except (ValueError, TypeError) as exc:
            logger.warning("password_hash_failed", error=str(exc))
            raise HashingError() from exc

    def verify(self, password: str, hashed_password: str) -> bool:
        """Verify a password against a hash. Unreadable hashes never match."""
        try:
            return self.context.verify(password, hashed_password)
        except (ValueError, TypeError) as exc:
            logger.warning("password_verify_failed", error=str(exc))
            return False


class Claims(BaseSchema):
    """Registered JWT claims issued at login."""

    issuer: str
    subject: str
    audience: List[str]
    issued_at: datetime
    expires_at: datetime

    def to_payload(self) -> dict[str, Any]:
        """Registered claim names, ready for signing."""
        return {
            "iss": self.issuer,
            "sub": self.subject,
            "aud": list(self.audience),
            "iat": self.issued_at,
            "exp": self.expires_at,
        }


def build_claims(user_id: int, now: Optional[datetime] = None) -> Claims:
    """Build the claims for a freshly authenticated user."""
    issued_at = now or datetime.now(timezone.utc)
    return Claims(
        issuer=CLAIMS_ISSUER,
        subject=str(user_id),
        audience=[CLAIMS_AUDIENCE],
        issued_at=issued_at,
        expires_at=issued_at + CLAIMS_TTL,
    )


def create_access_token(claims: Claims) -> str:
    """
    Sign login claims into a JWT access token.

    Args:
        claims: Claims produced by build_claims

    Returns:
        Encoded JWT token string
    """
    return jwt.encode(claims.to_payload(), settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str) -> Optional[dict[str, Any]]:
    """
    Decode and validate a JWT token.

    Checks signature, expiry, issuer and audience.

    Args:
        token: JWT token string

    Returns:
        Decoded payload or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            audience=CLAIMS_AUDIENCE,
            issuer=CLAIMS_ISSUER,
        )
        return payload
    except JWTError:
        return None
