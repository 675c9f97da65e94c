"""Core module exports."""
from app.core.config import settings, get_settings
from app.core.database import Base, get_db, init_db, close_db, engine, async_session_maker
from app.core.security import (
    PasswordHasher,
    Claims,
    build_claims,
    create_access_token,
    decode_token,
)
from app.core.exceptions import (
    APIException,
    HashingError,
    RepositoryError,
    NotFoundError,
    ConflictError,
    AuthenticationError,
    WrongPasswordError,
    InvalidTokenException,
    UserNotFoundException,
    CompanyNotFoundException,
    JobNotFoundException,
    EmailAlreadyExistsException,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    "engine",
    "async_session_maker",
    # Security
    "PasswordHasher",
    "Claims",
    "build_claims",
    "create_access_token",
    "decode_token",
    # Exceptions
    "APIException",
    "HashingError",
    "RepositoryError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "WrongPasswordError",
    "InvalidTokenException",
    "UserNotFoundException",
    "CompanyNotFoundException",
    "JobNotFoundException",
    "EmailAlreadyExistsException",
]
