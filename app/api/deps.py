"""
API dependencies for dependency injection.
"""
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.security import decode_token
from app.core.exceptions import AuthenticationError, InvalidTokenException
from app.models.user import User
from app.repositories.sqlalchemy_repository import SQLAlchemyRepository
from app.repositories.user_repository import UserRepository
from app.services import Service


# Security scheme
security = HTTPBearer(auto_error=False)

_user_repo = UserRepository()


async def get_service(db: AsyncSession = Depends(get_db)) -> Service:
    """Build the service over a repository bound to this request's session."""
    return Service(SQLAlchemyRepository(db))


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Get the user named by the bearer token's subject.

    Raises:
        AuthenticationError: If no token provided
        InvalidTokenException: If token is invalid, expired or names no user
    """
    if not credentials:
        raise AuthenticationError("Authentication required")

    payload = decode_token(credentials.credentials)
    if not payload:
        raise InvalidTokenException()

    subject = payload.get("sub")
    if not subject or not subject.isdigit():
        raise InvalidTokenException()

    user = await _user_repo.get_by_id(db, int(subject))
    if not user:
        raise InvalidTokenException()

    return user
