"""
Authentication routes - signup and login.
"""
from fastapi import APIRouter, Depends, Request, status

from app.api.deps import get_service
from app.core.exceptions import InvalidCredentialsException, RepositoryError
from app.core.logging import get_logger
from app.core.rate_limit import limiter, RATE_AUTH
from app.core.security import CLAIMS_TTL, create_access_token
from app.schemas.auth import LoginRequest, TokenResponse
from app.schemas.base import ErrorResponse
from app.schemas.user import NewUser, UserResponse
from app.services import Service

router = APIRouter(tags=["auth"])

logger = get_logger(__name__)


@router.post(
    "/signup",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
@limiter.limit(RATE_AUTH)
async def signup(
    request: Request,
    data: NewUser,
    service: Service = Depends(get_service),
):
    """Register a new user. The response never includes the password hash."""
    return await service.create_user(data)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}},
)
@limiter.limit(RATE_AUTH)
async def login(
    request: Request,
    data: LoginRequest,
    service: Service = Depends(get_service),
):
    """
    Login with email and password.

    Returns a signed access token carrying the login claims. Any failure to
    look the user up gives the same 401, so the response never reveals
    whether an email is registered.
    """
    try:
        claims = await service.login(data.email, data.password)
    except RepositoryError as e:
        logger.warning("login_lookup_failed", code=e.code)
        raise InvalidCredentialsException() from e

    return TokenResponse(
        access_token=create_access_token(claims),
        expires_in=int(CLAIMS_TTL.total_seconds()),
    )
