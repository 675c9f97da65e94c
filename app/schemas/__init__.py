"""
Pydantic schemas for API validation and serialization.
"""
from app.schemas.base import (
    BaseSchema,
    ErrorResponse,
)
from app.schemas.auth import (
    LoginRequest,
    TokenResponse,
)
from app.schemas.user import (
    NewUser,
    UserResponse,
)
from app.schemas.job import (
    NewJob,
    JobResponse,
    CompanyBrief,
)
from app.schemas.company import (
    NewCompany,
    CompanyResponse,
)

__all__ = [
    # Base
    "BaseSchema",
    "ErrorResponse",
    # Auth
    "LoginRequest",
    "TokenResponse",
    # User
    "NewUser",
    "UserResponse",
    # Job
    "NewJob",
    "JobResponse",
    "CompanyBrief",
    # Company
    "NewCompany",
    "CompanyResponse",
]
