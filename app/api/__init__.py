"""
API package.
"""
from app.api.routes import api_router
from app.api.deps import (
    get_current_user,
    get_service,
)

__all__ = [
    "api_router",
    "get_current_user",
    "get_service",
]
