"""
Rate limiting configuration using slowapi.

Uses Redis as the backend in deployment so limits are shared across workers;
RATE_LIMIT_STORAGE_URI=memory:// keeps them in-process.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings


limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.rate_limit_storage_uri,
    strategy="fixed-window",
    enabled=settings.rate_limit_enabled,
)

# Pre-defined rate limit strings for use in route decorators:
#   @limiter.limit(RATE_AUTH)
RATE_AUTH = "5/minute"           # signup, login - brute-force protection
