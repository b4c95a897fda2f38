# src/common/rate_limit.py

from slowapi import Limiter
from slowapi.util import get_remote_address

from src.common.config import settings

# Keyed by client address, in-memory storage (resets on restart).
# The contact route adds its own tighter limit on top of the default.
# For production with multiple workers, switch to Redis:
#   limiter = Limiter(key_func=get_remote_address, storage_uri="redis://localhost:6379")
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.DEFAULT_RATE_LIMIT],
    enabled=settings.RATE_LIMIT_ENABLED,
)
