"""Rate limiting configuration using slowapi."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

# Create limiter instance
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.RATE_LIMIT_PER_MINUTE}/minute"],
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)

# Specific rate limits for write endpoints
RATE_LIMITS = {
    "profile_submit": "10/minute",
    "simulator": "60/minute",
    "watchlist_toggle": "30/minute",
    "preferences_update": "30/minute",
}
