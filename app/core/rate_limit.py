"""Rate limiting for the scoring endpoints (slowapi)."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

# Keyed by client address; individual routes pick their own limit strings
limiter = Limiter(key_func=get_remote_address)


def scoring_limit() -> str:
    """Limit string for scoring routes, read at request time so tests can override it."""
    return settings.scoring_rate_limit
