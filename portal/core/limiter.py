"""Rate limiter instance for SlowAPI.

Shared so main (app.state.limiter) and route modules use one instance.
Analytics reports fan out several backend queries each, so they carry
their own limit.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from portal.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def analytics_limit() -> str:
    """Limit string for analytics routes (ANALYTICS_RATE_LIMIT, e.g. '60/minute')."""
    return get_settings().analytics_rate_limit


limit_analytics = limiter.limit(analytics_limit)
