from slowapi import Limiter
from slowapi.util import get_remote_address

from catalog.core.config import get_settings

# Both helpers below read get_settings() on every request, not through
# FastAPI dependency overrides; tests patch catalog.core.rate_limit.get_settings.
limiter = Limiter(key_func=get_remote_address)


def mutation_limit() -> str:
    """Limit applied to the mutating product routes."""
    return get_settings().rate_limit


def rate_limit_disabled() -> bool:
    return not get_settings().rate_limit_enabled
