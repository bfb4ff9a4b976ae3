"""Rate limiting (slowapi, keyed on client address).

One limiter per app so each app instance keeps its own counters.  The
limit is applied to every route through ``SlowAPIMiddleware``.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address


def build_limiter(rate_limit: str) -> Limiter:
    return Limiter(key_func=get_remote_address, default_limits=[rate_limit])
