"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Each export fetches every user file and builds the ZIP in memory.
EXPORT_LIMIT = "20/minute"
SUGGESTIONS_LIMIT = "10/minute"
ADMIN_READ_LIMIT = "60/minute"

limit_export = limiter.limit(EXPORT_LIMIT)
limit_suggestions = limiter.limit(SUGGESTIONS_LIMIT)
limit_admin_read = limiter.limit(ADMIN_READ_LIMIT)
