"""Rate limiting configuration using slowapi.

Provides a module-level Limiter instance that routers import for
per-endpoint limits, wired into the FastAPI app in main.py.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

# Only the endpoints decorated with @limiter.limit(...) are limited.
limiter = Limiter(key_func=get_remote_address)
