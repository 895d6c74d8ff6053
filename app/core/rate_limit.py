from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from app.core.config import settings


def client_key(request: Request) -> str:
    """Guests are limited per guest cookie, everyone else per remote address."""
    guest_id = request.cookies.get(settings.guest_cookie_name)
    if guest_id:
        return f"guest:{guest_id}"
    return get_remote_address(request)


limiter = Limiter(key_func=client_key)


def rate_limit():
    if settings.rate_limit_enabled:
        return limiter.limit(settings.rate_limit)

    def decorator(func):
        return func

    return decorator
