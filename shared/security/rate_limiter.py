"""
Throttling for the public order form.

Buyers who send a valid token are counted per account, anonymous buyers per
client address. The order limit is looked up on every request, so changing
``settings.ORDER_RATE_LIMIT`` applies without re-registering the route.
"""
from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from shared.config import settings
from .jwt_handler import verify_access_token


def _token_subject(request: Request) -> str | None:
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    payload = verify_access_token(token)
    return payload.get("sub") if payload else None


def user_id_or_ip(request: Request) -> str:
    subject = _token_subject(request)
    if subject:
        return f"user:{subject}"
    return f"ip:{get_remote_address(request)}"


def order_rate_limit() -> str:
    return settings.ORDER_RATE_LIMIT


limiter = Limiter(key_func=user_id_or_ip)
