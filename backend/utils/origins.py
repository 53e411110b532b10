# utils/origins.py
from typing import Callable, Iterable

from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware

from utils.errors import error_response

CORS_REJECTED = "The CORS policy for this site does not allow access from the specified Origin."


def is_origin_allowed(origin: str, allowed_origins: Iterable[str]) -> bool:
    # Non-browser callers send no Origin header
    if not origin:
        return True
    return origin in allowed_origins


# Rejects browser requests (preflights included) from origins outside the allow-list
class OriginGuardMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, allowed_origins: Iterable[str]):
        super().__init__(app)
        self.allowed_origins = frozenset(allowed_origins)

    async def dispatch(self, request: Request, call_next: Callable):
        origin = request.headers.get("origin")
        if not is_origin_allowed(origin, self.allowed_origins):
            return error_response(status.HTTP_403_FORBIDDEN, CORS_REJECTED)
        return await call_next(request)
