"""
Admin Session Middleware

The back-office is protected by a single shared password. A successful
login sets an http-only cookie carrying a fixed session flag; requests
presenting that cookie are treated as admin requests.
"""

import hmac
import logging
from typing import Callable

from fastapi import HTTPException, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.config import settings

logger = logging.getLogger(__name__)

SESSION_FLAG = "authenticated"


class AdminSessionMiddleware(BaseHTTPMiddleware):
    """Marks each request with whether it carries the admin session flag"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        session = request.cookies.get(settings.admin_cookie_name)
        request.state.admin_authenticated = session == SESSION_FLAG
        return await call_next(request)


def check_password(password: str) -> bool:
    """Compare against the configured shared secret"""
    if not settings.admin_enabled:
        logger.warning("Admin login attempted but no ADMIN_PASSWORD is configured")
        return False
    return hmac.compare_digest(password.encode(), settings.admin_password.encode())


def start_session(response: Response) -> None:
    response.set_cookie(
        key=settings.admin_cookie_name,
        value=SESSION_FLAG,
        max_age=settings.admin_session_max_age,
        httponly=True,
        secure=settings.cookie_secure,
        path="/",
    )


def end_session(response: Response) -> None:
    response.delete_cookie(key=settings.admin_cookie_name, path="/")


class AdminDependency:
    """
    FastAPI dependency for admin-only routes.

    Reads the flag set by AdminSessionMiddleware.
    """

    def __init__(self, require_admin: bool = True):
        self.require_admin = require_admin

    async def __call__(self, request: Request) -> bool:
        is_admin = getattr(request.state, "admin_authenticated", False)

        if self.require_admin and not is_admin:
            raise HTTPException(status_code=401, detail="Unauthorized")

        return is_admin


# Dependency instances
require_admin = AdminDependency(require_admin=True)
optional_admin = AdminDependency(require_admin=False)
