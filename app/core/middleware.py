"""
Edge gate for the page routes.

Requests for the application pages (dashboard, cases, clients, ...) must carry
a valid session before they reach any handler; anything else is redirected to
the login page with the original path as ``callbackUrl``. The JSON API is not
gated here, its routes resolve the caller through ``get_current_user``.
"""
from __future__ import annotations

from typing import Iterable
from urllib.parse import urlencode

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from app.core.auth import get_session_token
from app.core.security import decode_access_token
from app.utils.logging import log_warning


def is_protected_path(path: str, prefixes: Iterable[str]) -> bool:
    for prefix in prefixes:
        prefix = prefix.rstrip("/")
        if path == prefix or path.startswith(prefix + "/"):
            return True
    return False


class AuthGateMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, protected_prefixes: Iterable[str], login_url: str):
        super().__init__(app)
        self.protected_prefixes = list(protected_prefixes)
        self.login_url = login_url

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if not is_protected_path(path, self.protected_prefixes):
            return await call_next(request)

        auth_header = request.headers.get("Authorization", "")
        bearer_token = None
        if auth_header.lower().startswith("bearer "):
            bearer_token = auth_header[7:].strip()

        token = get_session_token(request, bearer_token)
        if token and decode_access_token(token) is not None:
            return await call_next(request)

        log_warning("Page request without a valid session", method=request.method, path=path)
        target = f"{self.login_url}?{urlencode({'callbackUrl': path})}"
        return RedirectResponse(target, status_code=307)
