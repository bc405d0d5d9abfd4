"""Session authorization middleware."""

from urllib.parse import urlencode

from fastapi import Request, Response
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.authorization import Deny, RedirectTo, authorize
from ..core.config import settings
from ..core.security import read_session


def is_public_path(path: str) -> bool:
    """True when ``path`` is one of the public prefixes or lies below one."""
    return any(
        path == prefix or path.startswith(prefix.rstrip("/") + "/")
        for prefix in settings.public_prefixes
    )


class AuthorizationMiddleware(BaseHTTPMiddleware):
    """Apply the authorization gate to every non‑public request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path

        # API helpers and the generated docs are never gated
        if is_public_path(path):
            return await call_next(request)

        decision = authorize(read_session(request) is not None, path)

        if isinstance(decision, Deny):
            # Unauthenticated dashboard access goes to the sign-in page,
            # remembering where the user was heading.
            query = urlencode({"callbackUrl": str(request.url)})
            return RedirectResponse(f"{settings.sign_in_path}?{query}", status_code=303)

        if isinstance(decision, RedirectTo):
            return RedirectResponse(decision.url, status_code=303)

        return await call_next(request)
