"""
Credential sign‑in.

``Auth`` plays the role of the authentication provider: it holds the
configured sign‑in strategies (only ``credentials`` here), verifies a
submitted form with the selected strategy and, on success, issues the
signed session token.  Every failure it recognises is raised as
``AuthError`` with a ``type`` naming the failure.

``AuthService.authenticate`` is the form action used by the login page:
it turns ``AuthError`` into a short message for the user and lets any
other exception through.
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from fastapi import Response
from pydantic import ValidationError

from ..core.config import settings
from ..core.security import create_access_token, verify_password
from ..schemas.auth import LoginForm, Session, UserRead
from .user_service import UserService


logger = logging.getLogger(__name__)


CREDENTIALS_SIGNIN = "CredentialsSignin"
CALLBACK_ROUTE_ERROR = "CallbackRouteError"
CONFIGURATION_ERROR = "Configuration"

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."
GENERIC_AUTH_MESSAGE = "Something went wrong."


class AuthError(Exception):
    """Failure reported by the authentication provider."""

    def __init__(self, type: str, message: Optional[str] = None) -> None:
        super().__init__(message or type)
        self.type = type


class CredentialsProvider:
    """E‑mail and password strategy backed by the ``users`` table."""

    id = "credentials"

    async def authorize(self, form_data: Mapping[str, Any]) -> Optional[UserRead]:
        """Return the matching user, or ``None`` if the credentials are wrong."""
        try:
            credentials = LoginForm.model_validate(
                {"email": form_data.get("email"), "password": form_data.get("password")}
            )
        except ValidationError:
            return None
        found = await UserService.get_user_with_password(credentials.email)
        if found is None:
            return None
        user, stored_hash = found
        if not verify_password(credentials.password, stored_hash):
            return None
        return user


class Auth:
    """Authentication provider with a registry of sign‑in strategies."""

    def __init__(self, providers: Iterable[CredentialsProvider]) -> None:
        self.providers: Dict[str, CredentialsProvider] = {p.id: p for p in providers}

    async def sign_in(
        self,
        provider_id: str,
        form_data: Mapping[str, Any],
        response: Optional[Response] = None,
    ) -> Session:
        """Verify ``form_data`` with the selected strategy and open a session.

        When ``response`` is given, the session token is written to it
        as an HTTP‑only cookie.

        Raises
        ------
        AuthError
            ``Configuration`` for an unknown strategy,
            ``CredentialsSignin`` when the credentials do not match and
            ``CallbackRouteError`` when the strategy itself fails.
        """
        provider = self.providers.get(provider_id)
        if provider is None:
            raise AuthError(CONFIGURATION_ERROR, f"Unknown sign-in provider {provider_id!r}")
        try:
            user = await provider.authorize(form_data)
        except Exception as exc:
            raise AuthError(CALLBACK_ROUTE_ERROR, str(exc)) from exc
        if user is None:
            raise AuthError(CREDENTIALS_SIGNIN)

        token = create_access_token({"sub": user.email, "user_id": user.id, "name": user.name})
        if response is not None:
            response.set_cookie(
                settings.session_cookie_name,
                token,
                max_age=settings.access_token_expire_minutes * 60,
                httponly=True,
                samesite="lax",
            )
        logger.info("User %s signed in", user.email)
        return Session(sub=user.email, user_id=user.id, name=user.name)


class AuthService:
    """Form action behind the login page."""

    @classmethod
    async def authenticate(
        cls,
        auth: Auth,
        form_data: Mapping[str, Any],
        response: Optional[Response] = None,
    ) -> Optional[str]:
        """Sign in with the ``credentials`` strategy.

        Returns ``None`` on success, ``"Invalid credentials."`` for a
        ``CredentialsSignin`` failure and ``"Something went wrong."`` for
        any other ``AuthError``.  Other exceptions propagate unchanged.
        """
        try:
            await auth.sign_in("credentials", form_data, response)
        except AuthError as error:
            if error.type == CREDENTIALS_SIGNIN:
                return INVALID_CREDENTIALS_MESSAGE
            logger.warning("Sign-in failed: %s (%s)", error.type, error)
            return GENERIC_AUTH_MESSAGE
        return None


auth = Auth(providers=[CredentialsProvider()])
