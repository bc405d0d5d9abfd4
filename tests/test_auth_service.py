from __future__ import annotations

import asyncio

import pytest
from fastapi import Response

from invoice_dashboard_api.app.core.config import settings
from invoice_dashboard_api.app.core.security import decode_access_token
from invoice_dashboard_api.app.services.auth_service import (
    Auth,
    AuthError,
    AuthService,
    CredentialsProvider,
)


USER_EMAIL = "user@nextmail.com"
USER_PASSWORD = "123456"


class RaisingAuth:
    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = []

    async def sign_in(self, provider_id, form_data, response=None):
        self.calls.append(provider_id)
        raise self.error


class SucceedingAuth:
    async def sign_in(self, provider_id, form_data, response=None):
        return None


def test_credentials_signin_maps_to_invalid_credentials() -> None:
    auth = RaisingAuth(AuthError("CredentialsSignin"))

    assert asyncio.run(AuthService.authenticate(auth, {})) == "Invalid credentials."
    assert auth.calls == ["credentials"]


@pytest.mark.parametrize("error_type", ["CallbackRouteError", "Configuration", "AccessDenied"])
def test_other_auth_errors_map_to_generic_message(error_type) -> None:
    auth = RaisingAuth(AuthError(error_type))

    assert asyncio.run(AuthService.authenticate(auth, {})) == "Something went wrong."


def test_non_auth_errors_propagate_unchanged() -> None:
    error = RuntimeError("boom")

    with pytest.raises(RuntimeError) as excinfo:
        asyncio.run(AuthService.authenticate(RaisingAuth(error), {}))

    assert excinfo.value is error


def test_success_returns_none() -> None:
    assert asyncio.run(AuthService.authenticate(SucceedingAuth(), {"email": "a@b.co"})) is None


def test_sign_in_sets_session_cookie(user) -> None:
    auth = Auth(providers=[CredentialsProvider()])
    response = Response()

    session = asyncio.run(
        auth.sign_in("credentials", {"email": USER_EMAIL, "password": USER_PASSWORD}, response)
    )

    assert session.sub == USER_EMAIL
    assert session.user_id == user.id
    cookie = response.headers["set-cookie"]
    assert cookie.startswith(f"{settings.session_cookie_name}=")
    assert "httponly" in cookie.lower()
    token = cookie.split(";", 1)[0].split("=", 1)[1]
    assert decode_access_token(token)["sub"] == USER_EMAIL


@pytest.mark.parametrize(
    "form",
    [
        {"email": USER_EMAIL, "password": "wrong-password"},
        {"email": "nobody@nextmail.com", "password": USER_PASSWORD},
        {"email": "not-an-email", "password": USER_PASSWORD},
        {"email": USER_EMAIL, "password": "123"},
        {},
    ],
)
def test_bad_credentials_raise_credentials_signin(user, form) -> None:
    auth = Auth(providers=[CredentialsProvider()])

    with pytest.raises(AuthError) as excinfo:
        asyncio.run(auth.sign_in("credentials", form))

    assert excinfo.value.type == "CredentialsSignin"


def test_unknown_provider_is_a_configuration_error() -> None:
    auth = Auth(providers=[CredentialsProvider()])

    with pytest.raises(AuthError) as excinfo:
        asyncio.run(auth.sign_in("github", {}))

    assert excinfo.value.type == "Configuration"


def test_store_failure_is_wrapped(tmp_path, monkeypatch) -> None:
    # A directory cannot be opened as a database file.
    monkeypatch.setattr(settings, "database_url", str(tmp_path))
    auth = Auth(providers=[CredentialsProvider()])

    with pytest.raises(AuthError) as excinfo:
        asyncio.run(auth.sign_in("credentials", {"email": USER_EMAIL, "password": USER_PASSWORD}))

    assert excinfo.value.type == "CallbackRouteError"
    assert excinfo.value.__cause__ is not None
    assert asyncio.run(
        AuthService.authenticate(auth, {"email": USER_EMAIL, "password": USER_PASSWORD})
    ) == "Something went wrong."
