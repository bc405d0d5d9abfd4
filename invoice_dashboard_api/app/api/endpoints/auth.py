"""
Sign‑in endpoint.

Accepts the login form (``email``, ``password``).  On success the
session cookie is set and the browser is sent to the dashboard; on
failure the short message produced by ``AuthService.authenticate`` is
returned so the login form can display it.
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from invoice_dashboard_api.app.core.config import settings
from invoice_dashboard_api.app.services.auth_service import AuthService, auth


router = APIRouter()


@router.post("/login")
async def login(request: Request):
    form = await request.form()
    response = RedirectResponse(settings.dashboard_path, status_code=status.HTTP_303_SEE_OTHER)
    error_message = await AuthService.authenticate(auth, form, response)
    if error_message:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": error_message},
        )
    return response
