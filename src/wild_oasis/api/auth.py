"""Sign-in and sign-out actions."""

from __future__ import annotations

import logging
import secrets
from typing import TYPE_CHECKING

import httpx
from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from wild_oasis.api.sessions import (
    OAUTH_STATE_KEY,
    clear_session,
    store_session,
)
from wild_oasis.domain.errors import SignInDenied

if TYPE_CHECKING:
    from wild_oasis.containers import AppContainer

router = APIRouter(prefix="/auth", tags=["auth"])

_logger = logging.getLogger(__name__)

ACCOUNT_PATH = "/account"
HOME_PATH = "/"


@router.get("/signin")
async def sign_in(request: Request) -> RedirectResponse:
    """Redirect to the OAuth consent screen."""
    container: AppContainer = request.app.state.container
    state = secrets.token_urlsafe(16)
    request.session[OAUTH_STATE_KEY] = state
    url = container.oauth_client.authorization_url(
        container.settings.oauth_redirect_uri, state
    )
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/callback")
async def sign_in_callback(
    request: Request,
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
) -> RedirectResponse:
    """Finish sign-in: resolve the guest and start a session."""
    container: AppContainer = request.app.state.container
    expected_state = request.session.pop(OAUTH_STATE_KEY, None)
    if error or not code or not state or state != expected_state:
        _logger.warning("Rejected OAuth callback: error=%s", error)
        raise SignInDenied()
    try:
        identity = await container.oauth_client.fetch_identity(
            code, container.settings.oauth_redirect_uri
        )
    except (httpx.HTTPError, RuntimeError) as exc:
        _logger.exception("OAuth code exchange failed")
        raise SignInDenied() from exc
    session = container.identity_service.sign_in(identity)
    store_session(request, session)
    _logger.info("Signed in: guest_id=%s", session.guest_id)
    return RedirectResponse(ACCOUNT_PATH, status_code=status.HTTP_303_SEE_OTHER)


@router.post("/signout")
async def sign_out(request: Request) -> RedirectResponse:
    """End the session and go home."""
    clear_session(request)
    return RedirectResponse(HOME_PATH, status_code=status.HTTP_303_SEE_OTHER)
