"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from starlette.middleware.sessions import SessionMiddleware

from wild_oasis.api.account import router as account_router
from wild_oasis.api.auth import router as auth_router
from wild_oasis.api.cabins import router as cabins_router
from wild_oasis.app_logging import configure_logging
from wild_oasis.containers import AppContainer
from wild_oasis.domain.errors import (
    Forbidden,
    NotFound,
    StoreOperationFailed,
    Unauthenticated,
    ValidationFailed,
    WildOasisError,
)

_STATUS_BY_ERROR: tuple[tuple[type[WildOasisError], int], ...] = (
    (Unauthenticated, status.HTTP_401_UNAUTHORIZED),
    (Forbidden, status.HTTP_403_FORBIDDEN),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (ValidationFailed, status.HTTP_422_UNPROCESSABLE_CONTENT),
    (StoreOperationFailed, status.HTTP_502_BAD_GATEWAY),
)

PROTECTED_PREFIX = "/account"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    settings = container.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        same_site="lax",
        https_only=settings.environment != "local",
    )

    app.include_router(auth_router)
    app.include_router(cabins_router)
    app.include_router(account_router)

    @app.exception_handler(WildOasisError)
    async def handle_domain_error(request: Request, exc: WildOasisError) -> Response:
        if (
            isinstance(exc, Unauthenticated)
            and request.method == "GET"
            and request.url.path.startswith(PROTECTED_PREFIX)
        ):
            return RedirectResponse(
                settings.login_path, status_code=status.HTTP_303_SEE_OTHER
            )
        status_code = _status_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("Request failed: path=%s error=%s", request.url.path, exc)
        return JSONResponse(
            status_code=status_code,
            content={"error": exc.kind, "message": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_invalid_request(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            content={
                "error": ValidationFailed.kind,
                "message": _describe_validation_errors(exc),
            },
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/login", response_class=HTMLResponse)
    async def login() -> HTMLResponse:
        """Sign-in page."""
        return HTMLResponse(_LOGIN_HTML)

    return app


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())[1:])
        message = error.get("msg", "Invalid value")
        parts.append(f"{field}: {message}" if field else message)
    return "; ".join(parts) or ValidationFailed.default_message


def _status_for(exc: WildOasisError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


_LOGIN_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>The Wild Oasis</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 4rem; }
      a { display: inline-block; padding: 0.8rem 1.4rem; border: 1px solid #444; }
    </style>
  </head>
  <body>
    <h1>Sign in to access your guest area</h1>
    <a href="/auth/signin">Continue with Google</a>
  </body>
</html>
"""
