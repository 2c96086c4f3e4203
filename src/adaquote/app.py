# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application factory.

The store handle and settings live on ``app.state`` and reach handlers
through the dependencies in :mod:`adaquote.permissions`.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from adaquote.config import Settings, load_settings
from adaquote.core.errors import AdaquoteError, AlreadyAuthenticated, LoginRequired, StoreError, ValidationError
from adaquote.core.logging import configure_logging, get_logger
from adaquote.infra.database import Database
from adaquote.middleware import MethodOverrideMiddleware
from adaquote.permissions import load_user_from_request
from adaquote.routes import auth, quotes, users
from adaquote.web import BASE_DIR

logger = get_logger(__name__)

STATIC_PREFIX = "/static"


@asynccontextmanager
async def _lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Starting Adaquote (env=%s, database=%s)", settings.env, settings.database_path)
    await app.state.db.init_schema()
    yield


async def _login_required_handler(request: Request, exc: LoginRequired):
    return RedirectResponse(url="/auth/login", status_code=303)


async def _already_authenticated_handler(request: Request, exc: AlreadyAuthenticated):
    return RedirectResponse(url="/user", status_code=303)


async def _app_error_handler(request: Request, exc: AdaquoteError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc)
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


async def _request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed path/query/form values with the same 400 body as other input errors."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = first.get("loc") or ()
    field = str(loc[-1]) if loc else ""
    err = ValidationError(f"Invalid value for '{field}': {first.get('msg', 'invalid input')}", field=field)
    return await _app_error_handler(request, err)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Adaquote", lifespan=_lifespan)
    app.state.settings = settings
    app.state.db = Database(settings.database_path)

    @app.middleware("http")
    async def _auth_middleware(request: Request, call_next):
        if request.url.path.startswith(STATIC_PREFIX + "/"):
            request.state.user = None
            return await call_next(request)
        try:
            request.state.user = await load_user_from_request(request)
        except StoreError as e:
            logger.warning("Could not load session user, continuing anonymous: %s", e)
            request.state.user = None
        return await call_next(request)

    app.add_middleware(MethodOverrideMiddleware)

    app.add_exception_handler(LoginRequired, _login_required_handler)
    app.add_exception_handler(AlreadyAuthenticated, _already_authenticated_handler)
    app.add_exception_handler(AdaquoteError, _app_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)

    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")
    app.include_router(users.router)
    app.include_router(auth.router)
    app.include_router(quotes.router)
    return app
