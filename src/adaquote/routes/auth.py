# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse

from adaquote.auth.session import sign_session
from adaquote.config import Settings
from adaquote.core.errors import StoreError
from adaquote.core.logging import get_logger
from adaquote.core.models import User
from adaquote.infra.database import Database
from adaquote.permissions import cookie_settings, get_db, get_settings, redirect_if_logged_in
from adaquote.services.auth_service import AuthFailure, Credentials, Registration, authenticate, register_user
from adaquote.web import redirect, redirect_with_flash, render

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _login_response(settings: Settings, user: User):
    resp = redirect("/user")
    resp.set_cookie(
        settings.cookie_name,
        sign_session(settings, user.id),
        max_age=settings.session_max_age,
        **cookie_settings(settings),
    )
    return resp


@router.get("/login", response_class=HTMLResponse, dependencies=[Depends(redirect_if_logged_in)])
def login_get(request: Request):
    return render(request, "auth/login.html")


@router.get("/register", response_class=HTMLResponse, dependencies=[Depends(redirect_if_logged_in)])
def register_get(request: Request):
    return render(request, "auth/register.html")


@router.post("/register")
async def register_post(
    username: str = Form(""),
    password: str = Form(""),
    first_name: str = Form(""),
    last_name: str = Form(""),
    email: str = Form(""),
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    reg = Registration(
        username=username,
        password=password,
        first_name=first_name,
        last_name=last_name,
        email=email,
    )
    try:
        user = await register_user(db, reg)
    except StoreError as e:
        logger.warning("Registration failed for %s: %s", username, e)
        return JSONResponse({"status": "error", "error": e.kind, "detail": e.message}, status_code=500)
    return _login_response(settings, user)


@router.post("/login")
async def login_post(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    result = await authenticate(db, Credentials(username=username, password=password))
    if isinstance(result, AuthFailure):
        return redirect_with_flash(request, "/auth/login", result.message)
    return _login_response(settings, result)


@router.get("/logout")
def logout(request: Request, settings: Settings = Depends(get_settings)):
    user = getattr(request.state, "user", None)
    if user is not None:
        logger.info("Logout for user %s", user.username)
    resp = redirect("/")
    resp.delete_cookie(settings.cookie_name)
    return resp
