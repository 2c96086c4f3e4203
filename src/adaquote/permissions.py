# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request-scoped dependencies: store handle, settings and the session gate."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request

from adaquote.auth.session import verify_session
from adaquote.config import Settings
from adaquote.core.errors import AlreadyAuthenticated, LoginRequired
from adaquote.core.models import User
from adaquote.infra import users_repo
from adaquote.infra.database import Database


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Database:
    return request.app.state.db


async def load_user_from_request(request: Request) -> Optional[User]:
    settings = get_settings(request)
    token = request.cookies.get(settings.cookie_name, "")
    sess = verify_session(settings, token)
    if not sess:
        return None
    return await users_repo.find_by_id(get_db(request), sess.user_id)


def current_user_optional(request: Request) -> Optional[User]:
    """User attached by the auth middleware, if any."""
    return getattr(request.state, "user", None)


def require_login(user: Optional[User] = Depends(current_user_optional)) -> User:
    if user is None:
        raise LoginRequired("Login required")
    return user


def redirect_if_logged_in(user: Optional[User] = Depends(current_user_optional)) -> None:
    if user is not None:
        raise AlreadyAuthenticated(user.username)


def cookie_settings(settings: Settings) -> dict:
    return {"httponly": True, "samesite": "lax", "secure": settings.cookie_secure}
