# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response helpers shared by the routers (templates, redirects, flash)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from adaquote.auth.session import read_flash, sign_flash
from adaquote.permissions import current_user_optional, get_settings

BASE_DIR = Path(__file__).resolve().parent
DOCUMENT_TITLE = "Adaquote!"

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def render(request: Request, template_name: str, ctx: Optional[dict] = None, *, status_code: int = 200):
    """TemplateResponse wrapper injecting the current user and consuming any flash."""
    settings = get_settings(request)
    flash_token = request.cookies.get(settings.flash_cookie_name, "")
    base_ctx = {
        "document_title": DOCUMENT_TITLE,
        "current_user": current_user_optional(request),
        "flash": read_flash(settings, flash_token),
    }
    merged = {**base_ctx, **(ctx or {})}
    resp = templates.TemplateResponse(request, template_name, merged, status_code=status_code)
    if flash_token:
        resp.delete_cookie(settings.flash_cookie_name)
    return resp


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=303)


def redirect_with_flash(request: Request, url: str, message: str, *, category: str = "error") -> RedirectResponse:
    settings = get_settings(request)
    resp = redirect(url)
    resp.set_cookie(
        settings.flash_cookie_name,
        sign_flash(settings, message, category=category),
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
    )
    return resp
