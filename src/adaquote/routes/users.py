# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse

from adaquote.core.models import User
from adaquote.permissions import require_login
from adaquote.web import render

router = APIRouter(tags=["users"])


@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    return render(request, "index.html")


@router.get("/user")
def profile(user: User = Depends(require_login)):
    return JSONResponse({"user": "user profile page placeholder", "userInfo": user.public()})
