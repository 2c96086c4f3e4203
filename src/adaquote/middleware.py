# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from urllib.parse import parse_qs

OVERRIDABLE_METHODS = {"PUT", "PATCH", "DELETE"}


class MethodOverrideMiddleware:
    """Let HTML forms reach PUT/DELETE routes via ``POST ...?_method=PUT``."""

    def __init__(self, app) -> None:
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http" and scope["method"] == "POST":
            params = parse_qs(scope.get("query_string", b"").decode("latin-1"))
            override = (params.get("_method") or [""])[0].strip().upper()
            if override in OVERRIDABLE_METHODS:
                scope = dict(scope, method=override)
        await self.app(scope, receive, send)
