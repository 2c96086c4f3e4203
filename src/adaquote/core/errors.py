# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception taxonomy shared by the store, services and HTTP layer.

Services raise these; only the handlers registered in ``adaquote.app``
translate them into HTTP responses.
"""

from __future__ import annotations


class AdaquoteError(Exception):
    """Base class for application errors."""

    kind = "error"
    status_code = 400

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.kind, "detail": self.message}


class ConfigError(AdaquoteError):
    kind = "config_error"
    status_code = 500


class StoreError(AdaquoteError):
    """Persistence failure (connection error, constraint violation...)."""

    kind = "store_error"
    status_code = 400


class DuplicateUser(StoreError):
    kind = "duplicate_user"


class ValidationError(AdaquoteError):
    kind = "validation_error"
    status_code = 400

    def __init__(self, message: str = "", *, field: str = "") -> None:
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        out = super().to_dict()
        if self.field:
            out["field"] = self.field
        return out


class NotFound(AdaquoteError):
    kind = "not_found"
    status_code = 404


class LoginRequired(AdaquoteError):
    """Raised by the session gate when a protected route is hit anonymously."""

    kind = "login_required"
    status_code = 303


class AlreadyAuthenticated(AdaquoteError):
    """Raised by the session gate to keep logged-in users off login/register."""

    kind = "already_authenticated"
    status_code = 303
