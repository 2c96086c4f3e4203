# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from itsdangerous import BadSignature, BadTimeSignature, URLSafeTimedSerializer

from adaquote.config import Settings

SESSION_SALT = "adaquote.session.v1"
FLASH_SALT = "adaquote.flash.v1"
FLASH_MAX_AGE_SECONDS = 300


def _serializer(settings: Settings, salt: str) -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(secret_key=settings.secret_key, salt=salt)


@dataclass(frozen=True)
class SessionData:
    user_id: int


def sign_session(settings: Settings, user_id: int) -> str:
    return _serializer(settings, SESSION_SALT).dumps({"uid": int(user_id)})


def verify_session(settings: Settings, token: str, *, max_age: Optional[int] = None) -> Optional[SessionData]:
    if not token:
        return None
    s = _serializer(settings, SESSION_SALT)
    try:
        data = s.loads(token, max_age=max_age if max_age is not None else settings.session_max_age)
    except (BadSignature, BadTimeSignature):
        return None
    uid = (data or {}).get("uid") if isinstance(data, dict) else None
    try:
        uid = int(uid)
    except (TypeError, ValueError):
        return None
    if uid <= 0:
        return None
    return SessionData(user_id=uid)


def sign_flash(settings: Settings, message: str, *, category: str = "error") -> str:
    return _serializer(settings, FLASH_SALT).dumps({"m": message, "c": category})


def read_flash(settings: Settings, token: str) -> Optional[dict]:
    """Decode a flash cookie into ``{"message", "category"}`` or None."""
    if not token:
        return None
    try:
        data = _serializer(settings, FLASH_SALT).loads(token, max_age=FLASH_MAX_AGE_SECONDS)
    except (BadSignature, BadTimeSignature):
        return None
    if not isinstance(data, dict) or not data.get("m"):
        return None
    return {"message": str(data["m"]), "category": str(data.get("c") or "error")}
