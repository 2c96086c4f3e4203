# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Registration and credential checks.

Outcomes are returned as values (``User`` or ``AuthFailure``); turning them
into cookies and redirects is the route layer's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from adaquote.auth.passwords import hash_password, verify_password
from adaquote.core.errors import ValidationError
from adaquote.core.logging import get_logger
from adaquote.core.models import User
from adaquote.infra import users_repo
from adaquote.infra.database import Database

logger = get_logger(__name__)

USERNAME_MAX_LEN = 64


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str


@dataclass(frozen=True)
class Registration:
    username: str
    password: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""


@dataclass(frozen=True)
class AuthFailure:
    reason: str = "invalid_credentials"
    message: str = "Invalid username or password."


def _clean(value: str) -> str:
    return str(value or "").strip()


def validate_registration(reg: Registration) -> Registration:
    username = _clean(reg.username)
    if not username:
        raise ValidationError("Username is required.", field="username")
    if len(username) > USERNAME_MAX_LEN:
        raise ValidationError(f"Username must be at most {USERNAME_MAX_LEN} characters.", field="username")
    if not reg.password:
        raise ValidationError("Password is required.", field="password")
    email = _clean(reg.email)
    if email and "@" not in email:
        raise ValidationError("Email address is not valid.", field="email")
    return Registration(
        username=username,
        password=reg.password,
        first_name=_clean(reg.first_name),
        last_name=_clean(reg.last_name),
        email=email,
    )


async def register_user(db: Database, reg: Registration) -> User:
    """Hash the password and persist a new user.

    Raises ValidationError for bad input and StoreError (DuplicateUser for a
    taken username) when the insert fails.
    """
    clean = validate_registration(reg)
    user = await users_repo.create_user(
        db,
        username=clean.username,
        first_name=clean.first_name,
        last_name=clean.last_name,
        email=clean.email,
        password_hash=hash_password(clean.password),
    )
    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user


async def authenticate(db: Database, creds: Credentials) -> Union[User, AuthFailure]:
    username = _clean(creds.username)
    if not username or not creds.password:
        return AuthFailure(reason="missing_credentials")
    user = await users_repo.find_by_username(db, username)
    if user is None:
        logger.info("Login failed for unknown user %s", username)
        return AuthFailure()
    if not verify_password(user.password, creds.password):
        logger.info("Login failed for user %s (bad password)", username)
        return AuthFailure()
    logger.info("Login succeeded for user %s", username)
    return user
