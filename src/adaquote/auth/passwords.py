# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerifyMismatchError

_PH = PasswordHasher()


def hash_password(plain: str) -> str:
    """Hash ``plain`` with argon2id; every call draws a fresh random salt."""
    if not plain:
        raise ValueError("Empty password")
    return _PH.hash(plain)


def verify_password(hash_value: str, plain: str) -> bool:
    """Check ``plain`` against an encoded hash; mismatches and malformed hashes give False."""
    if not hash_value or not plain:
        return False
    try:
        return _PH.verify(hash_value, plain)
    except (VerifyMismatchError, InvalidHashError):
        return False
