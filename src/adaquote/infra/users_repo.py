# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import sqlite3
from typing import Optional

from adaquote.core.errors import DuplicateUser
from adaquote.core.models import User
from adaquote.infra.database import Database

_COLUMNS = "id, username, first_name, last_name, email, password"


async def create_user(
    db: Database,
    *,
    username: str,
    first_name: str,
    last_name: str,
    email: str,
    password_hash: str,
) -> User:
    """Insert a user row; ``password_hash`` must already be hashed."""
    async with db.connect() as conn:
        try:
            cur = await conn.execute(
                "INSERT INTO users (username, first_name, last_name, email, password) VALUES (?, ?, ?, ?, ?)",
                (username, first_name, last_name, email, password_hash),
            )
        except sqlite3.IntegrityError as e:
            raise DuplicateUser(f"Username '{username}' already exists ({e})") from e
        new_id = cur.lastrowid
    return User(
        id=int(new_id),
        username=username,
        first_name=first_name,
        last_name=last_name,
        email=email,
        password=password_hash,
    )


async def find_by_id(db: Database, user_id: int) -> Optional[User]:
    async with db.connect() as conn:
        cur = await conn.execute(f"SELECT {_COLUMNS} FROM users WHERE id = ?", (int(user_id),))
        row = await cur.fetchone()
    return User.from_row(row) if row else None


async def find_by_username(db: Database, username: str) -> Optional[User]:
    u = (username or "").strip()
    if not u:
        return None
    async with db.connect() as conn:
        cur = await conn.execute(f"SELECT {_COLUMNS} FROM users WHERE username = ?", (u,))
        row = await cur.fetchone()
    return User.from_row(row) if row else None
