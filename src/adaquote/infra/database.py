# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""SQLite store handle.

Each operation opens its own short-lived aiosqlite connection, so the handle
can be shared across requests without any locking of its own. Driver errors
are re-raised as :class:`StoreError` so callers never see sqlite3 types.
"""

from __future__ import annotations

import sqlite3
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import aiosqlite

from adaquote.core.errors import StoreError
from adaquote.core.logging import get_logger

logger = get_logger(__name__)

SCHEMA_VERSION = 1

SCHEMA = """
CREATE TABLE IF NOT EXISTS genres (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL UNIQUE
);

CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT NOT NULL UNIQUE,
    first_name TEXT NOT NULL DEFAULT '',
    last_name TEXT NOT NULL DEFAULT '',
    email TEXT NOT NULL DEFAULT '',
    password TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS quotes (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    content TEXT NOT NULL,
    author TEXT NOT NULL,
    genre_id INTEGER NOT NULL REFERENCES genres(id)
);
"""

DEFAULT_GENRES = [
    (1, "Wisdom"),
    (2, "Humor"),
    (3, "Science"),
    (4, "Literature"),
]


class Database:
    def __init__(self, path: str) -> None:
        self.path = str(path)

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[aiosqlite.Connection]:
        """Yield a connection with row access by name and foreign keys on.

        Commits when the block exits cleanly, rolls back otherwise.
        """
        try:
            conn = await aiosqlite.connect(self.path)
        except sqlite3.Error as e:
            logger.warning("Cannot open database %s: %s", self.path, e)
            raise StoreError(str(e)) from e
        try:
            conn.row_factory = aiosqlite.Row
            await conn.execute("PRAGMA foreign_keys = ON")
            yield conn
            await conn.commit()
        except sqlite3.Error as e:
            await conn.rollback()
            logger.warning("Store error on %s: %s", self.path, e)
            raise StoreError(str(e)) from e
        except BaseException:
            await conn.rollback()
            raise
        finally:
            await conn.close()

    async def init_schema(self) -> None:
        Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        async with self.connect() as conn:
            await conn.executescript(SCHEMA)
            await conn.executemany(
                "INSERT OR IGNORE INTO genres (id, name) VALUES (?, ?)",
                DEFAULT_GENRES,
            )
            await conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")
        logger.info("Schema ready at %s (version %s)", self.path, SCHEMA_VERSION)
