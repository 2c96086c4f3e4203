# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Quote persistence (plain SQL over the shared :class:`Database` handle).

Lookups return ``None`` / ``False`` for missing ids; deciding whether that is
an error belongs to the service layer.
"""

from __future__ import annotations

from typing import List, Optional

from adaquote.core.models import Genre, Quote, QuoteFields
from adaquote.infra.database import Database

_SELECT = (
    "SELECT q.id, q.content, q.author, q.genre_id, g.name AS genre "
    "FROM quotes q LEFT JOIN genres g ON g.id = q.genre_id"
)


async def find_all(db: Database) -> List[Quote]:
    async with db.connect() as conn:
        cur = await conn.execute(f"{_SELECT} ORDER BY q.id ASC")
        rows = await cur.fetchall()
    return [Quote.from_row(r) for r in rows]


async def find_by_id(db: Database, quote_id: int) -> Optional[Quote]:
    async with db.connect() as conn:
        cur = await conn.execute(f"{_SELECT} WHERE q.id = ?", (int(quote_id),))
        row = await cur.fetchone()
    return Quote.from_row(row) if row else None


async def create(db: Database, fields: QuoteFields) -> int:
    async with db.connect() as conn:
        cur = await conn.execute(
            "INSERT INTO quotes (content, author, genre_id) VALUES (?, ?, ?)",
            (fields.content, fields.author, fields.genre_id),
        )
        return int(cur.lastrowid)


async def update(db: Database, quote_id: int, fields: QuoteFields) -> bool:
    """Overwrite all editable columns. Returns False when no row matched."""
    async with db.connect() as conn:
        cur = await conn.execute(
            "UPDATE quotes SET content = ?, author = ?, genre_id = ? WHERE id = ?",
            (fields.content, fields.author, fields.genre_id, int(quote_id)),
        )
        return cur.rowcount > 0


async def destroy(db: Database, quote_id: int) -> bool:
    async with db.connect() as conn:
        cur = await conn.execute("DELETE FROM quotes WHERE id = ?", (int(quote_id),))
        return cur.rowcount > 0


async def list_genres(db: Database) -> List[Genre]:
    async with db.connect() as conn:
        cur = await conn.execute("SELECT id, name FROM genres ORDER BY id ASC")
        rows = await cur.fetchall()
    return [Genre(id=int(r["id"]), name=str(r["name"])) for r in rows]
