# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from typing import Any, List, Mapping

from adaquote.core.errors import NotFound, ValidationError
from adaquote.core.logging import get_logger
from adaquote.core.models import Genre, Quote, QuoteFields
from adaquote.infra import quotes_repo
from adaquote.infra.database import Database

logger = get_logger(__name__)


def validate_quote_fields(raw: Mapping[str, Any]) -> QuoteFields:
    """Check a submitted form: content and author non-empty, genre_id a positive int."""
    content = str(raw.get("content") or "").strip()
    author = str(raw.get("author") or "").strip()
    genre_raw = str(raw.get("genre_id") or "").strip()

    if not content:
        raise ValidationError("Content is required.", field="content")
    if not author:
        raise ValidationError("Author is required.", field="author")
    try:
        genre_id = int(genre_raw)
    except ValueError:
        raise ValidationError(f"genre_id must be an integer (got '{genre_raw}').", field="genre_id")
    if genre_id <= 0:
        raise ValidationError("genre_id must be positive.", field="genre_id")

    return QuoteFields(content=content, author=author, genre_id=genre_id)


async def list_quotes(db: Database) -> List[Quote]:
    return await quotes_repo.find_all(db)


async def get_quote(db: Database, quote_id: int) -> Quote:
    quote = await quotes_repo.find_by_id(db, quote_id)
    if quote is None:
        raise NotFound(f"Quote {quote_id} does not exist.")
    return quote


async def list_genres(db: Database) -> List[Genre]:
    return await quotes_repo.list_genres(db)


async def create_quote(db: Database, raw: Mapping[str, Any]) -> int:
    fields = validate_quote_fields(raw)
    new_id = await quotes_repo.create(db, fields)
    logger.info("Created quote %s by %s", new_id, fields.author)
    return new_id


async def update_quote(db: Database, quote_id: int, raw: Mapping[str, Any]) -> None:
    fields = validate_quote_fields(raw)
    if not await quotes_repo.update(db, quote_id, fields):
        raise NotFound(f"Quote {quote_id} does not exist.")
    logger.info("Updated quote %s", quote_id)


async def delete_quote(db: Database, quote_id: int) -> None:
    if not await quotes_repo.destroy(db, quote_id):
        raise NotFound(f"Quote {quote_id} does not exist.")
    logger.info("Deleted quote %s", quote_id)
