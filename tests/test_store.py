import asyncio
from pathlib import Path

import pytest

from adaquote.core.errors import DuplicateUser, StoreError
from adaquote.core.models import QuoteFields
from adaquote.infra import quotes_repo, users_repo
from adaquote.infra.database import DEFAULT_GENRES, Database


@pytest.fixture()
def db(tmp_path: Path) -> Database:
    d = Database(str(tmp_path / "store.db"))
    asyncio.run(d.init_schema())
    return d


def test_init_schema_is_idempotent_and_seeds_genres(db):
    asyncio.run(db.init_schema())
    genres = asyncio.run(quotes_repo.list_genres(db))
    assert [(g.id, g.name) for g in genres] == DEFAULT_GENRES


def test_quote_crud_cycle(db):
    new_id = asyncio.run(quotes_repo.create(db, QuoteFields(content="Test", author="Ada", genre_id=1)))
    q = asyncio.run(quotes_repo.find_by_id(db, new_id))
    assert (q.content, q.author, q.genre_id, q.genre) == ("Test", "Ada", 1, "Wisdom")

    assert asyncio.run(quotes_repo.update(db, new_id, QuoteFields(content="New", author="Ada", genre_id=2)))
    q = asyncio.run(quotes_repo.find_by_id(db, new_id))
    assert q.content == "New"
    assert q.genre == "Humor"

    assert asyncio.run(quotes_repo.destroy(db, new_id))
    assert asyncio.run(quotes_repo.find_by_id(db, new_id)) is None
    assert asyncio.run(quotes_repo.find_all(db)) == []


def test_missing_rows_report_false(db):
    fields = QuoteFields(content="x", author="y", genre_id=1)
    assert asyncio.run(quotes_repo.update(db, 999, fields)) is False
    assert asyncio.run(quotes_repo.destroy(db, 999)) is False


def test_unknown_genre_violates_foreign_key(db):
    with pytest.raises(StoreError):
        asyncio.run(quotes_repo.create(db, QuoteFields(content="x", author="y", genre_id=99)))
    assert asyncio.run(quotes_repo.find_all(db)) == []


def test_users_are_unique_by_username(db):
    kwargs = dict(username="ada", first_name="Ada", last_name="Lovelace", email="a@x.org", password_hash="h")
    u = asyncio.run(users_repo.create_user(db, **kwargs))
    assert asyncio.run(users_repo.find_by_id(db, u.id)) == u
    assert asyncio.run(users_repo.find_by_username(db, " ada ")) == u
    assert asyncio.run(users_repo.find_by_username(db, "")) is None
    with pytest.raises(DuplicateUser):
        asyncio.run(users_repo.create_user(db, **kwargs))


def test_unreachable_database_raises_store_error(tmp_path: Path):
    d = Database(str(tmp_path / "missing-dir" / "nested" / "x.db"))
    with pytest.raises(StoreError):
        asyncio.run(quotes_repo.find_all(d))
