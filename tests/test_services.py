import asyncio
from pathlib import Path

import pytest

from adaquote.core.errors import DuplicateUser, NotFound, ValidationError
from adaquote.infra.database import Database
from adaquote.services import quote_service
from adaquote.services.auth_service import AuthFailure, Credentials, Registration, authenticate, register_user


@pytest.fixture()
def db(tmp_path: Path) -> Database:
    d = Database(str(tmp_path / "svc.db"))
    asyncio.run(d.init_schema())
    return d


@pytest.mark.parametrize(
    "raw, field",
    [
        ({"content": "", "author": "Ada", "genre_id": "1"}, "content"),
        ({"content": "x", "author": "   ", "genre_id": "1"}, "author"),
        ({"content": "x", "author": "Ada", "genre_id": "one"}, "genre_id"),
        ({"content": "x", "author": "Ada", "genre_id": "0"}, "genre_id"),
    ],
)
def test_quote_validation(raw, field):
    with pytest.raises(ValidationError) as exc:
        quote_service.validate_quote_fields(raw)
    assert exc.value.field == field


def test_quote_validation_strips_and_parses():
    f = quote_service.validate_quote_fields({"content": "  Test ", "author": " Ada", "genre_id": " 3 "})
    assert (f.content, f.author, f.genre_id) == ("Test", "Ada", 3)


def test_missing_quote_is_not_found(db):
    with pytest.raises(NotFound):
        asyncio.run(quote_service.get_quote(db, 12))
    with pytest.raises(NotFound):
        asyncio.run(quote_service.update_quote(db, 12, {"content": "x", "author": "y", "genre_id": "1"}))
    with pytest.raises(NotFound):
        asyncio.run(quote_service.delete_quote(db, 12))


def test_register_stores_hash_not_plaintext(db):
    user = asyncio.run(register_user(db, Registration(username="ada", password="s3cret")))
    assert user.password != "s3cret"
    assert "password" not in user.public()


def test_register_requires_username_and_password(db):
    with pytest.raises(ValidationError):
        asyncio.run(register_user(db, Registration(username=" ", password="x")))
    with pytest.raises(ValidationError):
        asyncio.run(register_user(db, Registration(username="ada", password="")))
    with pytest.raises(ValidationError):
        asyncio.run(register_user(db, Registration(username="ada", password="x", email="nope")))


def test_register_duplicate_username(db):
    asyncio.run(register_user(db, Registration(username="ada", password="one")))
    with pytest.raises(DuplicateUser):
        asyncio.run(register_user(db, Registration(username="ada", password="two")))


def test_authenticate_outcomes(db):
    asyncio.run(register_user(db, Registration(username="ada", password="s3cret")))

    ok = asyncio.run(authenticate(db, Credentials(username="ada", password="s3cret")))
    assert not isinstance(ok, AuthFailure)
    assert ok.username == "ada"

    assert isinstance(asyncio.run(authenticate(db, Credentials(username="ada", password="wrong"))), AuthFailure)
    assert isinstance(asyncio.run(authenticate(db, Credentials(username="bob", password="s3cret"))), AuthFailure)
    missing = asyncio.run(authenticate(db, Credentials(username="", password="")))
    assert isinstance(missing, AuthFailure)
    assert missing.reason == "missing_credentials"
