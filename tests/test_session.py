from adaquote.auth.session import read_flash, sign_flash, sign_session, verify_session
from adaquote.config import Settings


def _settings(secret="s1") -> Settings:
    return Settings(env="test", database_path="unused.db", secret_key=secret)


def test_session_token_roundtrip():
    s = _settings()
    data = verify_session(s, sign_session(s, 42))
    assert data is not None
    assert data.user_id == 42


def test_session_token_rejects_tampering_and_other_secrets():
    s = _settings()
    token = sign_session(s, 7)
    assert verify_session(s, token + "x") is None
    assert verify_session(_settings("other"), token) is None
    assert verify_session(s, "") is None


def test_session_token_expires():
    s = _settings()
    token = sign_session(s, 7)
    assert verify_session(s, token, max_age=-1) is None


def test_flash_is_not_valid_as_session():
    s = _settings()
    flash = sign_flash(s, "Nope")
    assert verify_session(s, flash) is None
    assert read_flash(s, flash) == {"message": "Nope", "category": "error"}
    assert read_flash(s, sign_session(s, 1)) is None
