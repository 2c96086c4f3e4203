# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Runtime configuration.

Settings come from a single profile table keyed by environment name
(``ADAQUOTE_ENV``), optionally overridden by a YAML file and then by
individual environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from adaquote.core.errors import ConfigError

BASE_DIR = Path(__file__).resolve().parents[2]
DATA_DIR = Path(os.getenv("ADAQUOTE_DATA_DIR", str(BASE_DIR / "data"))).resolve()
DEFAULT_CONFIG_PATH = BASE_DIR / "config" / "database.yml"

DEV_SECRET_KEY = "adaquote-dev-secret-not-for-production"
_TRUE = {"1", "true", "yes", "y", "on"}

PROFILES: Dict[str, Dict[str, Any]] = {
    "development": {
        "database": str(DATA_DIR / "adaquote_dev.db"),
        "log_level": "DEBUG",
        "cookie_secure": False,
        "require_secret": False,
    },
    "test": {
        "database": str(DATA_DIR / "adaquote_test.db"),
        "log_level": "WARNING",
        "cookie_secure": False,
        "require_secret": False,
    },
    "production": {
        "database": str(DATA_DIR / "adaquote.db"),
        "log_level": "INFO",
        "cookie_secure": True,
        "require_secret": True,
    },
}


@dataclass(frozen=True)
class Settings:
    env: str
    database_path: str
    secret_key: str
    cookie_name: str = "adaquote_session"
    flash_cookie_name: str = "adaquote_flash"
    session_max_age: int = 28800  # 8 hours
    cookie_secure: bool = False
    log_level: str = "INFO"


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE


def _load_yaml_overrides(path: Path, env: str) -> Dict[str, Any]:
    if not path.exists():
        return {}
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a mapping of environment names")
    section = raw.get(env) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: section '{env}' must be a mapping")
    return section


def load_settings(env: Optional[str] = None, *, config_path: Optional[Path] = None) -> Settings:
    """Resolve settings for ``env`` (defaults to ``ADAQUOTE_ENV`` or development)."""
    name = (env or os.getenv("ADAQUOTE_ENV") or "development").strip().lower()
    if name not in PROFILES:
        raise ConfigError(f"Unknown environment '{name}' (expected one of {', '.join(sorted(PROFILES))})")

    profile = dict(PROFILES[name])
    path = config_path or Path(os.getenv("ADAQUOTE_CONFIG", str(DEFAULT_CONFIG_PATH)))
    profile.update(_load_yaml_overrides(path, name))

    database = os.getenv("ADAQUOTE_DATABASE_PATH") or str(profile["database"])
    if database.strip() == ":memory:" or database.startswith("file::memory:"):
        # Every store operation opens its own connection.
        raise ConfigError("In-memory SQLite databases are not supported; use a file path")
    log_level = (os.getenv("ADAQUOTE_LOG_LEVEL") or str(profile.get("log_level") or "INFO")).upper()

    secret = os.getenv("SECRET_KEY") or os.getenv("ADAQUOTE_SECRET_KEY") or ""
    if not secret:
        if profile.get("require_secret"):
            raise ConfigError("Missing SECRET_KEY (or ADAQUOTE_SECRET_KEY) in environment")
        secret = DEV_SECRET_KEY

    return Settings(
        env=name,
        database_path=database,
        secret_key=secret,
        cookie_name=os.getenv("ADAQUOTE_COOKIE_NAME", "adaquote_session"),
        session_max_age=int(os.getenv("ADAQUOTE_SESSION_MAX_AGE", "28800")),
        cookie_secure=env_bool("ADAQUOTE_COOKIE_SECURE", bool(profile.get("cookie_secure"))),
        log_level=log_level,
    )
