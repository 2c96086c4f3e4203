# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class User:
    id: int
    username: str
    first_name: str
    last_name: str
    email: str
    password: str  # argon2 encoded hash

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "User":
        return cls(
            id=int(row["id"]),
            username=str(row["username"]),
            first_name=str(row["first_name"] or ""),
            last_name=str(row["last_name"] or ""),
            email=str(row["email"] or ""),
            password=str(row["password"]),
        )

    def public(self) -> Dict[str, Any]:
        """User fields safe to expose (never the password hash)."""
        return {
            "id": self.id,
            "username": self.username,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
        }


@dataclass(frozen=True)
class Quote:
    id: int
    content: str
    author: str
    genre_id: int
    genre: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Quote":
        keys = row.keys()
        return cls(
            id=int(row["id"]),
            content=str(row["content"]),
            author=str(row["author"]),
            genre_id=int(row["genre_id"]),
            genre=str(row["genre"] or "") if "genre" in keys else "",
        )


@dataclass(frozen=True)
class Genre:
    id: int
    name: str


@dataclass(frozen=True)
class QuoteFields:
    """Validated input for create/update."""

    content: str
    author: str
    genre_id: int
