#!/usr/bin/env python3
from __future__ import annotations

import asyncio
from getpass import getpass

from adaquote.config import load_settings
from adaquote.infra.database import Database
from adaquote.services.auth_service import Registration, register_user


async def _create(db: Database, reg: Registration) -> None:
    await db.init_schema()
    user = await register_user(db, reg)
    print(f"OK -> {user.username} (id={user.id}) in {db.path}")


def main() -> None:
    settings = load_settings()

    username = input("Username: ").strip()
    first_name = input("First name: ").strip()
    last_name = input("Last name: ").strip()
    email = input("Email: ").strip()

    pw1 = getpass("Password: ")
    pw2 = getpass("Repeat password: ")
    if pw1 != pw2:
        raise SystemExit("Passwords do not match")

    reg = Registration(
        username=username,
        password=pw1,
        first_name=first_name,
        last_name=last_name,
        email=email,
    )
    asyncio.run(_create(Database(settings.database_path), reg))


if __name__ == "__main__":
    main()
