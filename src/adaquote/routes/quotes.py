# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Quote CRUD routes.

List and detail are public; everything that writes (and the forms leading
to a write) sits behind ``require_login``. Store and validation errors
propagate to the JSON handlers installed by the app factory.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from adaquote.infra.database import Database
from adaquote.permissions import get_db, require_login
from adaquote.services import quote_service
from adaquote.web import redirect, render

router = APIRouter(prefix="/quotes", tags=["quotes"])


async def _form_fields(request: Request) -> dict:
    form = await request.form()
    # FastAPI's FormData behaves like a multi-dict.
    return {str(k): ("" if v is None else str(v)) for k, v in form.items()}


@router.get("", response_class=HTMLResponse)
async def index(request: Request, db: Database = Depends(get_db)):
    quotes = await quote_service.list_quotes(db)
    return render(request, "quotes/index.html", {"quotes": quotes})


@router.get("/add", response_class=HTMLResponse)
async def add_form(request: Request, db: Database = Depends(get_db), user=Depends(require_login)):
    genres = await quote_service.list_genres(db)
    return render(request, "quotes/add.html", {"genres": genres})


@router.get("/edit/{quote_id}", response_class=HTMLResponse)
async def edit_form(request: Request, quote_id: int, db: Database = Depends(get_db), user=Depends(require_login)):
    quote = await quote_service.get_quote(db, quote_id)
    genres = await quote_service.list_genres(db)
    return render(request, "quotes/edit.html", {"quote": quote, "id": quote_id, "genres": genres})


@router.get("/{quote_id}", response_class=HTMLResponse)
async def show(request: Request, quote_id: int, db: Database = Depends(get_db)):
    quote = await quote_service.get_quote(db, quote_id)
    return render(request, "quotes/single.html", {"quote": quote})


@router.post("")
async def create(request: Request, db: Database = Depends(get_db), user=Depends(require_login)):
    await quote_service.create_quote(db, await _form_fields(request))
    return redirect("/quotes")


@router.put("/{quote_id}")
async def update(request: Request, quote_id: int, db: Database = Depends(get_db), user=Depends(require_login)):
    await quote_service.update_quote(db, quote_id, await _form_fields(request))
    return redirect("/quotes")


@router.delete("/{quote_id}")
async def destroy(quote_id: int, db: Database = Depends(get_db), user=Depends(require_login)):
    await quote_service.delete_quote(db, quote_id)
    return redirect("/quotes")
