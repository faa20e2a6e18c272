# app/deps.py
from typing import Iterator
from fastapi import HTTPException, Request
from repositories.sql_model_game_repository import get_session
from sqlmodel import Session

from facade.game_store_facade import GameStoreFacade


def db_session() -> Iterator[Session]:
    # FastAPI treats generators that yield as dependencies to tear down automatically
    with get_session() as s:
        yield s


def game_store(request: Request) -> GameStoreFacade:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Store not initialized")
    return store
