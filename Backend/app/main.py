# app/main.py
from __future__ import annotations
import logging
import os
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.deps import db_session, game_store
from facade.game_store_facade import GameStoreFacade
from repositories.sql_model_game_repository import get_engine


logger = logging.getLogger("uvicorn.error")
RUNNING_MESSAGE = "Server is running."
MISSING_FIELDS_MESSAGE = "Game must have title and genre."


class GameValidationError(Exception):
    """Raised when a new game lacks a title or a genre."""
    def __init__(self, message: str = MISSING_FIELDS_MESSAGE):
        super().__init__(message)
        self.message = message


# ---------------------------
# Models for API I/O
# ---------------------------

class GameIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    genre: Optional[str] = None
    release_year: Optional[int] = Field(default=None, alias="releaseYear")


class GameOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    title: str
    genre: str
    release_year: Optional[int] = Field(default=None, alias="releaseYear")


class Message(BaseModel):
    message: str


def validate_new_game(payload: Optional[GameIn]) -> GameIn:
    """Both title and genre must be present and non-blank."""
    if payload is None:
        raise GameValidationError()
    if not (payload.title or "").strip() or not (payload.genre or "").strip():
        raise GameValidationError()
    return payload


# ---------------------------
# App init
# ---------------------------
app = FastAPI(title="Games API")


@app.on_event("startup")
def on_startup() -> None:
    """Build the store once; its repository makes sure the tables exist."""
    app.state.store = GameStoreFacade.from_env(get_engine())
    logger.info("Games store ready (%s)", get_engine().url.render_as_string(hide_password=True))


@app.on_event("shutdown")
def on_shutdown() -> None:
    app.state.store = None
    get_engine().dispose()


@app.exception_handler(GameValidationError)
def game_validation_error_handler(request: Request, exc: GameValidationError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=422, content={"error": exc.message})


@app.get("/", response_model=Message, tags=["meta"])
def root():
    return {"message": RUNNING_MESSAGE}


# ---------------------------
# Games endpoints
# ---------------------------
router = APIRouter(prefix="/games", tags=["games"])


@router.get("/", response_model=Message)
def games_root():
    return {"message": RUNNING_MESSAGE}


@router.get("/all", response_model=List[GameOut])
def list_games(
    session: Session = Depends(db_session),
    store: GameStoreFacade = Depends(game_store),
):
    try:
        rows = store.all_games(session=session)
    except SQLAlchemyError as e:
        logger.exception("GET /games/all failed")
        raise HTTPException(status_code=500, detail="Database error") from e
    return [GameOut.model_validate(r) for r in rows]


@router.post("/", status_code=201, response_model=List[GameOut])
def create_game(
    payload: Optional[GameIn] = Body(None),
    session: Session = Depends(db_session),
    store: GameStoreFacade = Depends(game_store),
):
    game = validate_new_game(payload)
    try:
        row = store.add_game(game.title, game.genre, game.release_year, session=session)
    except SQLAlchemyError as e:
        logger.exception("POST /games/ failed")
        raise HTTPException(status_code=500, detail="Database error") from e
    logger.info("Created game %s (%r)", row.id, row.title)
    return [GameOut.model_validate(row)]


app.include_router(router)


if __name__ == "__main__":
    # Run with: uvicorn app.main:app --reload
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=os.getenv("GAMES_HOST", "127.0.0.1"),
        port=int(os.getenv("GAMES_PORT", "8000")),
        reload=True,
    )
