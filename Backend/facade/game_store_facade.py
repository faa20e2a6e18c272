from __future__ import annotations

import os
from typing import List, Optional

from sqlalchemy import Engine
from sqlmodel import Session

from repositories.game_repository import GameRepository
from repositories.migrations import reset as reset_games_table
from repositories.sql_model_game_repository import GameRow, SqlModelGameRepository


# ===== Facade & Contracts =====

class GameStoreFacade:
    """Facade that hides which backend we use.
    Supports SQLite/SQLModel today; any SQLAlchemy URL works through GAMES_DB_URL.
    """
    def __init__(self, repo: GameRepository):
        self.repo = repo
        self.repo.init()

    @staticmethod
    def from_env(engine: Optional[Engine] = None) -> "GameStoreFacade":
        """
        Select a backend via GAMES_DB_BACKEND env var.
        Supported: 'sqlmodel' (default).
        """
        backend = os.getenv("GAMES_DB_BACKEND", "sqlmodel").lower()
        if backend == "sqlmodel":
            store = GameStoreFacade(SqlModelGameRepository(engine))
        else:
            raise ValueError(f"Unsupported backend: {backend}")
        if _truthy(os.getenv("GAMES_SEED_ON_STARTUP")):
            store.reset()
        return store

    @property
    def engine(self) -> Engine:
        return self.repo.engine

    def all_games(self, session: Optional[Session] = None) -> List[GameRow]:
        return self.repo.list_games(session=session)

    def add_game(
        self,
        title: str,
        genre: str,
        release_year: Optional[int] = None,
        session: Optional[Session] = None,
    ) -> GameRow:
        return self.repo.insert_game(title, genre, release_year, session=session)

    def reset(self) -> int:
        return reset_games_table(self.engine)


def _truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}
