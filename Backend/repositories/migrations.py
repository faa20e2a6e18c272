# repositories/migrations.py
"""Schema and fixture management for the `games` table.

`latest` creates the table, `rollback` drops it and `seed` restores the
fixture rows. `reset` chains all three and is what tests run between cases.
"""
from __future__ import annotations
import logging
from typing import Dict, List, Optional

from sqlalchemy import Engine, delete
from sqlmodel import SQLModel, Session

from repositories.sql_model_game_repository import GameRow, get_engine


logger = logging.getLogger(__name__)

SEED_GAMES: List[Dict[str, Optional[object]]] = [
    {"title": "Pacman", "genre": "Arcade", "release_year": 1980},
    {"title": "Tetris", "genre": "Arcade", "release_year": None},
    {"title": "Dragon Quest", "genre": "RPG", "release_year": None},
]


def _tables() -> list:
    return [GameRow.__table__]


def migrate_latest(engine: Optional[Engine] = None) -> None:
    engine = engine or get_engine()
    SQLModel.metadata.create_all(engine, tables=_tables())
    logger.info("Migrated to latest: %s", ", ".join(t.name for t in _tables()))


def migrate_rollback(engine: Optional[Engine] = None) -> None:
    engine = engine or get_engine()
    SQLModel.metadata.drop_all(engine, tables=_tables())
    logger.info("Rolled back: %s", ", ".join(t.name for t in _tables()))


def run_seeds(engine: Optional[Engine] = None) -> int:
    """Replace every row of `games` with SEED_GAMES. Returns the number of rows inserted."""
    engine = engine or get_engine()
    with Session(engine) as session:
        session.exec(delete(GameRow))
        for g in SEED_GAMES:
            session.add(GameRow(**g))
        session.commit()
    logger.info("Seeded %d games", len(SEED_GAMES))
    return len(SEED_GAMES)


def reset(engine: Optional[Engine] = None) -> int:
    engine = engine or get_engine()
    migrate_rollback(engine)
    migrate_latest(engine)
    return run_seeds(engine)
