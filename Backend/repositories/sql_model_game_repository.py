import os
from pathlib import Path
from typing import Optional, List

from sqlalchemy import Column, Engine, Integer
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Field, Session, select
from sqlmodel import create_engine

# ===== Default SQLite / SQLModel Backend =====
BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_DB_PATH = BASE_DIR / "database"
DB_PATH = os.getenv("GAMES_DB_PATH", str(DEFAULT_DB_PATH / "games.db"))
DB_URL = os.getenv("GAMES_DB_URL", f"sqlite:///{DB_PATH}")

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def make_engine(url: str) -> Engine:
    """Build an engine for `url`. In-memory SQLite shares one connection across threads."""
    if url in _MEMORY_URLS:
        return create_engine(url, connect_args={"check_same_thread": False}, poolclass=StaticPool)
    if url.startswith("sqlite:///"):
        Path(url[len("sqlite:///"):]).parent.mkdir(parents=True, exist_ok=True)
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url)


_engine = make_engine(DB_URL)


def get_session() -> Session:
    return Session(_engine)


def get_engine() -> Engine:
    return _engine


class GameRow(SQLModel, table=True):
    """One row of the `games` table. `releaseYear` keeps its camelCase column name."""
    __tablename__ = "games"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False)
    genre: str = Field(nullable=False)
    release_year: Optional[int] = Field(default=None, sa_column=Column("releaseYear", Integer, nullable=True))


class SqlModelGameRepository:
    """Concrete repository backed by SQLite via SQLModel."""
    def __init__(self, engine: Optional[Engine] = None):
        self._engine = engine or _engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def init(self) -> None:
        SQLModel.metadata.create_all(self._engine)

    def _session(self) -> Session:
        return Session(self._engine)

    def list_games(self, session: Optional[Session] = None) -> List[GameRow]:
        own_session = session is None
        if own_session:
            session = self._session()
        try:
            return list(session.exec(select(GameRow).order_by(GameRow.id.asc())).all())
        finally:
            if own_session:
                session.close()

    def insert_game(
        self,
        title: str,
        genre: str,
        release_year: Optional[int] = None,
        session: Optional[Session] = None,
    ) -> GameRow:
        own_session = session is None
        if own_session:
            session = self._session()
        try:
            row = GameRow(title=title, genre=genre, release_year=release_year)
            session.add(row)
            session.commit()
            session.refresh(row)
            return row
        except Exception:
            session.rollback()
            raise
        finally:
            if own_session:
                # keep loaded attributes readable after close
                session.expunge_all()
                session.close()
