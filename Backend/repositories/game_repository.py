from typing import Protocol, List, Optional
from sqlalchemy import Engine
from sqlmodel import Session

from repositories.sql_model_game_repository import GameRow


class GameRepository(Protocol):
    """Persistence-agnostic contract for storing games."""
    @property
    def engine(self) -> Engine:
        ...

    def init(self) -> None:
        ...

    def list_games(self, session: Optional[Session] = None) -> List[GameRow]:
        ...

    def insert_game(
        self,
        title: str,
        genre: str,
        release_year: Optional[int] = None,
        session: Optional[Session] = None,
    ) -> GameRow:
        ...
