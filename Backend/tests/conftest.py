import os

# Must be set before the repository module builds its engine.
os.environ["GAMES_DB_URL"] = "sqlite://"
os.environ.pop("GAMES_SEED_ON_STARTUP", None)
os.environ.pop("GAMES_DB_BACKEND", None)

import pytest
from fastapi.testclient import TestClient

from app.main import app
from repositories.migrations import reset
from repositories.sql_model_game_repository import get_engine


@pytest.fixture(autouse=True)
def seeded_db():
    """Rollback, migrate and seed before every test."""
    reset(get_engine())
    yield get_engine()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
