import logging

from sqlalchemy import inspect

from repositories.migrations import SEED_GAMES, migrate_latest, migrate_rollback, reset, run_seeds
from repositories.sql_model_game_repository import SqlModelGameRepository
import scripts.db
from scripts.db import main


def _has_games_table(engine) -> bool:
    return inspect(engine).has_table("games")


def test_rollback_drops_table(seeded_db):
    migrate_rollback(seeded_db)
    assert not _has_games_table(seeded_db)


def test_latest_creates_empty_table(seeded_db):
    migrate_rollback(seeded_db)
    migrate_latest(seeded_db)
    assert _has_games_table(seeded_db)
    assert SqlModelGameRepository(seeded_db).list_games() == []


def test_latest_is_idempotent(seeded_db):
    migrate_latest(seeded_db)
    assert len(SqlModelGameRepository(seeded_db).list_games()) == 3


def test_seed_replaces_existing_rows(seeded_db):
    repo = SqlModelGameRepository(seeded_db)
    repo.insert_game("Doom", "FPS", 1993)
    assert run_seeds(seeded_db) == len(SEED_GAMES)
    assert [g.title for g in repo.list_games()] == ["Pacman", "Tetris", "Dragon Quest"]


def test_reset_restores_fixture_ids(seeded_db):
    repo = SqlModelGameRepository(seeded_db)
    repo.insert_game("Doom", "FPS", 1993)
    reset(seeded_db)
    rows = repo.list_games()
    assert [(r.id, r.title, r.genre, r.release_year) for r in rows] == [
        (1, "Pacman", "Arcade", 1980),
        (2, "Tetris", "Arcade", None),
        (3, "Dragon Quest", "RPG", None),
    ]


def test_cli_rollback_then_reset(seeded_db):
    assert main(["rollback"]) == 0
    assert not _has_games_table(seeded_db)
    assert main(["reset", "--verbose"]) == 0
    assert len(SqlModelGameRepository(seeded_db).list_games()) == 3


def test_cli_logs_through_module_logger(monkeypatch, caplog):
    monkeypatch.setattr(scripts.db, "setup_logging", lambda verbose=False: None)
    with caplog.at_level(logging.DEBUG, logger="scripts.db"):
        assert main(["migrate", "--verbose"]) == 0
    assert any(r.name == "scripts.db" and r.message.startswith("Using database") for r in caplog.records)
