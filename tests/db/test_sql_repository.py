"""Unit tests for laserchess/db/sql_repository.py"""

from uuid import uuid4

import pytest
from sqlalchemy.orm import Session

from laserchess.core.config import OPENING_NOTATION
from laserchess.core.models import GameModel
from laserchess.core.shared_types import Status
from laserchess.db.database import create_session_factory, get_db
from laserchess.db.sql_repository import SQLGameRepository

OPENING_ROWS = OPENING_NOTATION.split()[0]
AFTER_A8B8 = "nn6nn/sesw1sesw1sesw/8/8/8/8/NENW1NENW1NENW/1SS5SS"
AFTER_A1B1 = "1nn5nn/sesw1sesw1sesw/8/8/8/8/NENW1NENW1NENW/1SS5SS"


@pytest.fixture
def new_game() -> GameModel:
    return GameModel(
        starting_notation=OPENING_NOTATION,
        current_notation=OPENING_NOTATION,
        history_notation=[OPENING_ROWS],
        actions=[],
        status=Status.IN_PROGRESS.value,
    )


def test_create_game(db_session: Session, new_game: GameModel) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    repo = SQLGameRepository(db_session)
    record_in_db, _ = repo.create_game(new_game)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == new_game


def test_get_game_by_id(db_session: Session, new_game: GameModel) -> None:
    """Create a game, then fetch it from db."""
    repo = SQLGameRepository(db_session)
    expected_game, game_id = repo.create_game(new_game)
    assert repo.get_game(game_id) == expected_game


def test_get_unknown_game(db_session: Session, new_game: GameModel) -> None:
    """Should return None if ID does not match anything in database."""
    repo = SQLGameRepository(db_session)
    assert repo.get_game(uuid4()) is None

    repo.create_game(new_game)
    assert repo.get_game(uuid4()) is None


def test_consecutive_game_updates(db_session: Session, new_game: GameModel) -> None:
    """Multiple updates to the same game: the last one is what is stored."""
    repo = SQLGameRepository(db_session)
    _, game_id = repo.create_game(new_game)

    first_update = GameModel(
        starting_notation=OPENING_NOTATION,
        current_notation=f"{AFTER_A8B8} B",
        history_notation=[OPENING_ROWS, AFTER_A8B8],
        actions=["a8b8"],
        status=Status.IN_PROGRESS.value,
    )
    second_update = GameModel(
        starting_notation=OPENING_NOTATION,
        current_notation=f"{AFTER_A1B1} W",
        history_notation=[OPENING_ROWS, AFTER_A8B8, AFTER_A1B1],
        actions=["a8b8", "a1b1"],
        status=Status.IN_PROGRESS.value,
    )

    assert repo.update_game(game_id, first_update) == first_update
    assert repo.update_game(game_id, second_update) == second_update
    assert repo.get_game(game_id) == second_update


def test_attempt_updating_unknown_game(db_session: Session, new_game: GameModel) -> None:
    repo = SQLGameRepository(db_session)
    assert repo.update_game(uuid4(), new_game) is None


def test_delete_game(db_session: Session, new_game: GameModel) -> None:
    """Record of the game should no longer exist after deletion"""
    repo = SQLGameRepository(db_session)
    created_game, game_id = repo.create_game(new_game)

    assert repo.delete_game(game_id) == created_game
    assert repo.get_game(game_id) is None
    assert repo.delete_game(game_id) is None


def test_sessions_share_the_in_memory_database(new_game: GameModel) -> None:
    """Sessions created by the same factory see the same tables and records"""
    session_factory = create_session_factory()

    writer = next(get_db(session_factory))
    _, game_id = SQLGameRepository(writer).create_game(new_game)

    reader = next(get_db(session_factory))
    assert SQLGameRepository(reader).get_game(game_id) == new_game
