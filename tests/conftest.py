"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Iterator

import pytest
from sqlalchemy.orm import Session

from laserchess.core.config import OPENING_NOTATION
from laserchess.db.database import create_session_factory
from laserchess.db.memory_repository import InMemoryGameRepository
from laserchess.game.board import Board
from laserchess.game.pieces import Piece
from laserchess.game.position import Position
from laserchess.game.state import GameState
from laserchess.services.game_service import GameService

EMPTY_ROWS = "/".join(["8"] * 8)


@pytest.fixture
def opening_game() -> GameState:
    return GameState.from_notation(OPENING_NOTATION)


@pytest.fixture
def board_with_pieces() -> Callable[[dict[str, str]], Board]:
    """Call the inner function with {square name: piece token}, ex. {"d4": "NE", "a1": "ww"}"""

    def _create_board(pieces: dict[str, str]) -> Board:
        board = Board.from_notation(EMPTY_ROWS)
        for square_name, token in pieces.items():
            board.set(Position.from_algebraic(square_name), Piece.from_notation(token))
        return board

    return _create_board


@pytest.fixture
def repository() -> InMemoryGameRepository:
    return InMemoryGameRepository()


@pytest.fixture
def service(repository: InMemoryGameRepository) -> GameService:
    return GameService(repository)


@pytest.fixture
def db_session() -> Iterator[Session]:
    """Connection to a fresh in-memory database, so tests of the SQL repository are independent of each other."""
    session_factory = create_session_factory("sqlite://")
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
