"""
Protocol repository: where the service keeps its laser chess games.

A record is a GameModel. It holds the starting notation and the recorded actions, which is all it takes
to replay the game, plus the current notation, the board history and the status as a check on that replay.
"""

from typing import Protocol
from uuid import UUID

from laserchess.core.models import GameModel


class GameRepository(Protocol):
    """Storage of game records, keyed by the UUID handed out on creation"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """The stored record, or None for an unknown id. Changing the result does not change the record."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store a game that was just set up (no actions yet, usually) under a new id."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace the record after an action, undo or rewind. None if there is no record for the id."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove the record and return it. None if there is no record for the id."""
        ...
