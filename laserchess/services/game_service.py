"""Orchestration of communication from API layer to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from laserchess.api.models import (
    ActionRequest,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    GoToMoveRequest,
    LegalActionsRequest,
    LegalActionsResponse,
    UndoRequest,
)
from laserchess.core.config import OPENING_NOTATION, SERVICE_LOGGER
from laserchess.core.exceptions import HistoryError, RepositoryError
from laserchess.core.models import GameModel
from laserchess.core.shared_types import Player
from laserchess.db.repository import GameRepository
from laserchess.game.generation import generate_actions
from laserchess.game.pieces import Color
from laserchess.game.position import Position
from laserchess.game.state import GameState

logger = logging.getLogger(SERVICE_LOGGER)

COLOR_TO_PLAYER: dict[Color, Player] = {
    Color.LIGHT: Player.LIGHT,
    Color.DARK: Player.DARK,
}


class GameService:
    """Orchestration of layers for a laser chess game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API logic ---
    def create_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a game from the requested notation, or from the opening position."""
        starting_notation = request.starting_notation or OPENING_NOTATION
        game = GameState.from_notation(starting_notation)

        stored_game, game_id = self.repo.create_game(game.to_model())
        logger.info("Created game %s from %r", game_id, stored_game.starting_notation)
        return self._create_game_response(game_id, game)

    def get_game(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game = self._load_game(request.game_id)
        return self._create_game_response(request.game_id, game)

    def legal_actions(self, request: LegalActionsRequest) -> LegalActionsResponse:
        """Legal actions for the piece on the requested square (these can be used to highlight options for the user)."""
        game = self._load_game(request.game_id)
        position = Position.from_algebraic(request.square)
        actions = generate_actions(game, position)
        return LegalActionsResponse(
            game_id=request.game_id,
            square=request.square,
            player=COLOR_TO_PLAYER[game.current_player],
            legal_actions=[action.to_notation() for action in actions],
        )

    def commit_action(self, request: ActionRequest) -> GameResponse:
        """Play an action for the player to move."""
        game = self._load_game(request.game_id)

        # Attempt the action
        game.commit_action(game.parse_action(request.action))

        return self._store(request.game_id, game)

    def undo_action(self, request: UndoRequest) -> GameResponse:
        """Take back the last action."""
        game = self._load_game(request.game_id)
        game.undo_action()
        return self._store(request.game_id, game)

    def go_to_move(self, request: GoToMoveRequest) -> GameResponse:
        """Rewind the game to the board right after action number `move_number` (0-indexed)."""
        game = self._load_game(request.game_id)
        if not game.go_to_move(request.move_number):
            raise HistoryError(
                f"Cannot go to move {request.move_number}: only {len(game.action_history)} actions were played."
            )
        return self._store(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _store(self, game_id: UUID, game: GameState) -> GameResponse:
        """Capture updated state in GameModel, store in repository and respond."""
        self.repo.update_game(game_id, game.to_model())
        return self._create_game_response(game_id, game)

    def _create_game_response(self, game_id: UUID, game: GameState) -> GameResponse:
        return GameResponse(
            game_id=game_id,
            notation=game.to_notation(),
            starting_notation=game.starting_notation,
            player_to_move=COLOR_TO_PLAYER[game.current_player],
            action_history=[action.to_notation() for action in game.action_history],
            status=game.status,
        )

    def _load_game(self, game_id: UUID) -> GameState:
        """Attempt to find the game in the repository (raise error if it fails) and rebuild the domain object."""
        return GameState.from_model(self._fetch_game(game_id))

    def _fetch_game(self, game_id: UUID) -> GameModel:
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
