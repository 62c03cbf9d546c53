"""
The GameState is the entrypoint into the domain layer for the service layer (and any UI).
It is responsible for orchestrating everything required to play a turn of laser chess:
check legality of an action, apply it, fire the lasers, and keep the history.

It guarantees that
 1. it can always be converted to a notation string,
 2. an action is only accepted if the resulting board differs from the previous two recorded boards,
 3. the board is always reachable from the starting notation through legal actions only.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from laserchess.core.config import GAME_LOGGER
from laserchess.core.exceptions import (
    GameStateError,
    HistoryError,
    IllegalActionError,
    InvalidActionError,
    LaserChessError,
)
from laserchess.core.models import GameModel
from laserchess.core.shared_types import Status
from laserchess.game.actions import Action, parse_action_notation
from laserchess.game.board import Board
from laserchess.game.direction import RelativeRotation
from laserchess.game.laser import Laser
from laserchess.game.notation import parse_notation, player_to_notation
from laserchess.game.pieces import Color, Piece
from laserchess.game.position import Position

logger = logging.getLogger(GAME_LOGGER)

# An action may not recreate any of this many most recent boards
REPETITION_WINDOW = 2

ActionPair = tuple[Optional[Action], Optional[Action]]


@dataclass
class GameState:
    # --- DOMAIN LAYER API CALLED BY SERVICE / UI ---

    board: Board
    current_player: Color
    starting_player: Color
    action_history: list[Action]
    # position_history[0] is the starting board, position_history[i] the board after action i (and its lasers)
    position_history: list[str]

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """Start from a position, without any history"""
        grid, player = parse_notation(notation)
        board = Board.from_rows(grid)
        return cls(
            board=board,
            current_player=player,
            starting_player=player,
            action_history=[],
            position_history=[board.to_notation()],
        )

    def to_notation(self) -> str:
        return f"{self.board.to_notation()} {player_to_notation(self.current_player)}"

    @property
    def starting_notation(self) -> str:
        return f"{self.position_history[0]} {player_to_notation(self.starting_player)}"

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Rebuild a game from the information the Service layer has, by replaying the recorded actions"""

        # Validation
        if model.status not in {status.value for status in Status}:
            raise GameStateError(
                f"Invalid status: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )

        game = cls.from_notation(model.starting_notation)
        for action_notation in model.actions:
            game.commit_action(game.parse_action(action_notation))

        if game.to_notation() != model.current_notation:
            raise GameStateError(
                f"Replaying the actions results in {game.to_notation()!r}, but the record says {model.current_notation!r}"
            )
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            starting_notation=self.starting_notation,
            current_notation=self.to_notation(),
            history_notation=list(self.position_history),
            actions=[action.to_notation() for action in self.action_history],
            status=self.status.value,
        )

    def copy(self) -> Self:
        return type(self)(
            board=self.board.copy(),
            current_player=self.current_player,
            starting_player=self.starting_player,
            action_history=list(self.action_history),
            position_history=list(self.position_history),
        )

    # --- QUERIES ---
    def piece_at(self, position: Position) -> Piece:
        return self.board.get(position)

    def board_copy(self) -> Board:
        """The board can only change through committing actions: hand out copies"""
        return self.board.copy()

    def locate_pieces(self, color: Color) -> list[Position]:
        return self.board.locate_color(color)

    def lasers_of(self, color: Color) -> list[Laser]:
        """One laser per queen of that color (none if all its queens are gone)"""
        return _lasers_on(self.board, color)

    def lasers(self) -> dict[Color, list[Laser]]:
        return {color: self.lasers_of(color) for color in (Color.LIGHT, Color.DARK)}

    @property
    def status(self) -> Status:
        """
        A player without queens has lost.

        NOTE If a laser removes the last queen of both players at once, the player who fired it loses
        (that is the opponent of the player to move now).
        """
        light_has_queens = bool(self.board.locate_queens(Color.LIGHT))
        dark_has_queens = bool(self.board.locate_queens(Color.DARK))
        if light_has_queens and dark_has_queens:
            return Status.IN_PROGRESS
        if light_has_queens:
            return Status.LIGHT_WINS
        if dark_has_queens:
            return Status.DARK_WINS
        return Status.LIGHT_WINS if self.current_player == Color.LIGHT else Status.DARK_WINS

    @property
    def winner(self) -> Optional[Color]:
        if self.status == Status.LIGHT_WINS:
            return Color.LIGHT
        if self.status == Status.DARK_WINS:
            return Color.DARK
        return None

    def move_pairs(self) -> list[ActionPair]:
        """
        The action history written as (light, dark) rows, like a score sheet.
        If dark made the first action, the first row starts with None.
        """
        entries: list[Optional[Action]] = list(self.action_history)
        if entries and entries[0] is not None and entries[0].match_player(Color.DARK):
            entries.insert(0, None)
        if len(entries) % 2 == 1:
            entries.append(None)
        return [(entries[index], entries[index + 1]) for index in range(0, len(entries), 2)]

    # --- TURNS ---
    def is_legal_action(self, action: Action) -> bool:
        """
        Simulate the full turn on a copy of the board.
        ----

        1. The action must be structurally valid, and act on a piece of the player to move.
        2. Apply it to a copy of the board.
        3. Fire the lasers of the player to move.
        4. The resulting board may not equal either of the last two recorded boards.

        Errors while simulating (ex. the action does not fit the board) simply mean: not legal.
        """
        if not action.is_valid():
            return False

        if not action.match_player(self.current_player):
            return False

        board = self.board.copy()
        try:
            action.applied_to(board)
            _fire_lasers(board, self.current_player)
        except LaserChessError as error:
            logger.debug("Rejected %s: %s", action, error)
            return False

        return not self._repeats_recent_position(board.to_notation())

    def commit_action(self, action: Action) -> None:
        """
        Play the action for real
        -----

        1. update the board
        2. fire the lasers of the player who made the action
        3. update the action and position history
        4. pass the turn to the opponent
        """
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is over. status: {self.status}")

        if not self.is_legal_action(action):
            raise IllegalActionError(f"The selected action is not legal: {action}")

        action.applied_to(self.board)
        _fire_lasers(self.board, self.current_player)
        self.action_history.append(action)
        self.position_history.append(self.board.to_notation())
        logger.info("%s played %s", self.current_player.name.lower(), action)
        self.current_player = self.current_player.opponent

    def undo_action(self) -> None:
        """Take back the last action: restore the previous board and give the turn back"""
        if not self.action_history:
            raise HistoryError("Unable to undo: no actions have been committed.")

        undone = self.action_history.pop()
        self.position_history.pop()
        self.board = Board.from_notation(self.position_history[-1])
        self.current_player = self.current_player.opponent
        logger.info("Undid %s", undone)

    def go_to_move(self, move_number: int) -> bool:
        """
        Go back to the board right after action number `move_number` (0-indexed), dropping all later history.

        Returns False (and changes nothing) if that action was never played. Use undo_action to get back to the
        starting position.
        """
        played = move_number + 1
        if move_number < 0 or played > len(self.action_history):
            return False

        self.board = Board.from_notation(self.position_history[played])
        self.action_history = self.action_history[:played]
        self.position_history = self.position_history[: played + 1]
        self.current_player = (
            self.starting_player if played % 2 == 0 else self.starting_player.opponent
        )
        logger.info("Went back to move %d", move_number)
        return True

    def parse_action(self, notation: str) -> Action:
        """
        Interpret action notation against the current board.
        ---

        * "d2R", "d2L", "d2U": rotation of the piece on d2
        * "d2d2": null move
        * "d2e3": shove if e3 is occupied, move otherwise
        """
        from_position, target = parse_action_notation(notation)
        piece = self.piece_at(from_position)
        if piece.is_empty():
            raise InvalidActionError(f"There is no piece on {from_position} to act with.")

        if isinstance(target, RelativeRotation):
            assert piece.direction is not None
            return Action.rotation(from_position, piece.direction.rotated_by(target), piece)

        if target == from_position:
            return Action.null_move(from_position, piece)
        if not self.piece_at(target).is_empty():
            return Action.shove(from_position, target, piece)
        return Action.move(from_position, target, piece)

    # -- PRIVATE HELPERS ---
    def _repeats_recent_position(self, board_notation: str) -> bool:
        return board_notation in self.position_history[-REPETITION_WINDOW:]


# -- LASER HELPERS ---
def _lasers_on(board: Board, color: Color) -> list[Laser]:
    lasers: list[Laser] = []
    for position in board.locate_queens(color):
        direction = board.get(position).direction
        assert direction is not None
        lasers.append(Laser(position, direction))
    return lasers


def _fire_lasers(board: Board, color: Color) -> None:
    """
    All lasers are aimed before the first one fires. They fire one after the other on the same board.
    A queen destroyed by an earlier laser of the same turn no longer fires.
    """
    for laser in _lasers_on(board, color):
        shooter = board.get(laser.position)
        if not (shooter.is_queen() and shooter.belongs_to(color)):
            continue
        laser.fire_on(board)
