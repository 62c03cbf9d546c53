"""
The actions a player can take in a turn
---

* Move: step a piece to an adjacent empty square.
* Rotation: turn a piece in place (identity is preserved).
* Shove: step onto an adjacent occupied square. The occupant is pushed one square further in the same direction,
  or destroyed when that square is taken or off the board. Only outward shoves (away from the center) are allowed,
  and queens cannot be shoved.
* NullMove: pass, allowed for any piece except a queen.

Key idea: one closed set of action kinds. Each kind has its own rules, looked up in a table by kind
(strategy pattern), rather than spread over a class hierarchy.

Validity here is structural only. Whether an action results in a legal turn is decided by the GameState.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Self

from laserchess.core.exceptions import InvalidActionError, InvalidNotationError
from laserchess.game.board import Board
from laserchess.game.direction import Direction, RelativeRotation
from laserchess.game.pieces import Color, Piece
from laserchess.game.position import Position

ACTION_PATTERN = re.compile(r"^([a-z]+[1-9][0-9]*)(?:([a-z]+[1-9][0-9]*)|([RLU]))$")


class ActionKind(Enum):
    MOVE = auto()
    ROTATION = auto()
    SHOVE = auto()
    NULL_MOVE = auto()


@dataclass(frozen=True)
class Action:
    """
    Immutable description of an intended transformation of the board.

    `piece` is the piece standing on `from_position` when the action was created.
    For rotations and null moves `to_position` equals `from_position`.
    """

    kind: ActionKind
    from_position: Position
    to_position: Position
    piece: Piece
    new_direction: Optional[Direction] = None

    # --- CONSTRUCTORS: one per kind ---
    @classmethod
    def move(cls, from_position: Position, to_position: Position, piece: Piece) -> Self:
        return cls(ActionKind.MOVE, from_position, to_position, piece)

    @classmethod
    def shove(cls, from_position: Position, to_position: Position, piece: Piece) -> Self:
        return cls(ActionKind.SHOVE, from_position, to_position, piece)

    @classmethod
    def rotation(cls, position: Position, new_direction: Direction, piece: Piece) -> Self:
        return cls(ActionKind.ROTATION, position, position, piece, new_direction)

    @classmethod
    def null_move(cls, position: Position, piece: Piece) -> Self:
        return cls(ActionKind.NULL_MOVE, position, position, piece)

    # --- RULES ---
    def is_valid(self) -> bool:
        """Structural precondition, independent of the board"""
        if self.piece.is_empty():
            return False
        return VALIDITY_RULES[self.kind](self)

    def applied_to(self, board: Board) -> Board:
        """Mutate and return the board"""
        if board.get(self.from_position) != self.piece:
            raise InvalidActionError(
                f"Action {self} expects {self.piece} on {self.from_position}, found {board.get(self.from_position)}."
            )
        APPLY_RULES[self.kind](self, board)
        return board

    def match_player(self, color: Color) -> bool:
        """True if the piece being acted upon belongs to the player with this color"""
        return self.piece.color == color

    def transformed_piece(self) -> Piece:
        """The acting piece after the action: rotated for a rotation, unchanged otherwise"""
        if self.kind == ActionKind.ROTATION:
            assert self.new_direction is not None
            return self.piece.facing(self.new_direction)
        return self.piece

    # --- NOTATION ---
    def to_notation(self) -> str:
        """
        * Move, shove, null move: <from><to>, ex. "d2e3", "c2c2"
        * Rotation: <from><R|L|U>, ex. "d2R" (R: clockwise, L: counter-clockwise, U: 180 degrees)
        """
        if self.kind == ActionKind.ROTATION:
            return f"{self.from_position}{self.relative_rotation().value}"
        return f"{self.from_position}{self.to_position}"

    def relative_rotation(self) -> RelativeRotation:
        if self.kind != ActionKind.ROTATION or self.piece.direction is None or self.new_direction is None:
            raise InvalidActionError(f"{self.kind.name.lower()} is not a rotation.")
        return self.piece.direction.relative_rotation_to(self.new_direction)

    def __str__(self) -> str:
        try:
            return self.to_notation()
        except InvalidActionError:
            return f"{self.kind.name.lower()} {self.from_position}"


def parse_action_notation(text: str) -> tuple[Position, Position | RelativeRotation]:
    """
    Split action notation into the origin and either the destination or the rotation.

    NOTE: The kind of action (move vs shove) depends on the board, that is resolved by the GameState.
    """
    match = ACTION_PATTERN.match(text.strip())
    if match is None:
        raise InvalidNotationError(f"Cannot interpret {text!r} as an action.")

    origin, destination, rotation = match.groups()
    from_position = Position.from_algebraic(origin)
    if rotation:
        return from_position, RelativeRotation(rotation)
    return from_position, Position.from_algebraic(destination)


# --- VALIDITY RULES ---
def _is_valid_move(action: Action) -> bool:
    return action.from_position.is_adjacent_to(action.to_position)


def _is_valid_shove(action: Action) -> bool:
    """No pulling pieces inwards: the target lies strictly further from the center than the source"""
    is_adjacent = action.from_position.is_adjacent_to(action.to_position)
    is_outward = (
        action.to_position.distance_from_center()
        > action.from_position.distance_from_center()
    )
    return is_adjacent and is_outward


def _is_valid_rotation(action: Action) -> bool:
    """The piece must end up facing a different direction (of its own family)"""
    old_direction = action.piece.direction
    new_direction = action.new_direction
    if new_direction is None or type(new_direction) is not type(old_direction):
        return False
    return action.from_position == action.to_position and new_direction != old_direction


def _is_valid_null_move(action: Action) -> bool:
    """Passing is only possible with a piece that is not a queen"""
    return action.from_position == action.to_position and not action.piece.is_queen()


# --- BOARD TRANSFORMATIONS ---
def _apply_move(action: Action, board: Board) -> None:
    if not board.is_empty_at(action.to_position):
        raise InvalidActionError(f"Cannot move onto occupied square {action.to_position}.")
    board.set(action.to_position, action.piece)
    board.clear(action.from_position)


def _apply_rotation(action: Action, board: Board) -> None:
    board.set(action.from_position, action.transformed_piece())


def _apply_shove(action: Action, board: Board) -> None:
    """
    The shoved piece continues one square in the direction of the shove.
    If that square is off the board or occupied, the shoved piece is destroyed.
    """
    shoved_piece = board.get(action.to_position)
    if shoved_piece.is_empty():
        raise InvalidActionError(f"Nothing to shove on {action.to_position}.")
    if shoved_piece.is_queen():
        raise InvalidActionError(f"Queens cannot be shoved ({action.to_position}).")

    d_column, d_row = action.to_position.difference(action.from_position)
    pushed_to = action.to_position.offset(d_column, d_row)
    if pushed_to.is_within_bounds() and board.is_empty_at(pushed_to):
        board.set(pushed_to, shoved_piece)

    board.set(action.to_position, action.piece)
    board.clear(action.from_position)


def _apply_null_move(action: Action, board: Board) -> None:
    return None


# -- STRATEGY PATTERN: RULES PER KIND ---
ValidityFn = Callable[[Action], bool]
ApplyFn = Callable[[Action, Board], None]

VALIDITY_RULES: dict[ActionKind, ValidityFn] = {
    ActionKind.MOVE: _is_valid_move,
    ActionKind.SHOVE: _is_valid_shove,
    ActionKind.ROTATION: _is_valid_rotation,
    ActionKind.NULL_MOVE: _is_valid_null_move,
}

APPLY_RULES: dict[ActionKind, ApplyFn] = {
    ActionKind.MOVE: _apply_move,
    ActionKind.SHOVE: _apply_shove,
    ActionKind.ROTATION: _apply_rotation,
    ActionKind.NULL_MOVE: _apply_null_move,
}
