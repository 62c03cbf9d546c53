"""Defines the pieces of the game and how they reflect a laser"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from itertools import count
from typing import Optional, Self

from laserchess.core.exceptions import InvalidNotationError, PieceError
from laserchess.game.direction import CardinalDirection, DiagonalDirection, Direction


class PieceType(Enum):
    EMPTY = auto()
    QUEEN = auto()
    PAWN = auto()


class Color(Enum):
    NONE = auto()
    LIGHT = auto()
    DARK = auto()

    @property
    def opponent(self) -> Color:
        if self == Color.NONE:
            raise PieceError("An empty square has no opponent.")
        return Color.DARK if self == Color.LIGHT else Color.LIGHT


# Every direction has a one or two letter code. Queens repeat it ("NN"), pawns use the compass pair ("NE").
DIRECTION_TO_CODE: dict[Direction, str] = {
    CardinalDirection.NORTH: "N",
    CardinalDirection.EAST: "E",
    CardinalDirection.SOUTH: "S",
    CardinalDirection.WEST: "W",
    DiagonalDirection.NORTH_EAST: "NE",
    DiagonalDirection.SOUTH_EAST: "SE",
    DiagonalDirection.SOUTH_WEST: "SW",
    DiagonalDirection.NORTH_WEST: "NW",
}

TOKEN_TO_PIECE: dict[str, tuple[PieceType, Direction]] = {
    **{
        code * 2: (PieceType.QUEEN, direction)
        for direction, code in DIRECTION_TO_CODE.items()
        if isinstance(direction, CardinalDirection)
    },
    **{
        code: (PieceType.PAWN, direction)
        for direction, code in DIRECTION_TO_CODE.items()
        if isinstance(direction, DiagonalDirection)
    },
}

# Queens face a cardinal direction, pawns a diagonal one.
DIRECTION_FAMILY: dict[PieceType, type] = {
    PieceType.QUEEN: CardinalDirection,
    PieceType.PAWN: DiagonalDirection,
}

_uid_counter = count()


def next_uid() -> int:
    return next(_uid_counter)


@dataclass(frozen=True)
class Piece:
    """
    Immutable description of whatever is standing on a square.
    ---

    * An empty square is a piece as well: PieceType.EMPTY, Color.NONE and no direction.
    * `uid` identifies the physical piece. It survives moving and rotating, but a piece constructed from scratch
      gets a new one. It does not take part in comparisons: two queens facing north are equal.
    """

    type: PieceType
    color: Color
    direction: Optional[Direction] = None
    uid: int = field(default_factory=next_uid, compare=False)

    def __post_init__(self):
        if self.type == PieceType.EMPTY:
            if self.color != Color.NONE or self.direction is not None:
                raise PieceError("An empty square cannot have a color or a direction.")
            return

        if self.color == Color.NONE:
            raise PieceError(f"A {self.type.name.lower()} must have a color.")
        if not isinstance(self.direction, DIRECTION_FAMILY[self.type]):
            raise PieceError(
                f"A {self.type.name.lower()} cannot face {self.direction}."
            )

    @classmethod
    def empty(cls) -> Self:
        return cls(PieceType.EMPTY, Color.NONE)

    @classmethod
    def queen(cls, color: Color, direction: CardinalDirection) -> Self:
        return cls(PieceType.QUEEN, color, direction)

    @classmethod
    def pawn(cls, color: Color, direction: DiagonalDirection) -> Self:
        return cls(PieceType.PAWN, color, direction)

    @classmethod
    def from_notation(cls, token: str) -> Self:
        # upper case: light pieces, lower case: dark pieces
        if token.upper() not in TOKEN_TO_PIECE or not (token.isupper() or token.islower()):
            raise InvalidNotationError(f"Cannot interpret {token!r} as a piece.")
        color = Color.LIGHT if token.isupper() else Color.DARK
        piece_type, direction = TOKEN_TO_PIECE[token.upper()]
        return cls(piece_type, color, direction)

    def to_notation(self) -> str:
        if self.is_empty():
            raise PieceError("An empty square has no piece notation.")
        code = DIRECTION_TO_CODE[self.direction]
        token = code * 2 if self.type == PieceType.QUEEN else code
        return token if self.color == Color.LIGHT else token.lower()

    def is_empty(self) -> bool:
        return self.type == PieceType.EMPTY

    def is_queen(self) -> bool:
        return self.type == PieceType.QUEEN

    def belongs_to(self, color: Color) -> bool:
        return not self.is_empty() and self.color == color

    # --- ROTATIONS: same physical piece, new orientation ---
    def facing(self, direction: Direction) -> Piece:
        if self.is_empty():
            raise PieceError("Cannot rotate an empty square.")
        return replace(self, direction=direction)

    def rotated_clockwise(self) -> Piece:
        return self.facing(self._direction().rotated_clockwise())

    def rotated_counter_clockwise(self) -> Piece:
        return self.facing(self._direction().rotated_counter_clockwise())

    def rotated_180(self) -> Piece:
        return self.facing(self._direction().rotated_180())

    def reflect(self, incoming: CardinalDirection) -> Optional[CardinalDirection]:
        """
        Where does a laser travelling in `incoming` direction go after hitting this piece?
        ---

        * Queens absorb the laser: None.
        * Pawns are mirrors. The two faces of the mirror are the cardinal components of the pawn's direction.
          The laser bounces off a face if it travels straight into it (incoming is the face rotated by 180 degrees),
          and leaves along the other face. Hitting the back of the mirror absorbs the laser: None.

        NOTE: Empty squares are transparent, the laser simply passes. The Laser never asks them to reflect.
        """
        if self.type != PieceType.PAWN:
            return None

        face_a, face_b = self._direction().decompose()
        if face_a.rotated_180() == incoming:
            return face_b
        if face_b.rotated_180() == incoming:
            return face_a
        return None

    def _direction(self) -> Direction:
        if self.direction is None:
            raise PieceError("Cannot get the direction of an empty square.")
        return self.direction

    def __str__(self) -> str:
        return "." if self.is_empty() else self.to_notation()
