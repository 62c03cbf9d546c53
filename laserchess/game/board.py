"""The Game board: an N x N grid of pieces, plus conversion to/from the board part of the notation"""

from dataclasses import dataclass
from typing import Iterator, Self

from laserchess.core.config import BOARD_SIZE
from laserchess.core.exceptions import OutOfBoundsError
from laserchess.game.notation import parse_rows, rows_to_notation
from laserchess.game.pieces import Color, Piece, PieceType
from laserchess.game.position import Position


@dataclass(repr=False)
class Board:
    """
    Every square of the board is always filled: an empty square holds Piece.empty().

    Pieces are immutable, so copying the grid is enough to get an independent board.
    """

    squares: dict[Position, Piece]

    @classmethod
    def empty(cls) -> Self:
        return cls(
            {
                Position(column, row): Piece.empty()
                for row in range(BOARD_SIZE)
                for column in range(BOARD_SIZE)
            }
        )

    @classmethod
    def from_notation(cls, rows: str) -> Self:
        """Construct a board using the board part of the notation.

        ex. opening position:
        nn6nn/sesw1sesw1sesw/8/8/8/8/NENW1NENW1NENW/SS6SS
        means:
        * dark queens in the two top corners, facing north
        * dark pawns on row 1 in three mirror pairs
        * rows 2 through 5 have 8 consecutive empty squares
        * light pawns mirror the dark ones on row 6, light queens in the bottom corners facing south.
        """
        return cls.from_rows(parse_rows(rows))

    @classmethod
    def from_rows(cls, grid: list[list[Piece]]) -> Self:
        """Rows of pieces, top row first"""
        return cls(
            {
                Position(column, row): piece
                for row, pieces in enumerate(grid)
                for column, piece in enumerate(pieces)
            }
        )

    def to_notation(self) -> str:
        return rows_to_notation(self.rows())

    def rows(self) -> list[list[Piece]]:
        return [
            [self.squares[Position(column, row)] for column in range(BOARD_SIZE)]
            for row in range(BOARD_SIZE)
        ]

    def copy(self) -> Self:
        return type(self)(dict(self.squares))

    # --- CELL ACCESS ---
    def get(self, position: Position) -> Piece:
        self._assert_within_bounds(position)
        return self.squares[position]

    def set(self, position: Position, piece: Piece) -> None:
        self._assert_within_bounds(position)
        self.squares[position] = piece

    def clear(self, position: Position) -> None:
        self.set(position, Piece.empty())

    def is_empty_at(self, position: Position) -> bool:
        return self.get(position).is_empty()

    # --- SEARCHING ---
    def locate_queens(self, color: Color) -> list[Position]:
        """Row by row, left to right. A player may have several queens (or none left)."""
        return [
            position
            for position, piece in self
            if piece.type == PieceType.QUEEN and piece.color == color
        ]

    def locate_color(self, color: Color) -> list[Position]:
        return [position for position, piece in self if piece.belongs_to(color)]

    def occupied_positions(self) -> list[Position]:
        return [position for position, piece in self if not piece.is_empty()]

    def __iter__(self) -> Iterator[tuple[Position, Piece]]:
        for row in range(BOARD_SIZE):
            for column in range(BOARD_SIZE):
                position = Position(column, row)
                yield position, self.squares[position]

    def __repr__(self) -> str:
        return f"Board({self.to_notation()!r})"

    def _assert_within_bounds(self, position: Position) -> None:
        if not position.is_within_bounds():
            raise OutOfBoundsError(f"Position {position!r} is not on the board.")
