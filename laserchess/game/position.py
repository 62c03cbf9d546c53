"""
A position (square) on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from string import ascii_lowercase

from laserchess.core.config import BOARD_SIZE
from laserchess.core.exceptions import InvalidNotationError

ALGEBRAIC_PATTERN = re.compile(r"^([a-z]+)([1-9][0-9]*)$")


@dataclass(frozen=True)
class Position:
    """(column, row), both 0-indexed. Row 0 is the first row written in the board notation."""

    column: int
    row: int

    @classmethod
    def from_algebraic(cls, text: str) -> Position:
        """
        Algebraic notation: letters for the column, 1-indexed number for the row.
        ----

        * 'a1' -> (0, 0), 'h8' -> (7, 7)
        * columns continue like spreadsheet columns: 'z' -> 25, 'aa' -> 26, 'ab' -> 27, ...
        """
        match = ALGEBRAIC_PATTERN.match(text.lower())
        if match is None:
            raise InvalidNotationError(f"Cannot interpret {text!r} as a position.")
        letters, digits = match.groups()

        column = 0
        for letter in letters:
            column = column * 26 + ascii_lowercase.index(letter) + 1
        return cls(column - 1, int(digits) - 1)

    def to_algebraic(self) -> str:
        letters = ""
        column = self.column
        while column >= 0:
            letters = ascii_lowercase[column % 26] + letters
            column = column // 26 - 1
        return f"{letters}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.column < BOARD_SIZE) and (0 <= self.row < BOARD_SIZE)

    def is_adjacent_to(self, other: Position) -> bool:
        """Chebyshev distance of exactly one (a position is not adjacent to itself)"""
        distance = max(abs(self.column - other.column), abs(self.row - other.row))
        return distance == 1

    def offset(self, d_column: int, d_row: int) -> Position:
        return Position(self.column + d_column, self.row + d_row)

    def difference(self, other: Position) -> tuple[int, int]:
        return self.column - other.column, self.row - other.row

    def distance_from_center(self) -> float:
        """Squared euclidean distance from the geometric center of the board. Used to gate shoves."""
        center = (BOARD_SIZE - 1) / 2
        return (self.column - center) ** 2 + (self.row - center) ** 2

    def neighbours(self) -> list[Position]:
        """All adjacent positions that lie on the board"""
        candidates = [
            self.offset(d_column, d_row)
            for d_column, d_row in NEIGHBOUR_DELTAS
        ]
        return [position for position in candidates if position.is_within_bounds()]

    def __str__(self) -> str:
        return self.to_algebraic()


NEIGHBOUR_DELTAS: list[tuple[int, int]] = [
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (-1, -1),
    (1, -1),
    (-1, 1),
]
