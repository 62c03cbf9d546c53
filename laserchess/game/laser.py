"""
The laser fired by a queen at the end of every turn
---

Raycasting, similar to finding the line-of-sight of a sliding piece in chess.
We step from square to square along the current direction until
* we leave the board: the laser escapes and nothing happens, or
* we hit a piece that does not reflect the laser: that piece is removed.

Pawns (mirrors) that are hit on one of their faces turn the laser by 90 degrees and the search continues.
"""

from dataclasses import dataclass
from typing import Optional

from laserchess.core.exceptions import OutOfBoundsError
from laserchess.game.board import Board
from laserchess.game.direction import CardinalDirection
from laserchess.game.position import Position


@dataclass(frozen=True)
class Laser:
    position: Position
    direction: CardinalDirection

    def __post_init__(self):
        if not self.position.is_within_bounds():
            raise OutOfBoundsError(f"A laser cannot be fired from {self.position!r}.")

    def path_on(self, board: Board) -> list[Position]:
        """
        Every square the laser travels through.

        Starts with the firing square and ends with the square the laser gets absorbed in,
        or with the first square off the board if it escapes.

        NOTE: Fired from an empty square, mirrors can send the beam back along the same track forever.
        The path stops as soon as a (square, direction) pair repeats.
        """
        travelling: Optional[CardinalDirection] = self.direction
        current = self.position
        path: list[Position] = [current]
        visited: set[tuple[Position, CardinalDirection]] = {(current, travelling)}

        while travelling is not None:
            current = travelling.applied_to(current)
            path.append(current)
            if not current.is_within_bounds():
                break

            if (current, travelling) in visited:
                break
            visited.add((current, travelling))

            piece = board.get(current)
            # empty squares are transparent
            if not piece.is_empty():
                travelling = piece.reflect(travelling)

        return path

    def final_position_on(self, board: Board) -> Optional[Position]:
        """None if the laser flies off the board, or circles without hitting anything"""
        last_position = self.path_on(board)[-1]
        if not last_position.is_within_bounds() or board.is_empty_at(last_position):
            return None
        return last_position

    def fire_on(self, board: Board) -> Board:
        """Remove whatever piece the laser ends on (friend or foe, possibly the queen that fired it)"""
        final_position = self.final_position_on(board)
        if final_position is not None:
            board.clear(final_position)
        return board
