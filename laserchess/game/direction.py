"""
The two direction algebras of the game.
---

* Queens face one of the cardinal directions: north, east, south, west.
* Pawns (the mirrors) face one of the diagonal directions: north-east, south-east, south-west, north-west.

Both families are listed in clockwise order, so rotating is just stepping through the members (mod 4).
North points to the top of the board (row - 1), east to the right (column + 1).
"""

from __future__ import annotations

from enum import Enum

from laserchess.core.exceptions import DirectionError
from laserchess.game.position import Position

Vector = tuple[int, int]


class RelativeRotation(Enum):
    """How one direction relates to another. Values are the suffixes used in rotation notation."""

    SAME = ""
    CLOCKWISE = "R"
    COUNTER_CLOCKWISE = "L"
    HALF_TURN = "U"


# number of clockwise quarter turns needed for each relation
ROTATION_STEPS: dict[RelativeRotation, int] = {
    RelativeRotation.SAME: 0,
    RelativeRotation.CLOCKWISE: 1,
    RelativeRotation.HALF_TURN: 2,
    RelativeRotation.COUNTER_CLOCKWISE: 3,
}

STEPS_TO_ROTATION: dict[int, RelativeRotation] = {
    steps: rotation for rotation, steps in ROTATION_STEPS.items()
}


class CompassDirection(Enum):
    """Behaviour shared by both families. Members are defined on the subclasses in clockwise order."""

    def _cycle(self) -> list[CompassDirection]:
        return list(type(self))

    def rotated_by_steps(self, steps: int) -> CompassDirection:
        cycle = self._cycle()
        return cycle[(cycle.index(self) + steps) % len(cycle)]

    def rotated_clockwise(self):
        return self.rotated_by_steps(1)

    def rotated_counter_clockwise(self):
        return self.rotated_by_steps(3)

    def rotated_180(self):
        return self.rotated_by_steps(2)

    def rotated_by(self, rotation: RelativeRotation):
        return self.rotated_by_steps(ROTATION_STEPS[rotation])

    def relative_rotation_to(self, other: CompassDirection) -> RelativeRotation:
        """Which rotation turns `self` into `other`."""
        if type(other) is not type(self):
            raise DirectionError(
                f"Cannot relate {self.value} to {other.value}: they are not in the same direction family."
            )
        cycle = self._cycle()
        steps = (cycle.index(other) - cycle.index(self)) % len(cycle)
        return STEPS_TO_ROTATION[steps]

    def applied_to(self, position: Position) -> Position:
        """A single step from the position in this direction (the result might be off the board)"""
        d_column, d_row = STEP_VECTORS[self.value]
        return position.offset(d_column, d_row)

    def decompose(self) -> tuple[CardinalDirection, CardinalDirection]:
        raise DirectionError(f"Cannot decompose {self.value} into two cardinal directions.")

    def __str__(self) -> str:
        return self.value


class CardinalDirection(CompassDirection):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


class DiagonalDirection(CompassDirection):
    NORTH_EAST = "north-east"
    SOUTH_EAST = "south-east"
    SOUTH_WEST = "south-west"
    NORTH_WEST = "north-west"

    def decompose(self) -> tuple[CardinalDirection, CardinalDirection]:
        """The two faces of a mirror pointing in this direction (geometry, not rotation)"""
        return DECOMPOSITION[self]


Direction = CardinalDirection | DiagonalDirection


STEP_VECTORS: dict[str, Vector] = {
    "north": (0, -1),
    "east": (1, 0),
    "south": (0, 1),
    "west": (-1, 0),
    "north-east": (1, -1),
    "south-east": (1, 1),
    "south-west": (-1, 1),
    "north-west": (-1, -1),
}

DECOMPOSITION: dict[DiagonalDirection, tuple[CardinalDirection, CardinalDirection]] = {
    DiagonalDirection.NORTH_EAST: (CardinalDirection.NORTH, CardinalDirection.EAST),
    DiagonalDirection.SOUTH_EAST: (CardinalDirection.SOUTH, CardinalDirection.EAST),
    DiagonalDirection.SOUTH_WEST: (CardinalDirection.SOUTH, CardinalDirection.WEST),
    DiagonalDirection.NORTH_WEST: (CardinalDirection.NORTH, CardinalDirection.WEST),
}
