"""
Generate every legal action for a selected square
---

1. Candidate actions are built from the geometry of the piece and its neighbours:
   rotations, moves to empty neighbours, outward shoves onto occupied neighbours, and a null move for non-queens.
2. Each candidate is then simulated as a full turn by the game (apply, fire lasers, check repetition),
   only the legal ones are returned.

Order of the result: rotations, moves, shoves, null move.
"""

from typing import Protocol

from laserchess.game.actions import Action
from laserchess.game.pieces import Color, Piece
from laserchess.game.position import Position


class Game(Protocol):
    """Just the parts the generation needs"""

    @property
    def current_player(self) -> Color: ...
    def piece_at(self, position: Position) -> Piece: ...
    def locate_pieces(self, color: Color) -> list[Position]: ...
    def is_legal_action(self, action: Action) -> bool: ...


def generate_actions(game: Game, position: Position) -> list[Action]:
    """All legal actions for the piece on the given square (empty square: no actions)"""
    piece = game.piece_at(position)
    if piece.is_empty():
        return []

    candidate_actions: list[Action] = []
    candidate_actions.extend(candidate_rotations(position, piece))
    candidate_actions.extend(candidate_moves(game, position, piece))
    candidate_actions.extend(candidate_shoves(game, position, piece))
    candidate_actions.extend(candidate_null_move(position, piece))

    return [action for action in candidate_actions if game.is_legal_action(action)]


def generate_all_actions(game: Game) -> list[Action]:
    """Convenience method: every legal action of the player to move, square by square"""
    actions: list[Action] = []
    for position in game.locate_pieces(game.current_player):
        actions.extend(generate_actions(game, position))
    return actions


# --- CANDIDATES PER KIND ---
def candidate_rotations(position: Position, piece: Piece) -> list[Action]:
    """The three orientations other than the current one: clockwise, counter-clockwise and 180 degrees"""
    rotated_pieces = [
        piece.rotated_clockwise(),
        piece.rotated_counter_clockwise(),
        piece.rotated_180(),
    ]
    return [
        Action.rotation(position, rotated.direction, piece)
        for rotated in rotated_pieces
        if rotated.direction is not None
    ]


def candidate_moves(game: Game, position: Position, piece: Piece) -> list[Action]:
    """A single step onto any empty neighbouring square"""
    return [
        Action.move(position, target, piece)
        for target in position.neighbours()
        if game.piece_at(target).is_empty()
    ]


def candidate_shoves(game: Game, position: Position, piece: Piece) -> list[Action]:
    """
    Any occupied neighbour can be shoved, except:
    * queens: they cannot be shoved at all.
    * squares closer to (or as close to) the center than the shoving piece.
    """
    source_distance = position.distance_from_center()
    shoves: list[Action] = []
    for target in position.neighbours():
        target_piece = game.piece_at(target)
        if target_piece.is_empty() or target_piece.is_queen():
            continue
        if target.distance_from_center() <= source_distance:
            continue
        shoves.append(Action.shove(position, target, piece))
    return shoves


def candidate_null_move(position: Position, piece: Piece) -> list[Action]:
    if piece.is_queen():
        return []
    return [Action.null_move(position, piece)]
