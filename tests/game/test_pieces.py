"""Unit tests for laserchess/game/pieces.py"""

import pytest

from laserchess.core.exceptions import InvalidNotationError, PieceError
from laserchess.game.direction import CardinalDirection, DiagonalDirection
from laserchess.game.pieces import Color, Piece, PieceType


# -- NOTATION --
@pytest.mark.parametrize(
    "token, piece_type, color, direction",
    [
        ("NN", PieceType.QUEEN, Color.LIGHT, CardinalDirection.NORTH),
        ("EE", PieceType.QUEEN, Color.LIGHT, CardinalDirection.EAST),
        ("ss", PieceType.QUEEN, Color.DARK, CardinalDirection.SOUTH),
        ("ww", PieceType.QUEEN, Color.DARK, CardinalDirection.WEST),
        ("NE", PieceType.PAWN, Color.LIGHT, DiagonalDirection.NORTH_EAST),
        ("SW", PieceType.PAWN, Color.LIGHT, DiagonalDirection.SOUTH_WEST),
        ("se", PieceType.PAWN, Color.DARK, DiagonalDirection.SOUTH_EAST),
        ("nw", PieceType.PAWN, Color.DARK, DiagonalDirection.NORTH_WEST),
    ],
)
def test_piece_from_notation(
    token: str, piece_type: PieceType, color: Color, direction
) -> None:
    """Upper case tokens are light pieces, lower case tokens dark pieces"""
    piece = Piece.from_notation(token)
    assert piece.type == piece_type
    assert piece.color == color
    assert piece.direction == direction
    assert piece.to_notation() == token


@pytest.mark.parametrize("token", ["Nn", "nE", "XX", "N", "NS", "EW", "nnn", ""])
def test_invalid_piece_notation(token: str) -> None:
    with pytest.raises(InvalidNotationError):
        _ = Piece.from_notation(token)


def test_empty_square_has_no_notation() -> None:
    with pytest.raises(PieceError):
        _ = Piece.empty().to_notation()
    assert str(Piece.empty()) == "."


# -- INVARIANTS --
def test_queen_must_face_cardinal_direction() -> None:
    with pytest.raises(PieceError):
        _ = Piece(PieceType.QUEEN, Color.LIGHT, DiagonalDirection.NORTH_EAST)


def test_pawn_must_face_diagonal_direction() -> None:
    with pytest.raises(PieceError):
        _ = Piece(PieceType.PAWN, Color.DARK, CardinalDirection.NORTH)


@pytest.mark.parametrize(
    "color, direction",
    [
        (Color.LIGHT, None),
        (Color.NONE, CardinalDirection.NORTH),
    ],
)
def test_empty_square_has_no_color_or_direction(color: Color, direction) -> None:
    with pytest.raises(PieceError):
        _ = Piece(PieceType.EMPTY, color, direction)


def test_pieces_need_a_color() -> None:
    with pytest.raises(PieceError):
        _ = Piece(PieceType.QUEEN, Color.NONE, CardinalDirection.NORTH)


def test_opponent() -> None:
    assert Color.LIGHT.opponent == Color.DARK
    assert Color.DARK.opponent == Color.LIGHT
    with pytest.raises(PieceError):
        _ = Color.NONE.opponent


# -- IDENTITY --
def test_equality_ignores_identity() -> None:
    """Two separately created queens facing the same way are equal, but are not the same physical piece"""
    first = Piece.from_notation("NN")
    second = Piece.from_notation("NN")
    assert first == second
    assert first.uid != second.uid


def test_rotation_preserves_identity() -> None:
    pawn = Piece.from_notation("NE")
    rotated = pawn.rotated_clockwise()
    assert rotated.direction == DiagonalDirection.SOUTH_EAST
    assert rotated.uid == pawn.uid
    assert pawn.direction == DiagonalDirection.NORTH_EAST  # immutable


def test_rotate_empty_square() -> None:
    with pytest.raises(PieceError):
        _ = Piece.empty().rotated_180()


def test_belongs_to() -> None:
    assert Piece.from_notation("NE").belongs_to(Color.LIGHT)
    assert not Piece.from_notation("NE").belongs_to(Color.DARK)
    assert not Piece.empty().belongs_to(Color.NONE)


# -- REFLECTION --
@pytest.mark.parametrize(
    "incoming, outgoing",
    [
        (CardinalDirection.SOUTH, CardinalDirection.EAST),
        (CardinalDirection.WEST, CardinalDirection.NORTH),
        (CardinalDirection.NORTH, None),  # back of the mirror
        (CardinalDirection.EAST, None),
    ],
)
def test_north_east_mirror(incoming: CardinalDirection, outgoing) -> None:
    """
    A pawn facing north-east has its faces to the north and east.
    A laser travelling south hits the north face and leaves to the east.
    """
    assert Piece.from_notation("NE").reflect(incoming) == outgoing


@pytest.mark.parametrize(
    "token, incoming, outgoing",
    [
        ("SE", CardinalDirection.NORTH, CardinalDirection.EAST),
        ("SE", CardinalDirection.WEST, CardinalDirection.SOUTH),
        ("sw", CardinalDirection.NORTH, CardinalDirection.WEST),
        ("sw", CardinalDirection.EAST, CardinalDirection.SOUTH),
        ("nw", CardinalDirection.SOUTH, CardinalDirection.WEST),
        ("nw", CardinalDirection.EAST, CardinalDirection.NORTH),
    ],
)
def test_other_mirrors(token: str, incoming: CardinalDirection, outgoing) -> None:
    assert Piece.from_notation(token).reflect(incoming) == outgoing


@pytest.mark.parametrize("incoming", list(CardinalDirection))
def test_queens_absorb(incoming: CardinalDirection) -> None:
    assert Piece.from_notation("NN").reflect(incoming) is None
    assert Piece.from_notation("ss").reflect(incoming) is None


@pytest.mark.parametrize("token", ["NE", "SE", "SW", "NW"])
@pytest.mark.parametrize("incoming", list(CardinalDirection))
def test_reflection_is_reversible(token: str, incoming: CardinalDirection) -> None:
    """A beam sent back along the reflected path leaves the mirror along the reversed incoming path"""
    pawn = Piece.from_notation(token)
    outgoing = pawn.reflect(incoming)
    if outgoing is None:
        return
    assert pawn.reflect(outgoing.rotated_180()) == incoming.rotated_180()


@pytest.mark.parametrize("token", ["NE", "SE", "SW", "NW"])
def test_each_mirror_reflects_two_directions(token: str) -> None:
    """Exactly one of the two faces matches for the two reflecting directions, the back absorbs the other two"""
    pawn = Piece.from_notation(token)
    reflected = [incoming for incoming in CardinalDirection if pawn.reflect(incoming) is not None]
    assert len(reflected) == 2
