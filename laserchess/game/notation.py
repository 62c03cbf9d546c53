"""
The board notation: the wire format used to load/store a position.
---

<rows> <player>

* Rows are separated by slashes, the first row written is row 0 (the top of the board).
* Inside a row every piece is a two letter token, and a decimal number counts consecutive empty squares.
* Queens double their direction letter (NN, SS, EE, WW), pawns use the compass pair (NE, NW, SE, SW).
  Upper case for the light pieces, lower case for the dark pieces.
* The player to move is W (light) or B (dark).

ex) The opening position
nn6nn/sesw1sesw1sesw/8/8/8/8/NENW1NENW1NENW/SS6SS W
"""

import re

from laserchess.core.config import BOARD_SIZE
from laserchess.core.exceptions import InvalidNotationError
from laserchess.game.pieces import TOKEN_TO_PIECE, Color, Piece
from laserchess.game.position import Position

PLAYER_TO_CODE: dict[Color, str] = {Color.LIGHT: "W", Color.DARK: "B"}
CODE_TO_PLAYER: dict[str, Color] = {code: color for color, code in PLAYER_TO_CODE.items()}

# a run of empty squares or a two letter piece token
ROW_ITEM_PATTERN = re.compile(r"[0-9]+|[A-Za-z]{2}")


def is_valid_notation(notation: str) -> bool:
    """
    Check if given string follows the board notation: board rows and the player to move.
    """
    parts = notation.strip().split()
    if len(parts) != 2:
        return False

    rows, player = parts
    return is_valid_rows(rows) and is_valid_player_code(player)


def is_valid_rows(rows: str) -> bool:
    """Only check the part of the notation for the board itself."""
    try:
        parse_rows(rows)
    except InvalidNotationError:
        return False
    return True


def is_valid_player_code(player: str) -> bool:
    return player.upper() in CODE_TO_PLAYER


def is_valid_position(square: str) -> bool:
    """Valid square should be letters for the column + a number for the row, and lie on the board"""
    try:
        position = Position.from_algebraic(square)
    except InvalidNotationError:
        return False
    return position.is_within_bounds()


def parse_notation(notation: str) -> tuple[list[list[Piece]], Color]:
    """Parse the full notation into the grid of pieces (row by row) and the player to move"""
    parts = notation.strip().split()
    if len(parts) != 2:
        raise InvalidNotationError(
            f"Expected '<rows> <player>', cannot interpret: {notation!r}"
        )

    rows, player = parts
    if not is_valid_player_code(player):
        raise InvalidNotationError(f"Player to move should be W or B, not {player!r}")
    return parse_rows(rows), CODE_TO_PLAYER[player.upper()]


def parse_rows(rows: str) -> list[list[Piece]]:
    """Parse the board part of the notation. Every row must describe exactly BOARD_SIZE squares."""
    row_strings = rows.split("/")
    if len(row_strings) != BOARD_SIZE:
        raise InvalidNotationError(
            f"Expected {BOARD_SIZE} rows, found {len(row_strings)} in {rows!r}"
        )
    return [_parse_row(row_string) for row_string in row_strings]


def _parse_row(row_string: str) -> list[Piece]:
    row: list[Piece] = []
    position = 0
    for match in ROW_ITEM_PATTERN.finditer(row_string):
        # the items must cover the entire row string: no stray characters in between
        if match.start() != position:
            break
        position = match.end()

        item = match.group()
        if item.isdigit():
            if int(item) == 0:
                raise InvalidNotationError(f"Empty run of length zero in row {row_string!r}")
            row.extend(Piece.empty() for _ in range(int(item)))
        else:
            row.append(_parse_piece(item))

    if position != len(row_string):
        raise InvalidNotationError(f"Cannot parse row {row_string!r} after {row_string[:position]!r}")
    if len(row) != BOARD_SIZE:
        raise InvalidNotationError(
            f"Row {row_string!r} describes {len(row)} squares instead of {BOARD_SIZE}"
        )
    return row


def _parse_piece(token: str) -> Piece:
    if token.upper() not in TOKEN_TO_PIECE:
        raise InvalidNotationError(f"Unknown piece {token!r}")
    return Piece.from_notation(token)


def rows_to_notation(grid: list[list[Piece]]) -> str:
    """Reverse operation: consecutive empty squares are collapsed into a count. Rows are separated by slashes."""
    return "/".join(_row_to_notation(row) for row in grid)


def _row_to_notation(row: list[Piece]) -> str:
    characters: list[str] = []
    empty_count = 0
    for piece in row:
        if piece.is_empty():
            empty_count += 1
            continue

        if empty_count > 0:
            characters.append(str(empty_count))
            empty_count = 0
        characters.append(piece.to_notation())

    # if the entire row is empty, then we still place this number in the string
    if empty_count > 0:
        characters.append(str(empty_count))
    return "".join(characters)


def player_to_notation(color: Color) -> str:
    return PLAYER_TO_CODE[color]
