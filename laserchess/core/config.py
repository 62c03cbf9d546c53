"""
Game constants / configuration.

The board is always 8x8 in the real game. Just in case we want to try some funky stuff, it is adjustable in one place.
"""

BOARD_SIZE = 8

# Queens in the corners, pawns in three mirror pairs on the second and seventh row. Light moves first.
OPENING_NOTATION = "nn6nn/sesw1sesw1sesw/8/8/8/8/NENW1NENW1NENW/SS6SS W"

# Loggers are named per layer. The package never attaches handlers, that is up to the application.
GAME_LOGGER = "laserchess.game"
SERVICE_LOGGER = "laserchess.service"

# The SQL repository runs on an in-memory SQLite database unless a different URL is given.
DATABASE_URL = "sqlite://"
