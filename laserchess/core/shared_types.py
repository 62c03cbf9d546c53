"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    LIGHT_WINS = "light wins"
    DARK_WINS = "dark wins"


# --- NOTE Player colors as they travel across the boundary. The domain layer has its own Color (with an option for empty squares)
class Player(StrEnum):
    LIGHT = "light"
    DARK = "dark"
