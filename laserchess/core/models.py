"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Both the API layer (higher) and domain/db layers (lower) use the model defined here to send to/receive from the Service.
"""

from dataclasses import dataclass


@dataclass
class GameModel:
    """Transport-safe representation of a laser chess game used between API, Service, DB, and Game layers.

    The game can always be rebuilt by replaying `actions` on top of `starting_notation`.
    """

    starting_notation: str
    current_notation: str
    history_notation: list[str]
    actions: list[str]
    status: str
