"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from laserchess.core.exceptions import InvalidRequestError
from laserchess.core.shared_types import Player, Status
from laserchess.game.actions import ACTION_PATTERN
from laserchess.game.position import ALGEBRAIC_PATTERN


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_notation: Optional[str] = None

    @field_validator("starting_notation")
    @classmethod
    def validate_starting_notation(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        parts = value.strip().split()
        if len(parts) != 2:
            raise InvalidRequestError(
                "Notation must contain 2 space-separated parts: the board and the player to move."
            )
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalActionsRequest(BaseModel):
    game_id: UUID
    square: str

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not ALGEBRAIC_PATTERN.match(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value


class ActionRequest(BaseModel):
    game_id: UUID
    action: str

    @field_validator("action")
    @classmethod
    def validate_action(cls, value: str) -> str:
        if not ACTION_PATTERN.match(value):
            raise InvalidRequestError(
                f"Cannot interpret action: {value!r}. Expected ex. 'd2e3' or 'd2R'."
            )
        return value


class UndoRequest(BaseModel):
    game_id: UUID


class GoToMoveRequest(BaseModel):
    game_id: UUID
    move_number: int


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    notation: str
    starting_notation: str
    player_to_move: Player
    action_history: list[str]
    status: Status


class LegalActionsResponse(BaseModel):
    game_id: UUID
    square: str
    player: Player
    legal_actions: list[str]
