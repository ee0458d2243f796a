import uuid
from typing import Optional

from pydantic import BaseModel, Field

from .game import Game
from .player import Player


class StatusUpdateRequest(BaseModel):
    player_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    game_id: str = Field(default_factory=lambda: str(uuid.uuid4()))


class StatusUpdate(BaseModel):
    """Payload of one event on the status stream."""

    game_data: Optional[Game] = None
    player_data: Optional[Player] = None
    player_excluded_from_game: bool = False
