import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from lue_lue.enums import CardType, GameState
from lue_lue.services.game_service import select_new_card_to_be_played

from .chat import Chat


class Game(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    # id of the player whose turn it is
    which_player_turn: str
    state: GameState = GameState.STARTING
    started_at: Optional[datetime] = None
    round_number: int = 0
    card_to_play: CardType
    chat: Optional[Chat] = None

    model_config = {"from_attributes": True}

    @classmethod
    def new(cls, which_player_turn: str) -> "Game":
        return cls(
            which_player_turn=which_player_turn,
            card_to_play=select_new_card_to_be_played(),
        )


class UpdateGameDTO(BaseModel):
    """Partial game update.  ``None`` leaves a column unchanged."""

    id: str
    state: Optional[GameState] = None
    round_number: Optional[int] = Field(default=None, ge=0)
    card_to_play: Optional[CardType] = None
    which_player_turn: Optional[str] = None

    def has_changes(self) -> bool:
        return any(
            value is not None
            for value in (
                self.state,
                self.round_number,
                self.card_to_play,
                self.which_player_turn,
            )
        )
