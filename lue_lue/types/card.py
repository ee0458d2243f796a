import uuid
from typing import Optional

from pydantic import BaseModel, Field

from lue_lue.enums import CardType


class Card(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    card_type: CardType = CardType.KING
    player_id: Optional[str] = None
    claim_id: Optional[str] = None

    model_config = {"from_attributes": True}


class UpdateCardDTO(BaseModel):
    """Partial card update.  ``None`` leaves a column unchanged."""

    id: str
    card_type: Optional[CardType] = None
    player_id: Optional[str] = None
    claim_id: Optional[str] = None

    def has_changes(self) -> bool:
        return any(
            value is not None
            for value in (self.card_type, self.player_id, self.claim_id)
        )

    def as_card(self) -> Card:
        return Card(
            id=self.id,
            card_type=self.card_type or CardType.KING,
            player_id=self.player_id,
            claim_id=self.claim_id,
        )
