import uuid

from pydantic import BaseModel, Field, model_validator

from .card import Card

MAX_CARDS_PER_CLAIM = 4


class Claim(BaseModel):
    """Cards a player puts down while claiming they match the card to play."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    created_by: str
    number_of_cards: int = 0
    cards: list[Card] = []

    model_config = {"from_attributes": True}

    @model_validator(mode="after")
    def _check_cards(self) -> "Claim":
        if len(self.cards) > MAX_CARDS_PER_CLAIM:
            raise ValueError(
                f"A claim holds at most {MAX_CARDS_PER_CLAIM} cards, got {len(self.cards)}"
            )
        if self.cards and not self.number_of_cards:
            self.number_of_cards = len(self.cards)
        return self
