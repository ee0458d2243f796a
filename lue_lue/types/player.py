import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .card import Card


class Player(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(min_length=1)
    score: Optional[int] = 0
    joined_at: Optional[datetime] = None
    assigned_cards: list[Card] = []

    model_config = {"from_attributes": True}

    @classmethod
    def new(cls, name: str) -> "Player":
        return cls(name=name)


class UpdatePlayerDTO(BaseModel):
    id: str
    name: Optional[str] = None
    score: Optional[int] = None

    def has_changes(self) -> bool:
        return self.name is not None or self.score is not None
