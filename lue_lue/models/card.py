from typing import Optional

from sqlalchemy import ForeignKey, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Card(Base):
    __tablename__ = "cards"

    card_type: Mapped[int] = mapped_column(Integer, server_default=text("0"))
    player_id: Mapped[Optional[str]] = mapped_column(
        Text, ForeignKey("players.id"), nullable=True
    )
    claim_id: Mapped[Optional[str]] = mapped_column(
        Text, ForeignKey("claims.id"), nullable=True
    )
    id: Mapped[str] = mapped_column(Text, primary_key=True)
