from sqlalchemy import ForeignKey, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Claim(Base):
    __tablename__ = "claims"

    created_by: Mapped[str] = mapped_column(Text, ForeignKey("players.id"))
    number_of_cards: Mapped[int] = mapped_column(Integer, server_default=text("0"))
    id: Mapped[str] = mapped_column(Text, primary_key=True)
