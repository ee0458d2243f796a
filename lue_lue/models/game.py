from datetime import datetime

from sqlalchemy import TIMESTAMP, Integer, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Game(Base):
    __tablename__ = "games"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    which_player_turn: Mapped[str] = mapped_column(Text, unique=True)
    state: Mapped[int] = mapped_column(Integer, server_default=text("0"))
    started_at: Mapped[datetime] = mapped_column(
        TIMESTAMP, server_default=func.current_timestamp()
    )
    round_number: Mapped[int] = mapped_column(Integer, server_default=text("0"))
    card_to_play: Mapped[int] = mapped_column(Integer)
