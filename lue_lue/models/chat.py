from datetime import datetime

from sqlalchemy import TIMESTAMP, ForeignKey, Integer, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Chat(Base):
    __tablename__ = "chats"

    number_of_messages: Mapped[int] = mapped_column(Integer, server_default=text("0"))
    id: Mapped[str] = mapped_column(Text, primary_key=True)
    game_id: Mapped[str] = mapped_column(Text, ForeignKey("games.id"))


class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    player_id: Mapped[str] = mapped_column(Text, ForeignKey("players.id"))
    content: Mapped[str] = mapped_column(Text)
    sent_at: Mapped[datetime] = mapped_column(
        TIMESTAMP, server_default=func.current_timestamp()
    )
    chat_id: Mapped[str] = mapped_column(Text, ForeignKey("chats.id"))
