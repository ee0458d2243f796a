import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from lue_lue.errors import InvalidMessageError

# A chat keeps at most this many messages; the oldest one makes room.
MAX_CHAT_MESSAGES = 50


class ChatMessage(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    player_id: str
    content: str
    sent_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    chat_id: Optional[str] = None

    model_config = {"from_attributes": True}


class Chat(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    game_id: str
    number_of_messages: int = 0
    messages: list[ChatMessage] = []

    model_config = {"from_attributes": True}

    def reset(self) -> None:
        self.number_of_messages = 0
        self.messages = []

    @staticmethod
    def check_message(message: ChatMessage) -> None:
        if not message.content.strip():
            raise InvalidMessageError("The message is too short to be added to the chat!", message)

    def add_chat_message(self, message: ChatMessage) -> Optional[ChatMessage]:
        """Append *message*, returning the message evicted to make room, if any.

        Raises ``InvalidMessageError`` for blank messages.
        """
        self.check_message(message)

        message.chat_id = self.id
        if self.number_of_messages >= MAX_CHAT_MESSAGES:
            evicted = self.messages.pop(0) if self.messages else None
            self.messages.append(message)
            return evicted

        self.number_of_messages += 1
        self.messages.append(message)
        return None
