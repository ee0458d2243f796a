import logging
import uuid
from typing import Optional

from sqlalchemy import delete, select, update

from lue_lue import models
from lue_lue.errors import DatabaseQueryError
from lue_lue.types import Chat, ChatMessage

from .base import BaseRepository

log = logging.getLogger(__name__)


class ChatRepository(BaseRepository):
    """Queries against ``chats`` and ``chat_messages``.

    Every game owns exactly one chat.  ``chats.number_of_messages`` is kept
    in step with the message rows; once the chat is full the oldest message
    row is deleted for each new one.
    """

    async def create_chat(self, game_id: str) -> Chat:
        row = models.Chat(id=str(uuid.uuid4()), game_id=game_id)
        self.db.add(row)
        await self._flush({"game_id": game_id})
        await self.db.refresh(row)
        return Chat.model_validate(row)

    async def find_chat_by_game_id(self, game_id: str) -> Optional[Chat]:
        row = await self._chat_row(game_id)
        if row is None:
            return None
        chat = Chat.model_validate(row)
        chat.messages = await self._messages(row.id)
        return chat

    async def get_chat_by_game_id(self, game_id: str) -> Chat:
        chat = await self.find_chat_by_game_id(game_id)
        if chat is None:
            raise DatabaseQueryError(
                f"No chat exists for the game {game_id}", status_code=404
            )
        return chat

    async def add_message(self, game_id: str, player_id: str, content: str) -> ChatMessage:
        """Post *content* from *player_id* to the game's chat.

        The counter is bumped before the messages are counted: that UPDATE
        takes SQLite's write lock, so concurrent posts to the same chat
        queue up behind it instead of each counting a stale total.

        Raises ``InvalidMessageError`` for blank content.
        """
        row = await self._chat_row(game_id)
        if row is None:
            raise DatabaseQueryError(
                f"No chat exists for the game {game_id}", status_code=404
            )
        if await self.db.get(models.Player, player_id) is None:
            raise DatabaseQueryError(
                f"The player with the id {player_id} couldn't be found!",
                status_code=404,
            )
        message = ChatMessage(player_id=player_id, content=content)
        Chat.check_message(message)

        await self.db.execute(
            update(models.Chat)
            .where(models.Chat.id == row.id)
            .values(number_of_messages=models.Chat.number_of_messages + 1)
            .execution_options(synchronize_session=False)
        )
        await self.db.refresh(row)

        chat = Chat.model_validate(row)
        chat.messages = await self._messages(row.id)
        chat.number_of_messages = len(chat.messages)
        evicted = chat.add_chat_message(message)
        if evicted is not None:
            log.info("Chat %s is full, dropping message %s", chat.id, evicted.id)
            await self.db.execute(
                delete(models.ChatMessage).where(models.ChatMessage.id == evicted.id)
            )

        self.db.add(
            models.ChatMessage(
                id=message.id,
                player_id=message.player_id,
                content=message.content,
                sent_at=message.sent_at,
                chat_id=chat.id,
            )
        )
        row.number_of_messages = chat.number_of_messages
        await self._flush(message)
        return message

    async def reset_chat(self, game_id: str) -> Chat:
        row = await self._chat_row(game_id)
        if row is None:
            raise DatabaseQueryError(
                f"No chat exists for the game {game_id}", status_code=404
            )
        await self.db.execute(
            delete(models.ChatMessage).where(models.ChatMessage.chat_id == row.id)
        )
        row.number_of_messages = 0
        await self._flush()
        return Chat.model_validate(row)

    async def delete_chat_for_game(self, game_id: str) -> None:
        row = await self._chat_row(game_id)
        if row is None:
            return
        await self.db.execute(
            delete(models.ChatMessage).where(models.ChatMessage.chat_id == row.id)
        )
        await self.db.delete(row)
        await self._flush()

    async def _chat_row(self, game_id: str) -> Optional[models.Chat]:
        return (
            await self.db.execute(
                select(models.Chat).where(models.Chat.game_id == game_id)
            )
        ).scalars().first()

    async def _messages(self, chat_id: str) -> list[ChatMessage]:
        rows = (
            await self.db.execute(
                select(models.ChatMessage)
                .where(models.ChatMessage.chat_id == chat_id)
                .order_by(models.ChatMessage.sent_at, models.ChatMessage.id)
            )
        ).scalars().all()
        return [ChatMessage.model_validate(m) for m in rows]
