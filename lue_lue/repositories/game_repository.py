import logging

from pydantic import ValidationError
from sqlalchemy import select

from lue_lue import models
from lue_lue.errors import DatabaseQueryError, ProcessError
from lue_lue.types import Game, UpdateGameDTO

from .base import BaseRepository
from .chat_repository import ChatRepository

log = logging.getLogger(__name__)


class GameRepository(BaseRepository):
    """Queries against the ``games`` table.  Games are returned with their chat."""

    def __init__(self, db) -> None:
        super().__init__(db)
        self.chat_repository = ChatRepository(db)

    async def add_game(self, game: Game) -> Game:
        """Insert *game* and open its chat."""
        await self._ensure_absent(models.Game, game.id, game)
        row = models.Game(
            id=game.id,
            which_player_turn=game.which_player_turn,
            state=int(game.state),
            round_number=game.round_number,
            card_to_play=int(game.card_to_play),
        )
        if game.started_at is not None:
            row.started_at = game.started_at
        self.db.add(row)
        await self._flush(game)
        await self.db.refresh(row)

        created = Game.model_validate(row)
        created.chat = await self.chat_repository.create_chat(game.id)
        log.info("Game %s created, %s starts", game.id, game.which_player_turn)
        return created

    async def get_game_by_id(self, game_id: str) -> Game:
        row = await self.db.get(models.Game, game_id)
        if row is None:
            raise DatabaseQueryError("Game not found", status_code=404)
        return await self._with_chat(row)

    async def get_all_games(self) -> list[Game]:
        rows = (
            await self.db.execute(select(models.Game).order_by(models.Game.started_at))
        ).scalars().all()
        if not rows:
            raise DatabaseQueryError("No games found", status_code=404)
        return [await self._with_chat(row) for row in rows]

    async def update_game(self, game_data: UpdateGameDTO) -> Game:
        if not game_data.has_changes():
            raise ProcessError(
                "No new data was provided! The modifying attempt was aborted!",
                "GameRepository.update_game",
                game_data,
            )

        row = await self.db.get(models.Game, game_data.id)
        if row is None:
            raise DatabaseQueryError(
                "Failed to update game in the database", game_data, status_code=404
            )

        if game_data.state is not None:
            row.state = int(game_data.state)
        if game_data.round_number is not None:
            row.round_number = game_data.round_number
        if game_data.card_to_play is not None:
            row.card_to_play = int(game_data.card_to_play)
        if game_data.which_player_turn is not None:
            row.which_player_turn = game_data.which_player_turn

        await self._flush(game_data)
        return await self._with_chat(row)

    async def delete_game(self, game_id: str) -> None:
        """Delete a game together with its chat and chat messages."""
        row = await self.db.get(models.Game, game_id)
        if row is None:
            raise DatabaseQueryError("Game not found", status_code=404)
        await self.chat_repository.delete_chat_for_game(game_id)
        await self.db.delete(row)
        await self._flush()
        log.info("Game %s deleted", game_id)

    async def _with_chat(self, row: models.Game) -> Game:
        try:
            game = Game.model_validate(row)
        except ValidationError as err:
            log.error("Game %s holds values outside the known enums: %s", row.id, err)
            raise ProcessError(
                "The stored game could not be read",
                "GameRepository._with_chat",
                row.id,
            ) from err
        game.chat = await self.chat_repository.find_chat_by_game_id(row.id)
        return game
