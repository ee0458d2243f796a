import logging

from sqlalchemy import select

from lue_lue import models
from lue_lue.errors import DatabaseQueryError, ProcessError
from lue_lue.types import Player, UpdatePlayerDTO

from .base import BaseRepository
from .card_repository import CardRepository

log = logging.getLogger(__name__)


class PlayerRepository(BaseRepository):
    """Queries against the ``players`` table."""

    async def add_player(self, player: Player) -> Player:
        await self._ensure_absent(models.Player, player.id, player)
        row = models.Player(id=player.id, name=player.name)
        if player.score is not None:
            row.score = player.score
        if player.joined_at is not None:
            row.joined_at = player.joined_at
        self.db.add(row)
        await self._flush(player)
        await self.db.refresh(row)
        log.info("Player %s (%s) joined", row.id, row.name)
        return Player.model_validate(row)

    async def get_player_by_id(self, player_id: str) -> Player:
        """Return the player together with the cards currently dealt to them."""
        row = await self.db.get(models.Player, player_id)
        if row is None:
            raise DatabaseQueryError(
                f"The player with the id {player_id} couldn't be found!",
                status_code=404,
            )
        player = Player.model_validate(row)
        player.assigned_cards = await CardRepository(self.db).get_all_cards(
            player_id=player_id
        )
        return player

    async def get_all_players(self) -> list[Player]:
        rows = (
            await self.db.execute(select(models.Player).order_by(models.Player.joined_at))
        ).scalars().all()
        return [Player.model_validate(row) for row in rows]

    async def update_player(self, player: UpdatePlayerDTO) -> Player:
        if not player.has_changes():
            raise ProcessError(
                "No new data was provided! The modifying attempt was aborted!",
                "PlayerRepository.update_player",
                player,
            )

        row = await self.db.get(models.Player, player.id)
        if row is None:
            raise DatabaseQueryError(
                "Failed to update player in the database", player, status_code=404
            )

        if player.name is not None:
            row.name = player.name
        if player.score is not None:
            row.score = player.score

        await self._flush(player)
        return Player.model_validate(row)

    async def delete_player(self, player_id: str) -> None:
        """Delete a player.  Fails with 409 while cards, claims or chat
        messages still reference them."""
        row = await self.db.get(models.Player, player_id)
        if row is None:
            raise DatabaseQueryError(
                f"The player with the id {player_id} couldn't be found!",
                status_code=404,
            )
        await self.db.delete(row)
        await self._flush()
        log.info("Player %s removed", player_id)
