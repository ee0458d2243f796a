from typing import Optional

from sqlalchemy import select

from lue_lue import models
from lue_lue.errors import DatabaseQueryError, ProcessError
from lue_lue.types import Card, UpdateCardDTO

from .base import BaseRepository


class CardRepository(BaseRepository):
    """Queries against the ``cards`` table."""

    async def get_all_cards(
        self,
        claim_id: Optional[str] = None,
        player_id: Optional[str] = None,
    ) -> list[Card]:
        """Return every card, or only those of one claim or one player.

        Filtering by claim and player at the same time is rejected.
        """
        if claim_id is not None and player_id is not None:
            raise DatabaseQueryError(
                "Either claim_id or player_id must be provided, but not both.",
                status_code=400,
            )

        query = select(models.Card)
        if claim_id is not None:
            query = query.where(models.Card.claim_id == claim_id)
        elif player_id is not None:
            query = query.where(models.Card.player_id == player_id)

        rows = (await self.db.execute(query.order_by(models.Card.id))).scalars().all()
        return [Card.model_validate(row) for row in rows]

    async def get_card_by_id(self, id: str) -> Card:
        row = await self.db.get(models.Card, id)
        if row is None:
            raise DatabaseQueryError("Card not found", status_code=404)
        return Card.model_validate(row)

    async def create_card(self, card: Card, player_id: Optional[str] = None) -> Card:
        """Insert *card*, dealing it to *player_id* when given."""
        await self._ensure_absent(models.Card, card.id, card)
        row = models.Card(
            id=card.id,
            card_type=int(card.card_type),
            player_id=player_id if player_id is not None else card.player_id,
            claim_id=card.claim_id,
        )
        self.db.add(row)
        await self._flush(card)
        await self.db.refresh(row)
        return Card.model_validate(row)

    async def update_card(self, card_data: UpdateCardDTO) -> Card:
        if not card_data.has_changes():
            raise ProcessError(
                "No new data was provided! The modifying attempt was aborted!",
                "CardRepository.update_card",
                card_data,
            )

        row = await self.db.get(models.Card, card_data.id)
        if row is None:
            raise DatabaseQueryError(
                "Card not found and couldn't be updated!",
                card_data.as_card(),
                status_code=404,
            )

        if card_data.card_type is not None:
            row.card_type = int(card_data.card_type)
        if card_data.player_id is not None:
            row.player_id = card_data.player_id
        if card_data.claim_id is not None:
            row.claim_id = card_data.claim_id

        await self._flush(card_data)
        return Card.model_validate(row)

    async def delete_card(self, id: str) -> None:
        row = await self.db.get(models.Card, id)
        if row is None:
            raise DatabaseQueryError("Card not found", status_code=404)
        await self.db.delete(row)
        await self._flush()
