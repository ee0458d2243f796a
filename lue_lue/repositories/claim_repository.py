from typing import Optional

from sqlalchemy import select, update

from lue_lue import models
from lue_lue.errors import DatabaseQueryError
from lue_lue.types import Claim, UpdateCardDTO

from .base import BaseRepository
from .card_repository import CardRepository


class ClaimsRepository(BaseRepository):
    """Queries against the ``claims`` table.

    A claim's cards live in ``cards`` and point back through ``claim_id``;
    they are loaded alongside every claim returned from here.
    """

    def __init__(self, db, card_repository: Optional[CardRepository] = None) -> None:
        super().__init__(db)
        self.card_repository = card_repository or CardRepository(db)

    async def get_claim_by_id(self, id: str) -> Claim:
        row = await self.db.get(models.Claim, id)
        if row is None:
            raise DatabaseQueryError(
                f"The claim with the id {id} couldn't be found!", status_code=404
            )
        return await self._with_cards(row)

    async def get_all_claims(self, player_id: Optional[str] = None) -> list[Claim]:
        """Return all claims, or only the ones created by *player_id*."""
        query = select(models.Claim)
        if player_id is not None:
            query = query.where(models.Claim.created_by == player_id)

        rows = (await self.db.execute(query.order_by(models.Claim.id))).scalars().all()
        return [await self._with_cards(row) for row in rows]

    async def create_claim(self, claim: Claim) -> Claim:
        """Insert *claim* and move each of its cards into it."""
        await self._ensure_absent(models.Claim, claim.id, claim)
        row = models.Claim(
            id=claim.id,
            created_by=claim.created_by,
            number_of_cards=len(claim.cards) or claim.number_of_cards,
        )
        self.db.add(row)
        await self._flush(claim)

        # cards need to be stored separately
        for card in claim.cards:
            await self.card_repository.update_card(
                UpdateCardDTO(id=card.id, claim_id=claim.id)
            )

        await self.db.refresh(row)
        return await self._with_cards(row)

    async def delete_claim(self, claim_id: str) -> None:
        """Delete a claim, handing its cards back as unclaimed."""
        row = await self.db.get(models.Claim, claim_id)
        if row is None:
            raise DatabaseQueryError(
                f"The claim with the id {claim_id} couldn't be found!", status_code=404
            )
        await self.db.execute(
            update(models.Card)
            .where(models.Card.claim_id == claim_id)
            .values(claim_id=None)
        )
        await self.db.delete(row)
        await self._flush()

    async def _with_cards(self, row: models.Claim) -> Claim:
        claim = Claim.model_validate(row)
        claim.cards = await self.card_repository.get_all_cards(claim_id=row.id)
        return claim
