from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lue_lue.database import get_db
from lue_lue.repositories import CardRepository
from lue_lue.types import Card, UpdateCardDTO

router = APIRouter(prefix="/api/card", tags=["card"])


@router.post("/new", response_model=Card)
async def new_card(req: Card, db: AsyncSession = Depends(get_db)):
    return await CardRepository(db).create_card(req)


@router.get("/list", response_model=list[Card])
async def list_cards(
    claim_id: Optional[str] = None,
    player_id: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    return await CardRepository(db).get_all_cards(claim_id=claim_id, player_id=player_id)


@router.put("/update", response_model=Card)
async def update_card(req: UpdateCardDTO, db: AsyncSession = Depends(get_db)):
    return await CardRepository(db).update_card(req)


@router.get("/{card_id}", response_model=Card)
async def get_card(card_id: str, db: AsyncSession = Depends(get_db)):
    return await CardRepository(db).get_card_by_id(card_id)


@router.delete("/{card_id}")
async def delete_card(card_id: str, db: AsyncSession = Depends(get_db)):
    await CardRepository(db).delete_card(card_id)
    return {"status": "deleted"}
