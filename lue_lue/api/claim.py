from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lue_lue.database import get_db
from lue_lue.repositories import ClaimsRepository
from lue_lue.types import Claim

router = APIRouter(prefix="/api/claim", tags=["claim"])


@router.post("/new", response_model=Claim)
async def new_claim(req: Claim, db: AsyncSession = Depends(get_db)):
    return await ClaimsRepository(db).create_claim(req)


@router.get("/list", response_model=list[Claim])
async def list_claims(player_id: Optional[str] = None, db: AsyncSession = Depends(get_db)):
    return await ClaimsRepository(db).get_all_claims(player_id=player_id)


@router.get("/{claim_id}", response_model=Claim)
async def get_claim(claim_id: str, db: AsyncSession = Depends(get_db)):
    return await ClaimsRepository(db).get_claim_by_id(claim_id)


@router.delete("/{claim_id}")
async def delete_claim(claim_id: str, db: AsyncSession = Depends(get_db)):
    await ClaimsRepository(db).delete_claim(claim_id)
    return {"status": "deleted"}
