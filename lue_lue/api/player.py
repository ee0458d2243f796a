from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from lue_lue.database import get_db
from lue_lue.repositories import PlayerRepository
from lue_lue.types import Player, UpdatePlayerDTO

router = APIRouter(prefix="/api/player", tags=["player"])


class NewPlayerRequest(BaseModel):
    name: str


@router.post("/new", response_model=Player)
async def new_player(req: NewPlayerRequest, db: AsyncSession = Depends(get_db)):
    return await PlayerRepository(db).add_player(Player.new(req.name))


@router.get("/list", response_model=list[Player])
async def list_players(db: AsyncSession = Depends(get_db)):
    return await PlayerRepository(db).get_all_players()


@router.put("/update", response_model=Player)
async def update_player(req: UpdatePlayerDTO, db: AsyncSession = Depends(get_db)):
    return await PlayerRepository(db).update_player(req)


@router.get("/{player_id}", response_model=Player)
async def get_player(player_id: str, db: AsyncSession = Depends(get_db)):
    return await PlayerRepository(db).get_player_by_id(player_id)


@router.delete("/{player_id}")
async def delete_player(player_id: str, db: AsyncSession = Depends(get_db)):
    await PlayerRepository(db).delete_player(player_id)
    return {"status": "deleted"}
