from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from lue_lue.database import get_db
from lue_lue.enums import GameState
from lue_lue.repositories import GameRepository
from lue_lue.services import game_service
from lue_lue.types import Game, UpdateGameDTO

router = APIRouter(prefix="/api/game", tags=["game"])


class NewGameRequest(BaseModel):
    which_player_turn: str
    state: GameState = GameState.STARTING


class AdvanceTurnRequest(BaseModel):
    next_player_id: str


@router.post("/new", response_model=Game)
async def new_game(req: NewGameRequest, db: AsyncSession = Depends(get_db)):
    game = Game.new(req.which_player_turn)
    game.state = req.state
    return await GameRepository(db).add_game(game)


@router.get("/list", response_model=list[Game])
async def list_games(db: AsyncSession = Depends(get_db)):
    return await GameRepository(db).get_all_games()


@router.put("/update", response_model=Game)
async def update_game(req: UpdateGameDTO, db: AsyncSession = Depends(get_db)):
    """Apply a partial update to the game with ``req.id``."""
    return await GameRepository(db).update_game(req)


@router.get("/{game_id}", response_model=Game)
async def get_game(game_id: str, db: AsyncSession = Depends(get_db)):
    return await GameRepository(db).get_game_by_id(game_id)


@router.post("/{game_id}/turn", response_model=Game)
async def advance_turn(
    game_id: str,
    req: AdvanceTurnRequest,
    db: AsyncSession = Depends(get_db),
):
    return await game_service.advance_turn(GameRepository(db), game_id, req.next_player_id)


@router.delete("/{game_id}")
async def delete_game(game_id: str, db: AsyncSession = Depends(get_db)):
    await GameRepository(db).delete_game(game_id)
    return {"status": "deleted"}
