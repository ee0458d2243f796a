from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from lue_lue.database import get_db
from lue_lue.repositories import ChatRepository
from lue_lue.types import Chat, ChatMessage

router = APIRouter(prefix="/api/game/{game_id}/chat", tags=["chat"])


class PostMessageRequest(BaseModel):
    player_id: str
    content: str


@router.get("", response_model=Chat)
async def get_chat(game_id: str, db: AsyncSession = Depends(get_db)):
    return await ChatRepository(db).get_chat_by_game_id(game_id)


@router.post("/messages", response_model=ChatMessage)
async def post_message(
    game_id: str,
    req: PostMessageRequest,
    db: AsyncSession = Depends(get_db),
):
    return await ChatRepository(db).add_message(game_id, req.player_id, req.content)


@router.delete("/messages", response_model=Chat)
async def reset_chat(game_id: str, db: AsyncSession = Depends(get_db)):
    """Remove every message from the game's chat."""
    return await ChatRepository(db).reset_chat(game_id)
