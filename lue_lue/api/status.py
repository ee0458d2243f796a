from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from lue_lue.config import settings
from lue_lue.database import get_session_factory
from lue_lue.sse import status_event_stream
from lue_lue.types import StatusUpdateRequest

router = APIRouter(prefix="/api/status", tags=["status"])


@router.get("/stream")
async def stream_status(
    player_id: str,
    game_id: str,
    max_events: Optional[int] = None,
    session_factory=Depends(get_session_factory),
):
    """Server-sent events with the player's current view of the game."""
    request = StatusUpdateRequest(player_id=player_id, game_id=game_id)
    return StreamingResponse(
        status_event_stream(
            session_factory, request, settings.SSE_INTERVAL_SECONDS, max_events
        ),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache"},
    )
