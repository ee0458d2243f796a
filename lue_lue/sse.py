"""Server-sent status updates for a player's view of a game.

Each event is a ``StatusUpdate`` serialised as JSON on a single ``data:``
line.  A fresh session is opened per event so the stream never holds a
transaction open between updates.
"""
import asyncio
import logging
from typing import AsyncIterator, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from lue_lue.errors import DatabaseQueryError
from lue_lue.repositories import GameRepository, PlayerRepository
from lue_lue.types import StatusUpdate, StatusUpdateRequest

log = logging.getLogger(__name__)


async def build_status_update(db: AsyncSession, request: StatusUpdateRequest) -> StatusUpdate:
    """Collect the current game and player data for *request*."""
    update = StatusUpdate()
    try:
        update.game_data = await GameRepository(db).get_game_by_id(request.game_id)
    except DatabaseQueryError as err:
        if err.status_code != 404:
            raise
    try:
        update.player_data = await PlayerRepository(db).get_player_by_id(request.player_id)
    except DatabaseQueryError as err:
        if err.status_code != 404:
            raise
        update.player_excluded_from_game = True
    return update


def format_event(update: StatusUpdate) -> str:
    return f"data: {update.model_dump_json()}\n\n"


async def status_event_stream(
    session_factory: Callable[[], AsyncSession],
    request: StatusUpdateRequest,
    interval: float,
    max_events: Optional[int] = None,
) -> AsyncIterator[str]:
    """Yield one formatted event every *interval* seconds.

    Stops after *max_events* events when given, or once the player has been
    excluded from the game.
    """
    sent = 0
    while max_events is None or sent < max_events:
        async with session_factory() as db:
            update = await build_status_update(db, request)
        yield format_event(update)
        sent += 1
        if update.player_excluded_from_game:
            log.info("Player %s is no longer in game %s, closing stream", request.player_id, request.game_id)
            return
        if max_events is not None and sent >= max_events:
            return
        await asyncio.sleep(interval)
