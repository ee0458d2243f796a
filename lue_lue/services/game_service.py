"""Game flow helpers that sit above the repositories."""
import logging
import random
from typing import TYPE_CHECKING, Optional

from lue_lue.enums import CardType, GameState
from lue_lue.errors import BadClientRequest

if TYPE_CHECKING:
    from lue_lue.repositories.game_repository import GameRepository
    from lue_lue.types import Game

log = logging.getLogger(__name__)


def select_new_card_to_be_played(rng: Optional[random.Random] = None) -> CardType:
    """Draw the card type players have to claim next, uniformly."""
    rng = rng or random
    return CardType(rng.randrange(CardType.number_of_values()))


async def advance_turn(
    game_repo: "GameRepository",
    game_id: str,
    next_player_id: str,
    rng: Optional[random.Random] = None,
) -> "Game":
    """Hand the turn to *next_player_id*, start a new round and draw a new card."""
    from lue_lue.types import UpdateGameDTO

    game = await game_repo.get_game_by_id(game_id)
    if game.state == GameState.ENDED:
        raise BadClientRequest("The game has already ended", game_id)
    if next_player_id == game.which_player_turn:
        raise BadClientRequest("It is already this player's turn", next_player_id)

    dto = UpdateGameDTO(
        id=game_id,
        state=GameState.IN_PROGRESS,
        round_number=game.round_number + 1,
        card_to_play=select_new_card_to_be_played(rng),
        which_player_turn=next_player_id,
    )
    updated = await game_repo.update_game(dto)
    log.info(
        "Game %s advanced to round %d, %s to play %s",
        game_id, updated.round_number, next_player_id, updated.card_to_play.label,
    )
    return updated
