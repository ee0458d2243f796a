from .card_repository import CardRepository
from .chat_repository import ChatRepository
from .claim_repository import ClaimsRepository
from .game_repository import GameRepository
from .player_repository import PlayerRepository

__all__ = [
    "CardRepository",
    "ChatRepository",
    "ClaimsRepository",
    "GameRepository",
    "PlayerRepository",
]
