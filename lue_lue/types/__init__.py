from .card import Card, UpdateCardDTO
from .chat import MAX_CHAT_MESSAGES, Chat, ChatMessage
from .claim import MAX_CARDS_PER_CLAIM, Claim
from .game import Game, UpdateGameDTO
from .player import Player, UpdatePlayerDTO
from .status import StatusUpdate, StatusUpdateRequest

__all__ = [
    "Card",
    "UpdateCardDTO",
    "Chat",
    "ChatMessage",
    "MAX_CHAT_MESSAGES",
    "Claim",
    "MAX_CARDS_PER_CLAIM",
    "Game",
    "UpdateGameDTO",
    "Player",
    "UpdatePlayerDTO",
    "StatusUpdate",
    "StatusUpdateRequest",
]
