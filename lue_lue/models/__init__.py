from .base import Base
from .game import Game
from .player import Player
from .card import Card
from .chat import Chat, ChatMessage
from .claim import Claim

__all__ = [
    "Base",
    "Game",
    "Player",
    "Card",
    "Chat",
    "ChatMessage",
    "Claim",
]
