from enum import IntEnum

from lue_lue.errors import ProcessError


class CardType(IntEnum):
    """Card faces.  The integer value is what ``cards.card_type`` and
    ``games.card_to_play`` store."""

    KING = 0
    QUEEN = 1
    JACK = 2
    ACE = 3
    # wild card
    JOKER = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def number_of_values(cls) -> int:
        return len(cls)

    @classmethod
    def from_index(cls, index: int) -> "CardType":
        try:
            return cls(index)
        except ValueError:
            raise ProcessError(
                f"{index} is not a valid card type index",
                "CardType.from_index",
                index,
            ) from None


class GameState(IntEnum):
    """Lifecycle of a game, stored in ``games.state``."""

    IN_PROGRESS = 0
    ENDED = 1
    WAITING_FOR_PLAYERS = 2
    STARTING = 3

    @property
    def label(self) -> str:
        return _GAME_STATE_LABELS[self]


_GAME_STATE_LABELS = {
    GameState.IN_PROGRESS: "In Progress",
    GameState.ENDED: "Ended",
    GameState.WAITING_FOR_PLAYERS: "Waiting for Players",
    GameState.STARTING: "Starting",
}
