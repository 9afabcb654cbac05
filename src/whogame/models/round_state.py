"""Round state for one pass of the device."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from whogame.models.modes import GameMode


class RoundPhase(str, Enum):
    """Phases of a round."""

    LOBBY = "LOBBY"
    VIEWING_CARDS = "VIEWING_CARDS"
    DISCUSSION = "DISCUSSION"
    RESULTS = "RESULTS"


class RoundState(BaseModel):
    """The single aggregate describing a round in progress.

    Transitions never edit a RoundState in place; they return an updated
    copy. The Lobby default is what a freshly reset game looks like.
    """

    phase: RoundPhase = RoundPhase.LOBBY
    current_player_index: int = 0
    card_viewed: bool = False  # reported by the viewing UI

    selected_word: str = ""
    selected_word2: Optional[str] = None
    selected_hint: str = ""
    selected_hint2: Optional[str] = None

    impostor_ids: list[str] = Field(default_factory=list)  # shuffle order
    jester_id: Optional[str] = None
    detective_id: Optional[str] = None
    healer_id: Optional[str] = None

    active_mode: GameMode = GameMode.NORMAL
    normal_mode: Optional[GameMode] = None
    special_mode: Optional[GameMode] = None

    votes: dict[str, str] = Field(default_factory=dict)  # voter id -> voted id

    def is_impostor_id(self, player_id: str) -> bool:
        return player_id in self.impostor_ids

    def extra_role_ids(self) -> list[str]:
        """Ids holding jester, detective or healer, in that order."""
        return [
            pid
            for pid in (self.jester_id, self.detective_id, self.healer_id)
            if pid is not None
        ]
