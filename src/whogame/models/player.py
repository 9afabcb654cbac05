"""Player and Role models."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel


class Role(str, Enum):
    """Hidden roles a player can hold for one round."""

    IMPOSTOR = "IMPOSTOR"
    INNOCENT = "INNOCENT"
    JESTER = "JESTER"
    DETECTIVE = "DETECTIVE"
    HEALER = "HEALER"


class Player(BaseModel):
    """Represents a player on the shared device.

    Uses id (str) as primary identifier; it is stable across a session.
    Name and color are stored for display purposes.
    """

    id: str
    name: str
    color: str  # opaque display token, e.g. "#8B5CF6"
    is_impostor: Optional[bool] = None  # round-scoped, None outside a round

    def to_dict(self) -> dict:
        """Convert to dictionary, hiding round-scoped info."""
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
        }


class PlayerSummary(BaseModel):
    """Name and color of a player, resolved for the results screen."""

    id: str
    name: str
    color: str

    @classmethod
    def from_player(cls, player: Player) -> "PlayerSummary":
        return cls(id=player.id, name=player.name, color=player.color)
