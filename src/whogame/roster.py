"""Roster editing helpers.

Every helper returns a new list; the caller keeps the old roster if an
edit is rejected.
"""

import random
from typing import Optional

from whogame.models.player import Player
from whogame.validation.exceptions import RosterError, UnknownPlayerError

MIN_ROSTER_SIZE = 2

DEFAULT_ROSTER_COLORS = ["#8B5CF6", "#06B6D4", "#F59E0B"]


def create_default_roster() -> list[Player]:
    """Three players with preset colors, as on first launch."""
    return [
        Player(id=str(i + 1), name=f"Player {i + 1}", color=color)
        for i, color in enumerate(DEFAULT_ROSTER_COLORS)
    ]


def random_color(rng: random.Random) -> str:
    """Random hex display color."""
    return f"#{rng.randrange(0x1000000):06X}"


def _next_id(players: list[Player]) -> str:
    numeric = [int(p.id) for p in players if p.id.isdigit()]
    return str(max(numeric, default=0) + 1)


def add_player(
    players: list[Player],
    rng: random.Random,
    name: Optional[str] = None,
) -> list[Player]:
    """Append a new player with the next free numeric id."""
    new_id = _next_id(players)
    player = Player(
        id=new_id,
        name=name or f"Player {new_id}",
        color=random_color(rng),
    )
    return [*players, player]


def remove_player(players: list[Player], player_id: str) -> list[Player]:
    """Remove a player, keeping at least two on the roster.

    Raises:
        UnknownPlayerError: No player has this id.
        RosterError: Removal would leave fewer than two players.
    """
    if not any(p.id == player_id for p in players):
        raise UnknownPlayerError(f"Unknown player: {player_id}", context={"player_id": player_id})
    if len(players) <= MIN_ROSTER_SIZE:
        raise RosterError(
            f"You need at least {MIN_ROSTER_SIZE} players",
            context={"players": len(players)},
        )
    return [p for p in players if p.id != player_id]


def update_player(
    players: list[Player],
    player_id: str,
    name: Optional[str] = None,
    color: Optional[str] = None,
) -> list[Player]:
    """Rename or recolor a player.

    Raises:
        UnknownPlayerError: No player has this id.
        RosterError: The new name is blank.
    """
    if not any(p.id == player_id for p in players):
        raise UnknownPlayerError(f"Unknown player: {player_id}", context={"player_id": player_id})

    updates: dict = {}
    if name is not None:
        if not name.strip():
            raise RosterError("Player name cannot be empty", context={"player_id": player_id})
        updates["name"] = name.strip()
    if color is not None:
        updates["color"] = color

    return [p.model_copy(update=updates) if p.id == player_id else p for p in players]


def roster_from_names(names: list[str], rng: random.Random) -> list[Player]:
    """Build a roster from display names, ids numbered from 1."""
    players: list[Player] = []
    for name in names:
        players = add_player(players, rng, name=name)
    return players
