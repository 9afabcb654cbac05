"""Assign hidden roles to the roster for one round."""

import random
from typing import Optional
from pydantic import BaseModel

from whogame.models.modes import GameMode, get_mode_rule
from whogame.models.player import Player
from whogame.validation.exceptions import (
    InvalidImpostorCountError,
    NotEnoughPlayersError,
    TooManyImpostorsError,
)

MIN_PLAYERS = 2


class RoleAssignment(BaseModel):
    """Result of role assignment.

    `players` keeps the roster order it was given; only is_impostor is set.
    `impostor_ids` keeps the shuffle order.
    """

    impostor_ids: list[str]
    jester_id: Optional[str] = None
    detective_id: Optional[str] = None
    healer_id: Optional[str] = None
    players: list[Player]


def check_role_preconditions(
    player_count: int,
    normal_mode: GameMode,
    special_mode: Optional[GameMode],
    number_of_impostors: int,
) -> None:
    """Reject rosters that cannot play the resolved modes.

    Raises:
        NotEnoughPlayersError: Roster below 2 or below a mode's minimum.
        InvalidImpostorCountError: Fewer than one impostor requested.
        TooManyImpostorsError: Impostor count not below the roster size.
    """
    if player_count < MIN_PLAYERS:
        raise NotEnoughPlayersError(
            f"You need at least {MIN_PLAYERS} players",
            context={"players": player_count, "minimum": MIN_PLAYERS},
        )

    for mode in (normal_mode, special_mode):
        if mode is None:
            continue
        rule = get_mode_rule(mode)
        if player_count < rule.min_players:
            raise NotEnoughPlayersError(
                f"{rule.label} mode needs a minimum {rule.min_players} players",
                context={"mode": mode.value, "players": player_count, "minimum": rule.min_players},
            )

    if number_of_impostors < 1:
        raise InvalidImpostorCountError(
            "There must be at least 1 impostor",
            context={"impostors": number_of_impostors},
        )
    if number_of_impostors >= player_count:
        raise TooManyImpostorsError(
            "The number of impostors must be smaller than the number of players",
            context={"impostors": number_of_impostors, "players": player_count},
        )


def assign_roles(
    players: list[Player],
    normal_mode: GameMode,
    special_mode: Optional[GameMode],
    number_of_impostors: int,
    rng: random.Random,
) -> RoleAssignment:
    """Partition the roster into impostors, extra roles and innocents.

    A single shuffle of the roster drives every pick, so roles drawn from
    it never overlap.

    Args:
        players: Roster in display order.
        normal_mode: Resolved normal-class mode.
        special_mode: Resolved special-class mode, if any.
        number_of_impostors: Impostors to draw (ignored by Everyone Impostor).
        rng: random.Random instance for reproducible shuffling.

    Returns:
        RoleAssignment with new Player copies carrying is_impostor.
    """
    check_role_preconditions(len(players), normal_mode, special_mode, number_of_impostors)

    shuffled = [p.id for p in players]
    rng.shuffle(shuffled)

    if normal_mode == GameMode.EVERYONE_IMPOSTOR:
        impostor_ids = list(shuffled)
    else:
        impostor_ids = shuffled[:number_of_impostors]

    non_impostors = [pid for pid in shuffled if pid not in impostor_ids]

    jester_id: Optional[str] = None
    detective_id: Optional[str] = None
    healer_id: Optional[str] = None

    if normal_mode == GameMode.JESTER and non_impostors:
        jester_id = non_impostors[0]
    if normal_mode == GameMode.DETECTIVE and non_impostors:
        detective_id = non_impostors[0]
    if special_mode == GameMode.BREAKING_POINT:
        # Only jester and detective are excluded here.
        candidates = [pid for pid in non_impostors if pid not in (jester_id, detective_id)]
        if candidates:
            healer_id = candidates[0]

    extra_ids = {pid for pid in (jester_id, detective_id, healer_id) if pid is not None}
    roles_switched = normal_mode == GameMode.ROLES_SWITCHED

    updated: list[Player] = []
    for player in players:
        if roles_switched:
            flag = player.id not in impostor_ids and player.id not in extra_ids
        else:
            flag = player.id in impostor_ids
        updated.append(player.model_copy(update={"is_impostor": flag}))

    return RoleAssignment(
        impostor_ids=impostor_ids,
        jester_id=jester_id,
        detective_id=detective_id,
        healer_id=healer_id,
        players=updated,
    )
