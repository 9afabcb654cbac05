"""Resolve which game modes govern a round."""

import random
from typing import Iterable, Optional
from pydantic import BaseModel

from whogame.models.modes import GameMode, MODE_RULES, is_special
from whogame.validation.exceptions import ConfigurationError


class ResolvedModes(BaseModel):
    """The normal mode and optional special mode picked for a round."""

    normal_mode: GameMode
    special_mode: Optional[GameMode] = None

    @property
    def active_mode(self) -> GameMode:
        """The mode used for labeling: the special mode when present."""
        return self.special_mode if self.special_mode is not None else self.normal_mode


def _pick(candidates: list[GameMode], randomize: bool, rng: random.Random) -> GameMode:
    if randomize:
        return rng.choice(candidates)
    return candidates[0]


def resolve_modes(
    enabled_modes: Iterable[GameMode],
    randomize: bool,
    rng: random.Random,
) -> ResolvedModes:
    """Pick at most one normal-class and one special-class mode.

    Candidates are ordered by the mode table. With randomize on, each pick
    is a uniform draw from its class; with it off, the first candidate wins.
    When only special modes are enabled, the normal mode falls back to
    GameMode.NORMAL.

    Args:
        enabled_modes: Modes enabled in settings. Must not be empty.
        randomize: Whether to draw modes at random.
        rng: random.Random instance for reproducible draws.

    Returns:
        ResolvedModes for the round.

    Raises:
        ConfigurationError: If no mode is enabled.
    """
    enabled = set(enabled_modes)
    if not enabled:
        raise ConfigurationError("resolve_modes called with no enabled modes")

    ordered = [mode for mode in MODE_RULES if mode in enabled]
    normal_candidates = [mode for mode in ordered if not is_special(mode)]
    special_candidates = [mode for mode in ordered if is_special(mode)]

    if special_candidates:
        special_mode = _pick(special_candidates, randomize, rng)
        if normal_candidates:
            normal_mode = _pick(normal_candidates, randomize, rng)
        else:
            normal_mode = GameMode.NORMAL
        return ResolvedModes(normal_mode=normal_mode, special_mode=special_mode)

    return ResolvedModes(normal_mode=_pick(normal_candidates, randomize, rng))
