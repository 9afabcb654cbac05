"""Game modes and their eligibility rules."""

from enum import Enum
from pydantic import BaseModel


class GameMode(str, Enum):
    """Rule-sets that can govern a round.

    Values match the identifiers stored in saved settings.
    """

    NORMAL = "normal"
    DETECTIVE = "detective"
    EVERYONE_IMPOSTOR = "everyoneImpostor"
    INNOCENTS_SEE_HINT = "innocentsSeeHint"
    ROLES_SWITCHED = "rolesSwitched"
    TWO_WORDS = "twoWords"
    JESTER = "jester"
    BREAKING_POINT = "breakingPoint"
    HEALER = "healer"


class ModeClass(str, Enum):
    """Disjoint mode classes. At most one mode of each class is active per round."""

    NORMAL = "NORMAL"
    SPECIAL = "SPECIAL"  # overlay rule-sets, take priority for labeling


class ModeRule(BaseModel):
    """Static rule entry for one game mode."""

    mode: GameMode
    mode_class: ModeClass = ModeClass.NORMAL
    min_players: int = 2
    label: str
    description: str = ""


# Declaration order is the pick order when mode randomization is off.
MODE_RULES: dict[GameMode, ModeRule] = {
    rule.mode: rule
    for rule in [
        ModeRule(
            mode=GameMode.NORMAL,
            label="Normal",
            description="Impostors get the hint, everyone else gets the word",
        ),
        ModeRule(
            mode=GameMode.DETECTIVE,
            min_players=4,
            label="Detective",
            description="One innocent is the detective, their vote counts double",
        ),
        ModeRule(
            mode=GameMode.EVERYONE_IMPOSTOR,
            label="Everyone Impostor",
            description="Nobody gets the word",
        ),
        ModeRule(
            mode=GameMode.INNOCENTS_SEE_HINT,
            label="Innocents See Hint",
            description="Innocents see the hint next to the word",
        ),
        ModeRule(
            mode=GameMode.ROLES_SWITCHED,
            label="Roles Switched",
            description="Word and hint trade places, and so do the roles",
        ),
        ModeRule(
            mode=GameMode.TWO_WORDS,
            label="Two Words",
            description="Innocents get two words",
        ),
        ModeRule(
            mode=GameMode.JESTER,
            min_players=4,
            label="Jester",
            description="One innocent is the jester and wins by being voted out",
        ),
        ModeRule(
            mode=GameMode.BREAKING_POINT,
            mode_class=ModeClass.SPECIAL,
            min_players=5,
            label="Breaking Point",
            description="A healer can revive one player",
        ),
        ModeRule(
            mode=GameMode.HEALER,
            label="Healer",
            description="Plays as Normal; the healer seat comes with Breaking Point",
        ),
    ]
}


def get_mode_rule(mode: GameMode) -> ModeRule:
    """Look up the rule entry for a mode."""
    return MODE_RULES[mode]


def is_special(mode: GameMode) -> bool:
    """Check if a mode belongs to the special class."""
    return MODE_RULES[mode].mode_class == ModeClass.SPECIAL


def mode_label(mode: GameMode) -> str:
    """Human-readable label for a mode."""
    return MODE_RULES[mode].label
