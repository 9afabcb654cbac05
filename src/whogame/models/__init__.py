"""Models package."""

from whogame.models.player import Role, Player, PlayerSummary
from whogame.models.modes import (
    GameMode,
    ModeClass,
    ModeRule,
    MODE_RULES,
    get_mode_rule,
    is_special,
    mode_label,
)
from whogame.models.words import WordEntry, Category, WordPool, DEFAULT_CATEGORIES
from whogame.models.settings import (
    TimerSettings,
    Settings,
    DEFAULT_SETTINGS,
    DEFAULT_TIMER_LENGTH,
)
from whogame.models.round_state import RoundPhase, RoundState

__all__ = [
    "RoundPhase",
    "RoundState",
    "Role",
    "Player",
    "PlayerSummary",
    "GameMode",
    "ModeClass",
    "ModeRule",
    "MODE_RULES",
    "get_mode_rule",
    "is_special",
    "mode_label",
    "WordEntry",
    "Category",
    "WordPool",
    "DEFAULT_CATEGORIES",
    "TimerSettings",
    "Settings",
    "DEFAULT_SETTINGS",
    "DEFAULT_TIMER_LENGTH",
]
