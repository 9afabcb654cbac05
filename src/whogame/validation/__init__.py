"""Validation package.

- exceptions.py: errors raised when a game action is rejected
- types.py: ValidationViolation and ValidationSeverity for audits
- round_invariants.py: R.1-R.9 round consistency checks
"""

from .exceptions import (
    ValidationError,
    NoCategorySelectedError,
    EmptyWordPoolError,
    NoModeSelectedError,
    NotEnoughPlayersError,
    InvalidImpostorCountError,
    TooManyImpostorsError,
    CardNotViewedError,
    InvalidTransitionError,
    UnknownPlayerError,
    RosterError,
    ConfigurationError,
)
from .types import ValidationSeverity, ValidationViolation
from .round_invariants import validate_round_state, expected_impostor_flag

__all__ = [
    "ValidationError",
    "NoCategorySelectedError",
    "EmptyWordPoolError",
    "NoModeSelectedError",
    "NotEnoughPlayersError",
    "InvalidImpostorCountError",
    "TooManyImpostorsError",
    "CardNotViewedError",
    "InvalidTransitionError",
    "UnknownPlayerError",
    "RosterError",
    "ConfigurationError",
    "ValidationSeverity",
    "ValidationViolation",
    "validate_round_state",
    "expected_impostor_flag",
]
