"""Errors raised when a game action is rejected."""

from typing import Optional


class ValidationError(Exception):
    """Raised when an action fails a precondition.

    Always recoverable: the message is meant for the players, and the
    session stays in its last valid state.
    """

    code = "validation"

    def __init__(self, message: str, context: Optional[dict] = None):
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class NoCategorySelectedError(ValidationError):
    """No word category is selected."""

    code = "no_category"


class EmptyWordPoolError(ValidationError):
    """The selected categories hold no words."""

    code = "empty_word_pool"


class NoModeSelectedError(ValidationError):
    """The settings enable no game mode."""

    code = "no_mode"


class NotEnoughPlayersError(ValidationError):
    """The roster is too small for the game or for a mode."""

    code = "not_enough_players"


class InvalidImpostorCountError(ValidationError):
    """The impostor count is below one."""

    code = "invalid_impostor_count"


class TooManyImpostorsError(ValidationError):
    """The impostor count is not smaller than the roster."""

    code = "too_many_impostors"


class CardNotViewedError(ValidationError):
    """The current player has not looked at their card yet."""

    code = "card_not_viewed"


class InvalidTransitionError(ValidationError):
    """The action is not allowed in the current phase."""

    code = "invalid_transition"


class UnknownPlayerError(ValidationError):
    """A player id is not on the roster."""

    code = "unknown_player"


class RosterError(ValidationError):
    """A roster edit would leave the game unplayable."""

    code = "roster"


class ConfigurationError(Exception):
    """Raised when a component is called in a way its caller should have prevented.

    Indicates a bug in the calling code rather than a player mistake.
    Fatal to the operation, not to the process.
    """
