"""Game settings records and their defaults."""

from pydantic import BaseModel, Field

from whogame.models.modes import GameMode


DEFAULT_TIMER_LENGTH = 300  # seconds


class TimerSettings(BaseModel):
    """Discussion countdown configuration."""

    enabled: bool = False
    length_seconds: int = Field(default=DEFAULT_TIMER_LENGTH, ge=1)


class Settings(BaseModel):
    """Round configuration supplied by the settings panel.

    An empty mode set or a zero impostor count is representable here;
    both are rejected when a round starts.
    """

    enabled_modes: set[GameMode] = Field(default_factory=lambda: {GameMode.NORMAL})
    randomize: bool = False
    number_of_impostors: int = 1
    hint_enabled: bool = True
    timer: TimerSettings = Field(default_factory=TimerSettings)


DEFAULT_SETTINGS = Settings()
