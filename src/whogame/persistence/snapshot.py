"""Saved game setup: roster, catalog, settings and category selection."""

import logging
import os
from typing import Optional, Protocol

import yaml
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from whogame.models import (
    Category,
    DEFAULT_CATEGORIES,
    Player,
    Settings,
    WordPool,
)
from whogame.roster import create_default_roster

logger = logging.getLogger(__name__)

STORAGE_KEY = "whoGameData"


class GameSnapshot(BaseModel):
    """Everything that survives between app launches.

    Round flags are not part of the snapshot.
    """

    players: list[Player] = Field(default_factory=create_default_roster)
    categories: list[Category] = Field(default_factory=lambda: list(DEFAULT_CATEGORIES))
    settings: Settings = Field(default_factory=Settings)
    selected_categories: list[str] = Field(
        default_factory=lambda: WordPool(DEFAULT_CATEGORIES).default_selection()
    )

    def to_blob(self) -> str:
        """Serialize to the stored text form."""
        players = [p.model_copy(update={"is_impostor": None}) for p in self.players]
        return self.model_copy(update={"players": players}).model_dump_json(exclude_none=True)

    @classmethod
    def from_blob(cls, blob: str) -> "GameSnapshot":
        """Parse the stored text form.

        Raises:
            pydantic.ValidationError: The blob is not a valid snapshot.
        """
        return cls.model_validate_json(blob)


class KeyValueStore(Protocol):
    """Synchronous string key-value storage."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """In-process store, for tests and throwaway sessions."""

    def __init__(self, data: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class YamlFileStore:
    """Store backed by a YAML mapping of key -> blob on disk."""

    def __init__(self, filepath: str):
        self.filepath = filepath

    def _read(self) -> dict:
        if not os.path.exists(self.filepath):
            return {}
        with open(self.filepath, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        try:
            value = self._read().get(key)
        except (yaml.YAMLError, UnicodeDecodeError, OSError) as e:
            logger.warning("Could not read %s: %s", self.filepath, e)
            return None
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read()
        except (yaml.YAMLError, UnicodeDecodeError, OSError) as e:
            logger.warning("Overwriting unreadable %s: %s", self.filepath, e)
            data = {}
        data[key] = value
        with open(self.filepath, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=True)


def load_snapshot(store: KeyValueStore) -> GameSnapshot:
    """Load the saved setup, falling back to defaults.

    A missing or malformed blob is logged and replaced by the built-in
    defaults; it is never raised to the caller.
    """
    blob = store.get(STORAGE_KEY)
    if blob is None:
        logger.debug("No saved data under %s, using defaults", STORAGE_KEY)
        return GameSnapshot()
    try:
        return GameSnapshot.from_blob(blob)
    except PydanticValidationError as e:
        logger.warning("Failed to load saved data, using defaults: %s", e)
        return GameSnapshot()


def save_snapshot(store: KeyValueStore, snapshot: GameSnapshot) -> None:
    """Write the setup under the fixed storage key."""
    store.set(STORAGE_KEY, snapshot.to_blob())
    logger.debug("Saved data under %s", STORAGE_KEY)
