"""Persistence package."""

from whogame.persistence.snapshot import (
    STORAGE_KEY,
    GameSnapshot,
    KeyValueStore,
    MemoryStore,
    YamlFileStore,
    load_snapshot,
    save_snapshot,
)

__all__ = [
    "STORAGE_KEY",
    "GameSnapshot",
    "KeyValueStore",
    "MemoryStore",
    "YamlFileStore",
    "load_snapshot",
    "save_snapshot",
]
