"""Word catalog models and the built-in category set."""

from typing import Iterable, Optional
from pydantic import BaseModel, ConfigDict, Field


class WordEntry(BaseModel):
    """A secret word together with the hint handed to impostors."""

    model_config = ConfigDict(frozen=True)

    word: str
    hint: str


class Category(BaseModel):
    """A named group of word/hint pairs."""

    name: str
    emoji: str = ""
    words: list[WordEntry] = Field(default_factory=list)
    is_default: bool = False  # selected out of the box


class WordPool:
    """Read-only view over the category catalog.

    Supplies candidate content for a round. The pool never edits
    categories; selection toggling returns new name lists.
    """

    def __init__(self, categories: Iterable[Category]):
        self._categories: list[Category] = list(categories)

    @property
    def categories(self) -> list[Category]:
        return list(self._categories)

    @property
    def names(self) -> list[str]:
        return [c.name for c in self._categories]

    def get(self, name: str) -> Optional[Category]:
        """Get a category by name, or None if unknown."""
        for category in self._categories:
            if category.name == name:
                return category
        return None

    def default_selection(self) -> list[str]:
        """Names of the categories selected out of the box."""
        return [c.name for c in self._categories if c.is_default]

    def selected(self, selected_names: Iterable[str]) -> list[Category]:
        """Categories whose name is selected, in catalog order."""
        wanted = set(selected_names)
        return [c for c in self._categories if c.name in wanted]

    def words_for(self, selected_names: Iterable[str]) -> list[WordEntry]:
        """Flatten the words of the selected categories into one pool."""
        words: list[WordEntry] = []
        for category in self.selected(selected_names):
            words.extend(category.words)
        return words

    @staticmethod
    def toggle(selected_names: list[str], name: str) -> list[str]:
        """Return a new selection with `name` switched on or off."""
        if name in selected_names:
            return [n for n in selected_names if n != name]
        return [*selected_names, name]


def _entries(*pairs: tuple[str, str]) -> list[WordEntry]:
    return [WordEntry(word=word, hint=hint) for word, hint in pairs]


DEFAULT_CATEGORIES: list[Category] = [
    Category(
        name="Animals",
        emoji="🐾",
        is_default=True,
        words=_entries(
            ("Dog", "Loyal"),
            ("Cat", "Whiskers"),
            ("Elephant", "Trunk"),
            ("Penguin", "Ice"),
            ("Giraffe", "Neck"),
            ("Dolphin", "Clever"),
            ("Owl", "Night"),
            ("Kangaroo", "Pouch"),
        ),
    ),
    Category(
        name="Food",
        emoji="🍕",
        is_default=True,
        words=_entries(
            ("Pizza", "Slice"),
            ("Apple", "Fruit"),
            ("Sushi", "Rice"),
            ("Pancake", "Breakfast"),
            ("Chocolate", "Sweet"),
            ("Soup", "Spoon"),
            ("Cheese", "Holes"),
            ("Popcorn", "Cinema"),
        ),
    ),
    Category(
        name="Places",
        emoji="🗺️",
        is_default=True,
        words=_entries(
            ("Beach", "Sand"),
            ("Hospital", "Doctor"),
            ("Library", "Quiet"),
            ("Airport", "Gate"),
            ("Museum", "Exhibit"),
            ("Zoo", "Cages"),
            ("Castle", "Knight"),
            ("Supermarket", "Cart"),
        ),
    ),
    Category(
        name="Jobs",
        emoji="💼",
        words=_entries(
            ("Firefighter", "Hose"),
            ("Teacher", "Classroom"),
            ("Pilot", "Cockpit"),
            ("Baker", "Oven"),
            ("Dentist", "Teeth"),
            ("Farmer", "Tractor"),
            ("Astronaut", "Space"),
            ("Plumber", "Pipes"),
        ),
    ),
    Category(
        name="Sports",
        emoji="⚽",
        words=_entries(
            ("Football", "Goal"),
            ("Tennis", "Racket"),
            ("Swimming", "Pool"),
            ("Skiing", "Snow"),
            ("Boxing", "Gloves"),
            ("Golf", "Hole"),
            ("Cycling", "Wheels"),
            ("Chess", "Checkmate"),
        ),
    ),
    Category(
        name="Objects",
        emoji="🧸",
        words=_entries(
            ("Umbrella", "Rain"),
            ("Clock", "Time"),
            ("Mirror", "Reflection"),
            ("Candle", "Flame"),
            ("Key", "Lock"),
            ("Ladder", "Climb"),
            ("Backpack", "School"),
            ("Telescope", "Stars"),
        ),
    ),
]
