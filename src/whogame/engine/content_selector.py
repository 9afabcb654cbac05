"""Pick the secret word(s) and hint(s) for a round."""

import random
from typing import Iterable, Optional
from pydantic import BaseModel

from whogame.models.modes import GameMode
from whogame.models.words import Category, WordEntry, WordPool
from whogame.validation.exceptions import EmptyWordPoolError, NoCategorySelectedError


class RoundContent(BaseModel):
    """Word(s) shown to innocents and hint(s) shown to impostors."""

    selected_word: str
    selected_word2: Optional[str] = None
    selected_hint: str
    selected_hint2: Optional[str] = None


def _present(entry: WordEntry, swapped: bool, hint_enabled: bool) -> tuple[str, str]:
    word, hint = (entry.hint, entry.word) if swapped else (entry.word, entry.hint)
    return word, hint if hint_enabled else ""


def select_content(
    categories: Iterable[Category],
    selected_names: Iterable[str],
    normal_mode: GameMode,
    hint_enabled: bool,
    rng: random.Random,
) -> RoundContent:
    """Draw content for the round from the selected categories.

    Roles Switched transposes word and hint. Two Words draws a second
    entry independently, so it may repeat the first.

    Raises:
        NoCategorySelectedError: No selected name matches a category.
        EmptyWordPoolError: The selected categories contain no words.
    """
    pool = WordPool(categories)
    selected = list(selected_names)
    if not pool.selected(selected):
        raise NoCategorySelectedError(
            "Select at least 1 category",
            context={"selected": selected},
        )

    words = pool.words_for(selected)
    if not words:
        raise EmptyWordPoolError(
            "The selected categories contain no words",
            context={"selected": selected},
        )

    swapped = normal_mode == GameMode.ROLES_SWITCHED
    primary = rng.choice(words)
    word, hint = _present(primary, swapped, hint_enabled)

    word2: Optional[str] = None
    hint2: Optional[str] = None
    if normal_mode == GameMode.TWO_WORDS:
        secondary = rng.choice(words)
        word2, hint2 = _present(secondary, swapped, hint_enabled)

    return RoundContent(
        selected_word=word,
        selected_word2=word2,
        selected_hint=hint,
        selected_hint2=hint2,
    )
