"""Round lifecycle transitions.

Each transition takes the current RoundState plus its inputs and returns a
new RoundState. A failed guard raises a ValidationError before anything is
built, so the caller's state is never partially updated.

    LOBBY --start_game--> VIEWING_CARDS --advance (last player)--> DISCUSSION
    DISCUSSION --end_game--> RESULTS --reset_game--> LOBBY
    RESULTS --start_game--> VIEWING_CARDS   (play again)
"""

import random
from pydantic import BaseModel

from whogame.models.player import Player
from whogame.models.round_state import RoundPhase, RoundState
from whogame.models.settings import Settings
from whogame.models.words import Category, WordPool
from whogame.engine.mode_resolver import resolve_modes
from whogame.engine.role_assigner import assign_roles, check_role_preconditions
from whogame.engine.content_selector import select_content
from whogame.validation.exceptions import (
    CardNotViewedError,
    EmptyWordPoolError,
    InvalidTransitionError,
    NoCategorySelectedError,
    NoModeSelectedError,
    UnknownPlayerError,
)

STARTABLE_PHASES = (RoundPhase.LOBBY, RoundPhase.RESULTS)


class RoundStart(BaseModel):
    """Outcome of start_game: the new state and the flagged roster."""

    state: RoundState
    players: list[Player]


def _require_phase(state: RoundState, action: str, *phases: RoundPhase) -> None:
    if state.phase not in phases:
        allowed = ", ".join(p.value for p in phases)
        raise InvalidTransitionError(
            f"Cannot {action} during {state.phase.value} (allowed: {allowed})",
            context={"phase": state.phase.value, "action": action},
        )


def start_game(
    state: RoundState,
    players: list[Player],
    categories: list[Category],
    selected_categories: list[str],
    settings: Settings,
    rng: random.Random,
) -> RoundStart:
    """Set up a new round: resolve modes, assign roles, select content.

    Raises:
        InvalidTransitionError: Not in LOBBY or RESULTS.
        NoCategorySelectedError: No category selected.
        EmptyWordPoolError: Selected categories have no words.
        NoModeSelectedError: Settings enable no mode.
        NotEnoughPlayersError, InvalidImpostorCountError, TooManyImpostorsError:
            Roster does not fit the resolved modes or impostor count.
    """
    _require_phase(state, "start a round", *STARTABLE_PHASES)

    pool = WordPool(categories)
    if not pool.selected(selected_categories):
        raise NoCategorySelectedError("Select at least 1 category")
    if not pool.words_for(selected_categories):
        raise EmptyWordPoolError("The selected categories contain no words")
    if not settings.enabled_modes:
        raise NoModeSelectedError("Select at least 1 game mode")

    modes = resolve_modes(settings.enabled_modes, settings.randomize, rng)
    check_role_preconditions(
        len(players), modes.normal_mode, modes.special_mode, settings.number_of_impostors
    )

    assignment = assign_roles(
        players,
        modes.normal_mode,
        modes.special_mode,
        settings.number_of_impostors,
        rng,
    )
    content = select_content(
        categories,
        selected_categories,
        modes.normal_mode,
        settings.hint_enabled,
        rng,
    )

    new_state = RoundState(
        phase=RoundPhase.VIEWING_CARDS,
        current_player_index=0,
        card_viewed=False,
        selected_word=content.selected_word,
        selected_word2=content.selected_word2,
        selected_hint=content.selected_hint,
        selected_hint2=content.selected_hint2,
        impostor_ids=assignment.impostor_ids,
        jester_id=assignment.jester_id,
        detective_id=assignment.detective_id,
        healer_id=assignment.healer_id,
        active_mode=modes.active_mode,
        normal_mode=modes.normal_mode,
        special_mode=modes.special_mode,
        votes={},
    )
    return RoundStart(state=new_state, players=assignment.players)


def mark_card_viewed(state: RoundState) -> RoundState:
    """Record that the current player has looked at their card."""
    _require_phase(state, "view a card", RoundPhase.VIEWING_CARDS)
    return state.model_copy(update={"card_viewed": True})


def advance(state: RoundState, player_count: int) -> RoundState:
    """Hand the device to the next player, or open the discussion.

    Raises:
        InvalidTransitionError: Not in VIEWING_CARDS.
        CardNotViewedError: Current player has not seen their card.
    """
    _require_phase(state, "advance to the next player", RoundPhase.VIEWING_CARDS)
    if not state.card_viewed:
        raise CardNotViewedError(
            "Let the current player view their card first",
            context={"current_player_index": state.current_player_index},
        )

    if state.current_player_index < player_count - 1:
        return state.model_copy(update={
            "current_player_index": state.current_player_index + 1,
            "card_viewed": False,
        })
    return state.model_copy(update={"phase": RoundPhase.DISCUSSION})


def cast_vote(
    state: RoundState,
    players: list[Player],
    voter_id: str,
    target_id: str,
) -> RoundState:
    """Record (or replace) a player's vote.

    Raises:
        InvalidTransitionError: Not in DISCUSSION.
        UnknownPlayerError: Voter or target not on the roster.
    """
    _require_phase(state, "vote", RoundPhase.DISCUSSION)
    roster = {p.id for p in players}
    for pid in (voter_id, target_id):
        if pid not in roster:
            raise UnknownPlayerError(f"Unknown player: {pid}", context={"player_id": pid})

    votes = dict(state.votes)
    votes[voter_id] = target_id
    return state.model_copy(update={"votes": votes})


def end_game(state: RoundState) -> RoundState:
    """Close the discussion and show results."""
    _require_phase(state, "end the discussion", RoundPhase.DISCUSSION)
    return state.model_copy(update={"phase": RoundPhase.RESULTS})


def reset_game(players: list[Player]) -> RoundStart:
    """Return to the lobby with round data and player flags cleared."""
    cleared = [p.model_copy(update={"is_impostor": None}) for p in players]
    return RoundStart(state=RoundState(), players=cleared)
