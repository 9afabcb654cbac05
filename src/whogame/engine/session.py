"""GameSession - owns the roster, catalog, settings and the current round."""

import logging
import random
from typing import Callable, Optional

from whogame.models import (
    Category,
    DEFAULT_CATEGORIES,
    Player,
    RoundPhase,
    RoundState,
    Settings,
    WordPool,
)
from whogame.engine import round_lifecycle
from whogame.engine.discussion_timer import DiscussionTimer
from whogame.engine.views import CardView, RoundResults, build_card_view, build_results
from whogame.validation.exceptions import InvalidTransitionError, ValidationError

logger = logging.getLogger(__name__)

TimerFactory = Callable[[int], DiscussionTimer]


class GameSession:
    """Applies round transitions to one shared device's game.

    Every action either fully succeeds or raises a ValidationError and
    leaves the session exactly as it was. Actions are expected one at a
    time, in response to a single player input.
    """

    def __init__(
        self,
        players: list[Player],
        settings: Optional[Settings] = None,
        categories: Optional[list[Category]] = None,
        selected_categories: Optional[list[str]] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        timer_factory: Optional[TimerFactory] = None,
    ):
        """Initialize the GameSession.

        Args:
            players: Roster in display order.
            settings: Round settings. Defaults to Settings().
            categories: Word catalog. Defaults to the built-in catalog.
            selected_categories: Selected category names. Defaults to the
                                 catalog's default selection.
            seed: Optional random seed for reproducible rounds. Ignored when
                  rng is given.
            rng: Optional random.Random shared by every draw.
            timer_factory: Builds the discussion countdown from a length in
                           seconds. Without it no countdown runs.
        """
        self.players = list(players)
        self.settings = settings if settings is not None else Settings()
        self.categories = list(categories) if categories is not None else list(DEFAULT_CATEGORIES)
        if selected_categories is None:
            selected_categories = WordPool(self.categories).default_selection()
        self.selected_categories = list(selected_categories)
        self.rng = rng if rng is not None else random.Random(seed)
        self.state = RoundState()
        self.timer: Optional[DiscussionTimer] = None
        self._timer_factory = timer_factory

    @property
    def phase(self) -> RoundPhase:
        return self.state.phase

    @property
    def current_player(self) -> Optional[Player]:
        if self.state.phase != RoundPhase.VIEWING_CARDS:
            return None
        return self.players[self.state.current_player_index]

    @property
    def is_last_player(self) -> bool:
        return self.state.current_player_index >= len(self.players) - 1

    # =========================================================================
    # Transitions
    # =========================================================================

    def start_game(self) -> RoundState:
        """Start a round from the lobby, or play again from the results."""
        try:
            started = round_lifecycle.start_game(
                self.state,
                self.players,
                self.categories,
                self.selected_categories,
                self.settings,
                self.rng,
            )
        except ValidationError as e:
            logger.info("start_game rejected: %s", e)
            raise

        self._stop_timer()
        self.state = started.state
        self.players = started.players
        logger.info(
            "Round started: mode=%s players=%d impostors=%d",
            self.state.active_mode.value,
            len(self.players),
            len(self.state.impostor_ids),
        )
        return self.state

    def mark_card_viewed(self) -> RoundState:
        """Record that the current player has seen their card."""
        try:
            self.state = round_lifecycle.mark_card_viewed(self.state)
        except ValidationError as e:
            logger.info("mark_card_viewed rejected: %s", e)
            raise
        return self.state

    def advance(self) -> RoundState:
        """Pass the device on; after the last player, open the discussion."""
        try:
            new_state = round_lifecycle.advance(self.state, len(self.players))
        except ValidationError as e:
            logger.info("advance rejected: %s", e)
            raise

        self.state = new_state
        if self.state.phase == RoundPhase.DISCUSSION:
            logger.info("All cards viewed, discussion open")
            self._start_timer()
        return self.state

    def cast_vote(self, voter_id: str, target_id: str) -> RoundState:
        """Record a vote during the discussion."""
        try:
            self.state = round_lifecycle.cast_vote(self.state, self.players, voter_id, target_id)
        except ValidationError as e:
            logger.info("cast_vote rejected: %s", e)
            raise
        logger.debug("Vote recorded: %s -> %s", voter_id, target_id)
        return self.state

    def end_game(self) -> RoundState:
        """Close the discussion and reveal the results."""
        try:
            self.state = round_lifecycle.end_game(self.state)
        except ValidationError as e:
            logger.info("end_game rejected: %s", e)
            raise
        self._stop_timer()
        logger.info("Round ended")
        return self.state

    def reset_game(self) -> RoundState:
        """Return to the lobby. Calling it twice is harmless."""
        reset = round_lifecycle.reset_game(self.players)
        self._stop_timer()
        self.state = reset.state
        self.players = reset.players
        logger.debug("Session reset to lobby")
        return self.state

    def close(self) -> None:
        """Tear down anything still running."""
        self._stop_timer()

    # =========================================================================
    # Views
    # =========================================================================

    def current_card(self) -> CardView:
        """Card for the player currently holding the device."""
        player = self.current_player
        if player is None:
            raise InvalidTransitionError(
                f"No card to show during {self.state.phase.value}",
                context={"phase": self.state.phase.value},
            )
        return build_card_view(self.state, player)

    def results(self) -> RoundResults:
        """Results of the finished round."""
        if self.state.phase != RoundPhase.RESULTS:
            raise InvalidTransitionError(
                f"No results during {self.state.phase.value}",
                context={"phase": self.state.phase.value},
            )
        return build_results(self.state, self.players)

    # =========================================================================
    # Timer
    # =========================================================================

    def _start_timer(self) -> None:
        if not self.settings.timer.enabled or self._timer_factory is None:
            return
        self.timer = self._timer_factory(self.settings.timer.length_seconds)
        self.timer.start()

    def _stop_timer(self) -> None:
        if self.timer is not None:
            self.timer.stop()
            self.timer = None
