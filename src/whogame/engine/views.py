"""Read-only projections of a round for the viewing and results screens."""

from collections import Counter
from typing import Optional
from pydantic import BaseModel, Field

from whogame.models.modes import GameMode, mode_label
from whogame.models.player import Player, PlayerSummary, Role
from whogame.models.round_state import RoundState

DETECTIVE_VOTE_WEIGHT = 2


class CardView(BaseModel):
    """What one player sees when they hold the card."""

    player_id: str
    player_name: str
    content: str = ""  # empty for impostors and the jester
    content2: Optional[str] = None
    hint: Optional[str] = None
    is_impostor: bool = False
    is_jester: bool = False
    is_detective: bool = False
    is_healer: bool = False
    show_hint_to_innocents: bool = False

    @property
    def role(self) -> Role:
        if self.is_jester:
            return Role.JESTER
        if self.is_impostor:
            return Role.IMPOSTOR
        if self.is_detective:
            return Role.DETECTIVE
        if self.is_healer:
            return Role.HEALER
        return Role.INNOCENT


class VoteCount(BaseModel):
    """Weighted votes received by one player."""

    player: PlayerSummary
    votes: int


class RoundResults(BaseModel):
    """Everything the results screen reveals."""

    word: str
    word2: Optional[str] = None
    hint: str = ""
    hint2: Optional[str] = None
    impostors: list[PlayerSummary] = Field(default_factory=list)
    jester: Optional[PlayerSummary] = None
    detective: Optional[PlayerSummary] = None
    healer: Optional[PlayerSummary] = None
    mode_labels: list[str] = Field(default_factory=list)
    vote_counts: list[VoteCount] = Field(default_factory=list)

    @property
    def most_voted(self) -> list[PlayerSummary]:
        """Players tied for the most votes (empty when nobody voted)."""
        if not self.vote_counts:
            return []
        top = self.vote_counts[0].votes
        return [vc.player for vc in self.vote_counts if vc.votes == top]


def build_card_view(state: RoundState, player: Player) -> CardView:
    """Project the round onto one player's card.

    Impostors and the jester see only the hint. Everyone else sees the
    word(s); the hint rides along and is displayed to them only under
    Innocents See Hint.
    """
    is_jester = state.jester_id == player.id
    is_impostor = bool(player.is_impostor)
    hint = state.selected_hint or None

    if is_jester or is_impostor:
        return CardView(
            player_id=player.id,
            player_name=player.name,
            hint=hint,
            is_impostor=is_impostor,
            is_jester=is_jester,
        )

    return CardView(
        player_id=player.id,
        player_name=player.name,
        content=state.selected_word,
        content2=state.selected_word2,
        hint=hint,
        is_detective=state.detective_id == player.id,
        is_healer=state.healer_id == player.id,
        show_hint_to_innocents=state.normal_mode == GameMode.INNOCENTS_SEE_HINT,
    )


def mode_labels(state: RoundState) -> list[str]:
    """Labels of the modes in play, active mode first."""
    labels = [mode_label(state.active_mode)]
    if state.special_mode is not None and state.normal_mode is not None:
        labels.append(mode_label(state.normal_mode))
    return labels


def tally_votes(state: RoundState) -> Counter:
    """Count votes per target; the detective's vote counts double."""
    tally: Counter = Counter()
    for voter_id, target_id in state.votes.items():
        weight = DETECTIVE_VOTE_WEIGHT if voter_id == state.detective_id else 1
        tally[target_id] += weight
    return tally


def build_results(state: RoundState, players: list[Player]) -> RoundResults:
    """Resolve the round's roles to names and colors for the results screen."""
    by_id = {p.id: p for p in players}

    def summary(player_id: Optional[str]) -> Optional[PlayerSummary]:
        if player_id is None or player_id not in by_id:
            return None
        return PlayerSummary.from_player(by_id[player_id])

    # Roster order, not shuffle order
    impostors = [
        PlayerSummary.from_player(p) for p in players if p.id in state.impostor_ids
    ]

    order = {p.id: index for index, p in enumerate(players)}
    tally = tally_votes(state)
    vote_counts = [
        VoteCount(player=PlayerSummary.from_player(by_id[pid]), votes=count)
        for pid, count in sorted(tally.items(), key=lambda item: (-item[1], order.get(item[0], 0)))
        if pid in by_id
    ]

    return RoundResults(
        word=state.selected_word,
        word2=state.selected_word2,
        hint=state.selected_hint,
        hint2=state.selected_hint2,
        impostors=impostors,
        jester=summary(state.jester_id),
        detective=summary(state.detective_id),
        healer=summary(state.healer_id),
        mode_labels=mode_labels(state),
        vote_counts=vote_counts,
    )
