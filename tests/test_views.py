"""Tests for card and results projections."""

from whogame.engine.views import (
    DETECTIVE_VOTE_WEIGHT,
    build_card_view,
    build_results,
    mode_labels,
    tally_votes,
)
from whogame.models import GameMode, Player, Role, RoundPhase, RoundState


def make_players(count: int) -> list[Player]:
    return [Player(id=str(i + 1), name=f"Player {i + 1}", color="#000000") for i in range(count)]


def flagged(players: list[Player], impostor_ids: list[str]) -> list[Player]:
    return [p.model_copy(update={"is_impostor": p.id in impostor_ids}) for p in players]


def round_state(**kwargs) -> RoundState:
    defaults = dict(
        phase=RoundPhase.VIEWING_CARDS,
        selected_word="Apple",
        selected_hint="Fruit",
        impostor_ids=["1"],
        active_mode=GameMode.NORMAL,
        normal_mode=GameMode.NORMAL,
    )
    defaults.update(kwargs)
    return RoundState(**defaults)


class TestCardView:
    """Tests for what each role sees."""

    def test_impostor_sees_only_hint(self):
        players = flagged(make_players(3), ["1"])
        card = build_card_view(round_state(), players[0])
        assert card.content == ""
        assert card.content2 is None
        assert card.hint == "Fruit"
        assert card.role == Role.IMPOSTOR

    def test_innocent_sees_word(self):
        players = flagged(make_players(3), ["1"])
        card = build_card_view(round_state(), players[1])
        assert card.content == "Apple"
        assert card.role == Role.INNOCENT
        assert card.show_hint_to_innocents is False

    def test_impostor_without_hint(self):
        players = flagged(make_players(3), ["1"])
        card = build_card_view(round_state(selected_hint=""), players[0])
        assert card.hint is None

    def test_jester_sees_only_hint(self):
        players = flagged(make_players(4), ["1"])
        state = round_state(
            jester_id="2", active_mode=GameMode.JESTER, normal_mode=GameMode.JESTER
        )
        card = build_card_view(state, players[1])
        assert card.content == ""
        assert card.hint == "Fruit"
        assert card.is_jester
        assert not card.is_impostor
        assert card.role == Role.JESTER

    def test_detective_and_healer_see_word(self):
        players = flagged(make_players(5), ["1"])
        state = round_state(
            detective_id="2",
            healer_id="3",
            active_mode=GameMode.BREAKING_POINT,
            normal_mode=GameMode.DETECTIVE,
            special_mode=GameMode.BREAKING_POINT,
        )
        detective = build_card_view(state, players[1])
        healer = build_card_view(state, players[2])
        assert detective.content == "Apple"
        assert detective.role == Role.DETECTIVE
        assert healer.content == "Apple"
        assert healer.role == Role.HEALER

    def test_innocents_see_hint_flag(self):
        players = flagged(make_players(3), ["1"])
        state = round_state(
            active_mode=GameMode.INNOCENTS_SEE_HINT, normal_mode=GameMode.INNOCENTS_SEE_HINT
        )
        card = build_card_view(state, players[1])
        assert card.show_hint_to_innocents is True
        assert card.hint == "Fruit"

    def test_two_words(self):
        players = flagged(make_players(3), ["1"])
        state = round_state(
            selected_word2="Bread",
            selected_hint2="Bakery",
            active_mode=GameMode.TWO_WORDS,
            normal_mode=GameMode.TWO_WORDS,
        )
        innocent = build_card_view(state, players[1])
        impostor = build_card_view(state, players[0])
        assert (innocent.content, innocent.content2) == ("Apple", "Bread")
        assert impostor.content2 is None
        assert impostor.hint == "Fruit"

    def test_roles_switched_follows_flag(self):
        # Under Roles Switched the drawn impostor carries is_impostor False.
        players = make_players(3)
        players = [
            players[0].model_copy(update={"is_impostor": False}),
            players[1].model_copy(update={"is_impostor": True}),
            players[2].model_copy(update={"is_impostor": True}),
        ]
        state = round_state(
            selected_word="Fruit",
            selected_hint="Apple",
            active_mode=GameMode.ROLES_SWITCHED,
            normal_mode=GameMode.ROLES_SWITCHED,
        )
        assert build_card_view(state, players[0]).content == "Fruit"
        assert build_card_view(state, players[1]).content == ""
        assert build_card_view(state, players[1]).hint == "Apple"


class TestResults:
    """Tests for the results projection."""

    def test_mode_labels(self):
        assert mode_labels(round_state()) == ["Normal"]
        state = round_state(
            active_mode=GameMode.BREAKING_POINT,
            normal_mode=GameMode.JESTER,
            special_mode=GameMode.BREAKING_POINT,
        )
        assert mode_labels(state) == ["Breaking Point", "Jester"]

    def test_impostors_in_roster_order(self):
        players = flagged(make_players(4), ["3", "1"])
        results = build_results(round_state(impostor_ids=["3", "1"]), players)
        assert [p.id for p in results.impostors] == ["1", "3"]
        assert results.word == "Apple"
        assert results.hint == "Fruit"

    def test_results_use_ids_under_roles_switched(self):
        players = [
            Player(id="1", name="A", color="#000000", is_impostor=False),
            Player(id="2", name="B", color="#000000", is_impostor=True),
            Player(id="3", name="C", color="#000000", is_impostor=True),
        ]
        state = round_state(
            active_mode=GameMode.ROLES_SWITCHED, normal_mode=GameMode.ROLES_SWITCHED
        )
        results = build_results(state, players)
        assert [p.id for p in results.impostors] == ["1"]

    def test_extra_roles_resolved(self):
        players = flagged(make_players(5), ["1"])
        state = round_state(
            jester_id="2",
            healer_id="3",
            active_mode=GameMode.BREAKING_POINT,
            normal_mode=GameMode.JESTER,
            special_mode=GameMode.BREAKING_POINT,
        )
        results = build_results(state, players)
        assert results.jester.name == "Player 2"
        assert results.healer.name == "Player 3"
        assert results.detective is None

    def test_tally_weights_detective(self):
        state = round_state(
            detective_id="2",
            votes={"2": "1", "3": "4", "4": "1"},
        )
        tally = tally_votes(state)
        assert tally["1"] == DETECTIVE_VOTE_WEIGHT + 1
        assert tally["4"] == 1

    def test_vote_counts_sorted_and_ties(self):
        players = flagged(make_players(4), ["1"])
        state = round_state(votes={"1": "3", "2": "4", "3": "4", "4": "3"})
        results = build_results(state, players)
        assert [(vc.player.id, vc.votes) for vc in results.vote_counts] == [("3", 2), ("4", 2)]
        assert [p.id for p in results.most_voted] == ["3", "4"]

    def test_no_votes(self):
        results = build_results(round_state(), flagged(make_players(3), ["1"]))
        assert results.vote_counts == []
        assert results.most_voted == []
