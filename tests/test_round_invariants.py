"""Tests for the round consistency validators (R.1-R.9)."""

import random

from whogame.engine import round_lifecycle
from whogame.models import DEFAULT_CATEGORIES, GameMode, Player, RoundPhase, RoundState, Settings
from whogame.validation import ValidationSeverity, expected_impostor_flag, validate_round_state


def make_players(count: int) -> list[Player]:
    return [Player(id=str(i + 1), name=f"Player {i + 1}", color="#000000") for i in range(count)]


def started(count: int = 5, **settings) -> round_lifecycle.RoundStart:
    return round_lifecycle.start_game(
        RoundState(),
        make_players(count),
        DEFAULT_CATEGORIES,
        ["Animals", "Food"],
        Settings(**settings),
        random.Random(13),
    )


def rule_ids(violations) -> set[str]:
    return {v.rule_id for v in violations}


class TestValidRounds:
    """Freshly started rounds pass every rule."""

    def test_lobby(self):
        assert validate_round_state(RoundState(), make_players(3)) == []

    def test_every_normal_mode(self):
        for mode in GameMode:
            if mode == GameMode.BREAKING_POINT:
                continue
            result = started(6, enabled_modes={mode}, number_of_impostors=2)
            assert validate_round_state(result.state, result.players, 2) == [], mode

    def test_with_breaking_point(self):
        result = started(6, enabled_modes={GameMode.DETECTIVE, GameMode.BREAKING_POINT})
        assert validate_round_state(result.state, result.players, 1) == []


class TestViolations:
    """Each rule fires on a corrupted round."""

    def test_unknown_impostor(self):
        result = started()
        state = result.state.model_copy(update={"impostor_ids": ["99"]})
        assert "R.1" in rule_ids(validate_round_state(state, result.players))

    def test_wrong_impostor_count(self):
        result = started()
        assert "R.2" in rule_ids(validate_round_state(result.state, result.players, 2))

    def test_everyone_impostor_needs_all(self):
        result = started(4, enabled_modes={GameMode.EVERYONE_IMPOSTOR})
        state = result.state.model_copy(update={"impostor_ids": result.state.impostor_ids[:2]})
        assert "R.2" in rule_ids(validate_round_state(state, result.players))

    def test_duplicate_extra_roles(self):
        result = started(6, enabled_modes={GameMode.JESTER, GameMode.BREAKING_POINT})
        state = result.state.model_copy(update={"healer_id": result.state.jester_id})
        assert "R.3" in rule_ids(validate_round_state(state, result.players, 1))

    def test_extra_role_is_impostor(self):
        result = started(5, enabled_modes={GameMode.JESTER})
        state = result.state.model_copy(update={"jester_id": result.state.impostor_ids[0]})
        assert "R.4" in rule_ids(validate_round_state(state, result.players, 1))

    def test_extra_role_off_roster(self):
        result = started(5, enabled_modes={GameMode.DETECTIVE})
        state = result.state.model_copy(update={"detective_id": "99"})
        assert "R.5" in rule_ids(validate_round_state(state, result.players, 1))

    def test_flag_mismatch(self):
        result = started()
        players = [p.model_copy(update={"is_impostor": not p.is_impostor}) for p in result.players]
        assert "R.6" in rule_ids(validate_round_state(result.state, players, 1))

    def test_role_without_mode(self):
        result = started()
        innocent = next(p.id for p in result.players if not p.is_impostor)
        state = result.state.model_copy(update={"jester_id": innocent})
        assert "R.7" in rule_ids(validate_round_state(state, result.players, 1))

    def test_seat_out_of_range(self):
        result = started()
        state = result.state.model_copy(update={"current_player_index": 5})
        assert "R.8" in rule_ids(validate_round_state(state, result.players, 1))

    def test_vote_for_unknown_player(self):
        result = started()
        state = result.state.model_copy(
            update={"phase": RoundPhase.DISCUSSION, "votes": {"1": "99"}}
        )
        assert "R.9" in rule_ids(validate_round_state(state, result.players, 1))

    def test_stale_lobby(self):
        result = started()
        lobby = result.state.model_copy(update={"phase": RoundPhase.LOBBY})
        violations = validate_round_state(lobby, result.players)
        assert rule_ids(violations) == {"R.6", "R.8"}
        severities = {v.rule_id: v.severity for v in violations}
        assert severities["R.8"] == ValidationSeverity.WARNING

    def test_describe(self):
        result = started()
        violations = validate_round_state(result.state, result.players, 2)
        assert [v.describe() for v in violations] == [
            "R.2 Role Assignment: Expected 2 impostor(s), got 1"
        ]


class TestExpectedImpostorFlag:
    """Tests for the flag a player should carry."""

    def test_plain_round(self):
        state = RoundState(impostor_ids=["1"], normal_mode=GameMode.NORMAL)
        assert expected_impostor_flag(state, "1") is True
        assert expected_impostor_flag(state, "2") is False

    def test_roles_switched(self):
        state = RoundState(
            impostor_ids=["1"],
            healer_id="2",
            normal_mode=GameMode.ROLES_SWITCHED,
            special_mode=GameMode.BREAKING_POINT,
        )
        assert expected_impostor_flag(state, "1") is False
        assert expected_impostor_flag(state, "2") is False
        assert expected_impostor_flag(state, "3") is True
