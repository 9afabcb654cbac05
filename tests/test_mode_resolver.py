"""Tests for mode resolution."""

import random

import pytest

from whogame.engine.mode_resolver import ResolvedModes, resolve_modes
from whogame.models import GameMode
from whogame.validation import ConfigurationError


class TestResolveModes:
    """Tests for picking the normal and special mode of a round."""

    def test_empty_mode_set_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError):
            resolve_modes(set(), randomize=True, rng=random.Random(1))

    def test_single_normal_mode(self):
        resolved = resolve_modes({GameMode.TWO_WORDS}, randomize=False, rng=random.Random(1))
        assert resolved.normal_mode == GameMode.TWO_WORDS
        assert resolved.special_mode is None
        assert resolved.active_mode == GameMode.TWO_WORDS

    def test_special_only_falls_back_to_normal(self):
        resolved = resolve_modes({GameMode.BREAKING_POINT}, randomize=True, rng=random.Random(1))
        assert resolved.normal_mode == GameMode.NORMAL
        assert resolved.special_mode == GameMode.BREAKING_POINT
        assert resolved.active_mode == GameMode.BREAKING_POINT

    @pytest.mark.parametrize("randomize", [True, False])
    def test_special_with_normal(self, randomize):
        for seed in range(50):
            resolved = resolve_modes(
                {GameMode.NORMAL, GameMode.BREAKING_POINT},
                randomize=randomize,
                rng=random.Random(seed),
            )
            assert resolved.special_mode == GameMode.BREAKING_POINT
            assert resolved.normal_mode == GameMode.NORMAL
            assert resolved.active_mode == GameMode.BREAKING_POINT

    def test_without_randomize_first_in_table_order_wins(self):
        enabled = {GameMode.JESTER, GameMode.TWO_WORDS, GameMode.DETECTIVE}
        for seed in range(20):
            resolved = resolve_modes(enabled, randomize=False, rng=random.Random(seed))
            assert resolved.normal_mode == GameMode.DETECTIVE

    def test_randomize_draws_every_candidate(self):
        enabled = {GameMode.JESTER, GameMode.TWO_WORDS, GameMode.DETECTIVE}
        seen = set()
        for seed in range(200):
            resolved = resolve_modes(enabled, randomize=True, rng=random.Random(seed))
            assert resolved.normal_mode in enabled
            assert resolved.special_mode is None
            seen.add(resolved.normal_mode)
        assert seen == enabled

    def test_same_seed_same_result(self):
        enabled = set(GameMode)
        first = resolve_modes(enabled, randomize=True, rng=random.Random(42))
        second = resolve_modes(enabled, randomize=True, rng=random.Random(42))
        assert first == second

    def test_active_mode_property(self):
        assert ResolvedModes(normal_mode=GameMode.JESTER).active_mode == GameMode.JESTER
        assert ResolvedModes(
            normal_mode=GameMode.JESTER,
            special_mode=GameMode.BREAKING_POINT,
        ).active_mode == GameMode.BREAKING_POINT
