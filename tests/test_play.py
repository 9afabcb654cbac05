"""Tests for the console front end helpers."""

import io
import random

import pytest
from rich.console import Console

from whogame import play
from whogame.engine import GameSession
from whogame.models import RoundPhase
from whogame.roster import roster_from_names


def test_vote_choices_numbers_seats():
    """Test that seats stay distinct when names repeat."""
    players = roster_from_names(["Ann", "Ann", "Ben"], random.Random(1))
    seats = play.vote_choices(players)
    assert list(seats) == ["1", "2", "3"]
    assert [p.id for p in seats.values()] == ["1", "2", "3"]


class TestPlayRound:
    """Tests for one scripted round through the console loop."""

    @pytest.mark.asyncio
    async def test_votes_go_to_the_chosen_seat(self, monkeypatch):
        async def fake_ask(prompt: str, **kwargs) -> str:
            if "votes for seat" in prompt:
                return "2"
            return ""

        async def fake_confirm(prompt: str, default: bool = True) -> bool:
            return True

        monkeypatch.setattr(play, "ask", fake_ask)
        monkeypatch.setattr(play, "confirm", fake_confirm)

        players = roster_from_names(["Ann", "Ann", "Ben"], random.Random(1))
        session = GameSession(players, seed=5)
        session.start_game()
        await play.play_round(session, Console(file=io.StringIO()))

        assert session.phase == RoundPhase.RESULTS
        assert session.state.votes == {"1": "2", "2": "2", "3": "2"}
        results = session.results()
        assert [(vc.player.id, vc.votes) for vc in results.vote_counts] == [("2", 3)]
