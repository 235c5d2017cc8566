"""Tests for strategic importance scoring."""

import pytest

from tekken_framedata.core.models import Move
from tekken_framedata.core.scoring import decorate, score_move

from tests.factories import EXPECTED_SCORES, MOVES


def make_move(**overrides) -> Move:
    data = {
        "moveNumber": 1,
        "command": "1",
        "hitLevel": "s",
        "damage": "10",
        "block": "",
        "hit": "",
        "counterHit": "",
    }
    data.update(overrides)
    return Move.model_validate(data)


class TestScoreMove:
    """Tests for score_move."""

    @pytest.mark.parametrize("record", MOVES, ids=[m["command"] for m in MOVES])
    def test_pinned_scores(self, record):
        """Test scores of the fixture movelist against pinned values."""
        assert score_move(Move.model_validate(record)) == EXPECTED_SCORES[record["command"]]

    def test_empty_move_scores_zero(self):
        """Test that a move with no usable data scores 0."""
        assert score_move(make_move()) == 0

    @pytest.mark.parametrize(
        "block, expected",
        [("+1", 15), ("0", 10), ("-4", 10), ("-5", 5), ("-9", 5), ("-10", -5), ("-13", -5), ("-14", -10), ("-15", -10), ("-16", -15)],
    )
    def test_safety_bands(self, block, expected):
        """Test block advantage bands."""
        assert score_move(make_move(block=block)) == expected

    @pytest.mark.parametrize(
        "startup, expected",
        [("i10", 10), ("i12", 10), ("i13", 7), ("i14", 7), ("i16", 5), ("i20", 2), ("i21", -2)],
    )
    def test_speed_bands(self, startup, expected):
        """Test startup bands."""
        assert score_move(make_move(startup=startup)) == expected

    def test_high_hit_advantage_without_launch(self):
        """Test +10 for more than +15 on hit when not a launcher."""
        assert score_move(make_move(hit="+16")) == 10
        assert score_move(make_move(hit="+15")) == 0

    def test_structural_only_launcher_gets_no_launch_reward(self):
        """Test that +25 without an airborne marker scores as high advantage, not launch."""
        assert score_move(make_move(hit="+25")) == 10

    def test_crouch_forcing_bonus(self):
        """Test the crouch bonus from either hit or counter hit."""
        assert score_move(make_move(counterHit="+4c")) == 5
        assert score_move(make_move(hit="+2c")) == 5

    def test_utility_properties(self):
        """Test tag, notes and transition bonuses."""
        move = make_move(
            tags={"he": "1", "pc": "1", "trn": "1", "bbr": "1"},
            notes="HOMING. Guaranteed follow-up",
            transitions=["DSS"],
        )
        assert score_move(move) == 15 + 7 + 5 + 5 + 10 + 12 + 15

    def test_low_launcher_bonus(self):
        """Test that low launchers get +15 instead of +3."""
        assert score_move(make_move(hitLevel="l", hit="+30a")) == 20 + 15
        assert score_move(make_move(hitLevel="l")) == 3

    def test_slow_high_penalty(self):
        """Test the -3 penalty for highs slower than i12."""
        assert score_move(make_move(hitLevel="h", startup="i15")) == 5 - 3
        assert score_move(make_move(hitLevel="h", startup="i12")) == 10

    def test_deterministic(self):
        """Test that repeated scoring of the same move is stable."""
        move = Move.model_validate(MOVES[3])
        assert len({score_move(move) for _ in range(5)}) == 1


class TestDecorate:
    """Tests for decorate."""

    def test_returns_scored_copy(self):
        """Test that decorate fills the score without touching the original."""
        move = Move.model_validate(MOVES[0])
        scored = decorate(move)

        assert scored.strategic_importance == 25
        assert move.strategic_importance is None
        assert scored is not move
