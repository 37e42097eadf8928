"""
Tests for scoring, leveling and the gravity clock.
"""
import pytest

from tsr_tetris.game import GameClock, GameState, ScoringRules


class TestScoring:
    """Test point awards."""

    def test_two_rows_at_level_three(self):
        assert ScoringRules().score_for_lines(2, 3) == 600

    def test_no_rows(self):
        assert ScoringRules().score_for_lines(0, 5) == 0

    def test_hard_drop_points(self):
        rules = ScoringRules()
        assert rules.hard_drop_score(5) == 10
        assert rules.hard_drop_score(0) == 0


class TestLeveling:
    """Test the level and drop-interval formulas."""

    @pytest.mark.parametrize(
        "lines,level,interval",
        [
            (0, 1, 1000),
            (9, 1, 1000),
            (10, 2, 900),
            (55, 6, 500),
            (90, 10, 100),
            (100, 11, 100),
            (500, 51, 100),
        ],
    )
    def test_table(self, lines, level, interval):
        rules = ScoringRules()
        assert rules.level_for_lines(lines) == level
        assert rules.drop_interval_for_level(level) == interval

    def test_state_reset_uses_rules(self):
        state = GameState(score=50, level=4, lines=33, drop_interval=700, running=True, game_over=True)
        state.reset(ScoringRules())
        assert (state.score, state.level, state.lines, state.drop_interval) == (0, 1, 0, 1000)
        assert not state.running
        assert not state.game_over


class TestClock:
    """Test the gravity cadence."""

    def test_fires_only_after_interval_exceeded(self):
        clock = GameClock()
        assert not clock.advance(600, 1000)
        assert not clock.advance(400, 1000)
        assert clock.advance(1, 1000)

    def test_leftover_discarded(self):
        clock = GameClock()
        assert clock.advance(2500, 1000)
        assert clock.accumulated_ms == 0
        assert not clock.advance(999, 1000)

    def test_reset(self):
        clock = GameClock()
        clock.advance(900, 1000)
        clock.reset()
        assert not clock.advance(900, 1000)
