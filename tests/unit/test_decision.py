"""Tests for the recheck decision — probability model, seeding, coin flip."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from probcheck.core.decision import calculate_probability, days_between, should_check_now
from probcheck.core.random_source import RandomSource, SeededRandom, random_source_for

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FixedRandom:
    """RandomSource stub returning one fixed value."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def uniform(self) -> float:
        self.calls += 1
        return self.value


class TestDaysBetween:
    def test_whole_days(self):
        assert days_between(T0, T0 + timedelta(days=10)) == 10

    def test_partial_day_truncates(self):
        assert days_between(T0, T0 + timedelta(hours=47)) == 1

    def test_negative_truncates_toward_zero(self):
        assert days_between(T0, T0 - timedelta(hours=23)) == 0
        assert days_between(T0, T0 - timedelta(hours=49)) == -2


class TestCalculateProbability:
    def test_no_elapsed_time_gives_base(self):
        p = calculate_probability(T0, T0 + timedelta(days=10), T0 + timedelta(days=10))
        assert p == pytest.approx(0.3)

    def test_same_day_as_check_gives_base(self):
        p = calculate_probability(
            T0, T0 + timedelta(days=10), T0 + timedelta(days=10, hours=23)
        )
        assert p == pytest.approx(0.3)

    def test_scales_with_elapsed_days(self):
        p = calculate_probability(T0, T0 + timedelta(days=30), T0 + timedelta(days=35))
        assert p == pytest.approx(3.0 / 30 * 5)

    def test_not_clamped(self):
        p = calculate_probability(T0, T0 + timedelta(days=2), T0 + timedelta(days=12))
        assert p == pytest.approx(15.0)

    def test_check_before_change_is_certain(self):
        assert calculate_probability(T0, T0 - timedelta(days=3), T0) == 1.0

    def test_check_same_day_as_change_is_certain(self):
        p = calculate_probability(T0, T0 + timedelta(hours=20), T0 + timedelta(days=40))
        assert p == 1.0

    def test_future_now_keeps_base(self):
        p = calculate_probability(T0, T0 + timedelta(days=10), T0 + timedelta(days=5))
        assert p == pytest.approx(0.3)

    def test_custom_factor(self):
        p = calculate_probability(
            T0, T0 + timedelta(days=10), T0 + timedelta(days=10), factor=5.0
        )
        assert p == pytest.approx(0.5)


class TestShouldCheckNow:
    check = T0 + timedelta(days=10)

    def test_draw_above_probability_is_false(self):
        assert should_check_now(T0, self.check, self.check, rng=FixedRandom(0.31)) is False

    def test_draw_at_or_below_probability_is_true(self):
        assert should_check_now(T0, self.check, self.check, rng=FixedRandom(0.3)) is True
        assert should_check_now(T0, self.check, self.check, rng=FixedRandom(0.1)) is True

    def test_draws_exactly_once(self):
        rng = FixedRandom(0.5)
        should_check_now(T0, self.check, self.check, rng=rng)
        assert rng.calls == 1

    def test_explicit_rng_overrides_seed(self):
        assert should_check_now(
            T0, self.check, self.check, "any-seed", rng=FixedRandom(0.99)
        ) is False

    def test_check_before_change_always_true(self):
        for seed in ("a", "b", "c", "d", "e", None):
            assert should_check_now(T0, T0 - timedelta(days=1), T0, seed) is True

    def test_probability_above_one_always_true(self):
        for seed in ("a", "b", "c", "d", "e", None):
            assert should_check_now(
                T0, T0 + timedelta(days=2), T0 + timedelta(days=12), seed
            ) is True

    @pytest.mark.parametrize("seed", ["repo-a", "2024-06-01", "x"])
    def test_deterministic_for_seed(self, seed):
        args = (T0, T0 + timedelta(days=40), T0 + timedelta(days=45))
        first = should_check_now(*args, seed)
        for _ in range(10):
            assert should_check_now(*args, seed) is first


class TestRandomSources:
    def test_same_seed_same_sequence(self):
        a = SeededRandom.from_seed("seed")
        b = SeededRandom.from_seed("seed")
        assert [a.uniform() for _ in range(5)] == [b.uniform() for _ in range(5)]

    def test_different_seeds_differ(self):
        a = SeededRandom.from_seed("seed-1")
        b = SeededRandom.from_seed("seed-2")
        assert [a.uniform() for _ in range(5)] != [b.uniform() for _ in range(5)]

    def test_values_in_unit_interval(self):
        source = SeededRandom.from_entropy()
        for _ in range(100):
            assert 0.0 <= source.uniform() < 1.0

    def test_selection(self):
        assert random_source_for("seed").deterministic is True
        assert random_source_for("").deterministic is False
        assert random_source_for(None).deterministic is False

    def test_protocol(self):
        assert isinstance(SeededRandom.from_entropy(), RandomSource)
        assert isinstance(FixedRandom(0.5), RandomSource)
