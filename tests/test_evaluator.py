"""Tests for roll evaluation."""

import random

import pytest

from dicecore.evaluator import evaluate
from dicecore.exceptions import EmptyRangeError
from dicecore.models import DieKind, RangeKind, RangeShape, RollSpecification
from dicecore.parser import parse_token


class TestEvaluate:
    """Tests for the evaluate function."""

    def test_sample_count_matches_repeat_count(self):
        """3d6 draws three samples."""
        random.seed(42)
        result = evaluate(parse_token("3d6"))

        assert len(result.samples) == 3
        assert result.roll_sum == sum(result.samples)
        assert result.kind == DieKind(label="3d6")

    def test_upper_bound_is_exclusive(self):
        """d6 yields 1-5, never 6."""
        random.seed(42)
        spec = parse_token("200d6")
        result = evaluate(spec)

        assert all(1 <= s < 6 for s in result.samples)
        assert 6 not in result.samples
        assert 5 in result.samples

    def test_range_samples_within_bounds(self):
        random.seed(42)
        spec = parse_token("-4--9")

        for _ in range(50):
            result = evaluate(spec)
            assert -9 <= result.samples[0] < -4

    def test_passes_bounds_to_sampler(self, fixed_sampler):
        """The sampler receives (lower, upper) once per repeat."""
        spec = RollSpecification(
            lower_bound=1,
            upper_bound=8,
            repeat_count=4,
            kind=DieKind(label="4d8"),
        )

        result = evaluate(spec, fixed_sampler)

        assert fixed_sampler.calls == [(1, 8)] * 4
        assert result.samples == (1, 1, 1, 1)
        assert result.roll_sum == 4

    def test_samples_kept_in_draw_order(self):
        draws = iter([5, 2, 9])
        spec = RollSpecification(
            lower_bound=1,
            upper_bound=10,
            repeat_count=3,
            kind=DieKind(label="3d10"),
        )

        result = evaluate(spec, lambda lower, upper: next(draws))

        assert result.samples == (5, 2, 9)
        assert result.roll_sum == 16

    def test_empty_range_raises(self, fixed_sampler):
        """A bare 0 parses to [0, 0), which has nothing to draw."""
        with pytest.raises(EmptyRangeError) as exc_info:
            evaluate(parse_token("0"), fixed_sampler)

        assert exc_info.value.lower_bound == 0
        assert exc_info.value.upper_bound == 0
        assert fixed_sampler.calls == []

    def test_single_sided_die_is_empty(self):
        """d1 is [1, 1)."""
        with pytest.raises(EmptyRangeError):
            evaluate(parse_token("d1"))

    def test_seeded_rolls_repeat(self):
        spec = RollSpecification(
            lower_bound=0,
            upper_bound=1000,
            repeat_count=5,
            kind=RangeKind(shape=RangeShape.POSITIVE),
        )

        random.seed(7)
        first = evaluate(spec)
        random.seed(7)
        second = evaluate(spec)

        assert first == second
