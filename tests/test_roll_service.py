"""Tests for the batch roll service."""
from unittest.mock import patch

import pytest

from dicecore.exceptions import MalformedNumberError, UnclassifiableRangeError
from dicecore.models import DieKind, RangeKind, RangeShape
from roller.service import RollService


class TestPlan:
    """Tests for RollService.plan."""

    def test_end_to_end_classification(self):
        """Each token classifies independently, in input order."""
        specs = RollService().plan(["5", "-10", "3-7", "d6", "2d4"])

        assert [(s.lower_bound, s.upper_bound, s.repeat_count) for s in specs] == [
            (0, 5, 1),
            (-10, 0, 1),
            (3, 7, 1),
            (1, 6, 1),
            (1, 4, 2),
        ]
        assert specs[0].kind == RangeKind(shape=RangeShape.POSITIVE)
        assert specs[1].kind == RangeKind(shape=RangeShape.NEGATIVE)
        assert specs[2].kind == RangeKind(shape=RangeShape.POSITIVE_TO_POSITIVE)
        assert specs[3].kind == DieKind(label="1d6")
        assert specs[4].kind == DieKind(label="2d4")

    def test_empty_input_uses_default(self):
        specs = RollService().plan([])

        assert len(specs) == 1
        assert specs[0].kind == RangeKind(shape=RangeShape.POSITIVE)
        assert (specs[0].lower_bound, specs[0].upper_bound) == (1, 100)


class TestRoll:
    """Tests for RollService.roll."""

    def test_results_follow_input_order(self, fixed_sampler):
        results = RollService(sampler=fixed_sampler).roll(["5", "-10", "3-7", "d6", "2d4"])

        assert [r.samples for r in results] == [(0,), (-10,), (3,), (1,), (1, 1)]
        assert [r.roll_sum for r in results] == [0, -10, 3, 1, 2]

    def test_samples_within_bounds(self):
        service = RollService(seed=42)
        tokens = ["5", "-10", "3-7", "d6", "2d4"]
        specs = service.plan(tokens)

        for _ in range(20):
            for spec, result in zip(specs, service.roll(tokens)):
                assert len(result.samples) == spec.repeat_count
                assert all(spec.lower_bound <= s < spec.upper_bound for s in result.samples)

    def test_empty_input_rolls_default(self):
        results = RollService(seed=1).roll([])

        assert len(results) == 1
        assert results[0].kind == RangeKind(shape=RangeShape.POSITIVE)
        assert 1 <= results[0].roll_sum < 100

    def test_same_seed_same_results(self):
        tokens = ["1-1000", "10d20"]
        assert RollService(seed=99).roll(tokens) == RollService(seed=99).roll(tokens)

    def test_bad_token_aborts_before_rolling(self, fixed_sampler):
        """A bad token anywhere stops the batch; nothing is rolled."""
        service = RollService(sampler=fixed_sampler)

        with pytest.raises(MalformedNumberError):
            service.roll(["d6", "abc", "5"])

        assert fixed_sampler.calls == []

    def test_unclassifiable_token_aborts(self):
        with patch("roller.service.evaluate") as mock_evaluate:
            with pytest.raises(UnclassifiableRangeError):
                RollService().roll(["5", "1-2-3-4-5"])

        mock_evaluate.assert_not_called()
