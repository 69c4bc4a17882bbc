"""Evaluate roll specifications into sampled results."""

import random
from collections.abc import Callable

from aws_lambda_powertools import Logger

from .exceptions import EmptyRangeError
from .models import RollResult, RollSpecification

logger = Logger(child=True)

Sampler = Callable[[int, int], int]


def evaluate(spec: RollSpecification, sampler: Sampler | None = None) -> RollResult:
    """Draw repeat_count samples from [lower_bound, upper_bound).

    The upper bound is exclusive, so "d6" never yields 6.

    Args:
        spec: Specification to roll
        sampler: Callable returning a uniform integer in [lower, upper).
            Defaults to random.randrange.

    Returns:
        RollResult with samples in draw order and their sum

    Raises:
        EmptyRangeError: If lower_bound is not below upper_bound
    """
    if spec.lower_bound >= spec.upper_bound:
        raise EmptyRangeError(spec.lower_bound, spec.upper_bound)

    sample = sampler or random.randrange
    samples = [sample(spec.lower_bound, spec.upper_bound) for _ in range(spec.repeat_count)]

    logger.debug("Rolled specification", extra={
        "lower_bound": spec.lower_bound,
        "upper_bound": spec.upper_bound,
        "samples": samples,
    })
    return RollResult.from_samples(spec.kind, samples)
