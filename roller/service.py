"""Roll service - batch parsing and evaluation of roll tokens."""

import random
from collections.abc import Sequence

from aws_lambda_powertools import Logger

from dicecore.evaluator import Sampler, evaluate
from dicecore.models import RollResult, RollSpecification
from dicecore.parser import default_specification, parse_token

logger = Logger(child=True)


class RollService:
    """Service layer turning raw tokens into roll results."""

    def __init__(self, sampler: Sampler | None = None, seed: int | None = None) -> None:
        """Initialize roll service.

        Args:
            sampler: Uniform integer sampler over [lower, upper). Takes
                precedence over seed when given.
            seed: Seed for the service's own random generator
        """
        self.rng = random.Random(seed)
        self.sampler = sampler or self.rng.randrange

    def plan(self, tokens: Sequence[str]) -> list[RollSpecification]:
        """Parse every token, in order.

        Args:
            tokens: Raw tokens, program name excluded

        Returns:
            One specification per token, or the default 1-100 roll when
            no tokens are given

        Raises:
            RollError: On the first token that fails to parse
        """
        if not tokens:
            logger.debug("No tokens given, using default roll")
            return [default_specification()]
        return [parse_token(token) for token in tokens]

    def roll(self, tokens: Sequence[str]) -> list[RollResult]:
        """Parse the whole batch, then roll each specification.

        A bad token anywhere aborts the batch before anything is rolled.

        Args:
            tokens: Raw tokens, program name excluded

        Returns:
            Results in input order
        """
        specs = self.plan(tokens)
        results = [evaluate(spec, self.sampler) for spec in specs]
        logger.info("Rolled batch", extra={"count": len(results)})
        return results
