"""Pydantic models for roll specifications and results."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class RangeShape(str, Enum):
    """Shape of a range token, decided by its dashes."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    POSITIVE_TO_POSITIVE = "positive_to_positive"
    POSITIVE_TO_NEGATIVE = "positive_to_negative"
    NEGATIVE_TO_POSITIVE = "negative_to_positive"
    NEGATIVE_TO_NEGATIVE = "negative_to_negative"


class DieKind(BaseModel):
    """Die roll in NdM notation."""

    model_config = ConfigDict(frozen=True)

    type: Literal["die"] = "die"
    label: str  # "<repeat_count>d<upper_bound>", display only


class RangeKind(BaseModel):
    """Range roll over a contiguous interval."""

    model_config = ConfigDict(frozen=True)

    type: Literal["range"] = "range"
    shape: RangeShape


RollKind = Annotated[DieKind | RangeKind, Field(discriminator="type")]


class RollSpecification(BaseModel):
    """Fully resolved roll for one input token."""

    model_config = ConfigDict(frozen=True)

    lower_bound: int
    upper_bound: int
    """Exclusive when sampling."""

    repeat_count: int = Field(default=1, ge=1)
    kind: RollKind


class RollResult(BaseModel):
    """Samples drawn for one specification."""

    model_config = ConfigDict(frozen=True)

    kind: RollKind
    samples: tuple[int, ...]
    roll_sum: int

    @classmethod
    def from_samples(cls, kind: DieKind | RangeKind, samples: list[int]) -> "RollResult":
        """Build a result, deriving the sum from the samples.

        Args:
            kind: Kind of the originating specification
            samples: Samples in draw order

        Returns:
            Frozen RollResult
        """
        return cls(kind=kind, samples=tuple(samples), roll_sum=sum(samples))
