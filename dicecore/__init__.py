"""Core parsing and evaluation for dashroll."""

from .config import Config
from .evaluator import evaluate
from .exceptions import (
    ConfigurationError,
    EmptyRangeError,
    MalformedDieTokenError,
    MalformedNumberError,
    RollError,
    UnclassifiableRangeError,
)
from .models import (
    DieKind,
    RangeKind,
    RangeShape,
    RollKind,
    RollResult,
    RollSpecification,
)
from .parser import default_specification, parse_token

__all__ = [
    # Config
    "Config",
    # Parsing and evaluation
    "default_specification",
    "evaluate",
    "parse_token",
    # Exceptions
    "ConfigurationError",
    "EmptyRangeError",
    "MalformedDieTokenError",
    "MalformedNumberError",
    "RollError",
    "UnclassifiableRangeError",
    # Models
    "DieKind",
    "RangeKind",
    "RangeShape",
    "RollKind",
    "RollResult",
    "RollSpecification",
]
