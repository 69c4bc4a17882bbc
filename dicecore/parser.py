"""Classifier and parser for roll tokens.

A token is either a die expression ("d20", "3d6") or a range expression
("5", "-10", "3-7", "3--7", "-3-7", "-3--7"). Range tokens are classified
purely by how many dashes they contain and where the first one sits, since
a dash is both a sign and the range separator.
"""

import re

from aws_lambda_powertools import Logger

from .exceptions import MalformedDieTokenError, MalformedNumberError, UnclassifiableRangeError
from .models import DieKind, RangeKind, RangeShape, RollSpecification

logger = Logger(child=True)

DEFAULT_LOWER_BOUND = 1
DEFAULT_UPPER_BOUND = 100

# Optional sign followed by ASCII digits, nothing else
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")
DIE_SEPARATOR_PATTERN = re.compile(r"[dD]")

MAX_REPEAT_COUNT = 255
# Bounds are 32-bit signed integers
MIN_BOUND = -(2 ** 31)
MAX_BOUND = 2 ** 31 - 1

DASH = "-"


def parse_token(token: str) -> RollSpecification:
    """Parse one raw token into a roll specification.

    Only a lowercase "d" sends the token down the die path; "3D6" is
    treated as a range and fails as a malformed number.

    Args:
        token: Raw command-line token

    Returns:
        Resolved RollSpecification

    Raises:
        MalformedNumberError: If a range segment is not an integer
        UnclassifiableRangeError: If a range token has more than 3 dashes
        MalformedDieTokenError: If a die token has a bad count or size
    """
    if "d" in token:
        return _parse_die_token(token)
    return parse_range_token(token)


def default_specification() -> RollSpecification:
    """Specification rolled when no tokens are given: 1 to 100."""
    return RollSpecification(
        lower_bound=DEFAULT_LOWER_BOUND,
        upper_bound=DEFAULT_UPPER_BOUND,
        repeat_count=1,
        kind=RangeKind(shape=RangeShape.POSITIVE),
    )


def _parse_die_token(token: str) -> RollSpecification:
    """Parse "NdM" or "dM" into a die specification.

    The token must contain a "d"; the split point is the first "d" or "D".
    An empty prefix means a single roll. The lower bound is always 1.

    Args:
        token: Die token

    Returns:
        RollSpecification with a DieKind

    Raises:
        MalformedDieTokenError: If the count or the size is not a valid integer
    """
    split_at = DIE_SEPARATOR_PATTERN.search(token).start()
    if split_at == 0:
        repeat_count = 1
    else:
        prefix = token[:split_at]
        if not UNSIGNED_PATTERN.fullmatch(prefix):
            raise MalformedDieTokenError(token, "repeat_count", f"{prefix!r} is not an unsigned integer")
        repeat_count = int(prefix)
        if repeat_count < 1:
            raise MalformedDieTokenError(token, "repeat_count", "must roll at least once")
        if repeat_count > MAX_REPEAT_COUNT:
            raise MalformedDieTokenError(token, "repeat_count", f"at most {MAX_REPEAT_COUNT} rolls")

    suffix = token[split_at + 1:]
    if not INTEGER_PATTERN.fullmatch(suffix):
        raise MalformedDieTokenError(token, "upper_bound", f"{suffix!r} is not an integer")
    upper_bound = int(suffix)
    if not MIN_BOUND <= upper_bound <= MAX_BOUND:
        raise MalformedDieTokenError(token, "upper_bound", f"{suffix!r} is out of range")

    logger.debug("Parsed die token", extra={
        "token": token,
        "repeat_count": repeat_count,
        "upper_bound": upper_bound,
    })
    return RollSpecification(
        lower_bound=1,
        upper_bound=upper_bound,
        repeat_count=repeat_count,
        kind=DieKind(label=f"{repeat_count}d{upper_bound}"),
    )


def parse_range_token(token: str) -> RollSpecification:
    """Parse a range token into a range specification.

    Args:
        token: Range token

    Returns:
        RollSpecification with a RangeKind and repeat_count 1

    Raises:
        MalformedNumberError: If either side is not an integer
        UnclassifiableRangeError: If the dash count is not 0-3
    """
    shape = detect_range_shape(token)

    if shape in (RangeShape.POSITIVE, RangeShape.NEGATIVE):
        parts = ["0", token]
    elif shape in (RangeShape.POSITIVE_TO_POSITIVE, RangeShape.POSITIVE_TO_NEGATIVE):
        parts = split_at_first_dash(token)
    else:
        parts = split_at_second_dash(token)

    lower_bound, upper_bound = parse_sorted_ints(parts)

    logger.debug("Parsed range token", extra={
        "token": token,
        "shape": shape.value,
        "lower_bound": lower_bound,
        "upper_bound": upper_bound,
    })
    return RollSpecification(
        lower_bound=lower_bound,
        upper_bound=upper_bound,
        repeat_count=1,
        kind=RangeKind(shape=shape),
    )


def dash_indices(token: str) -> list[int]:
    """Return the index of every dash in the token."""
    return [i for i, char in enumerate(token) if char == DASH]


def detect_range_shape(token: str) -> RangeShape:
    """Classify a range token by its dashes.

    - 0 dashes: positive number
    - 1 dash at index 0: negative number
    - 1 dash elsewhere: positive to positive
    - 2 dashes, first at index 0: negative to positive
    - 2 dashes, first elsewhere: positive to negative
    - 3 dashes: negative to negative

    Args:
        token: Range token

    Returns:
        The RangeShape for the token

    Raises:
        UnclassifiableRangeError: For any other dash count
    """
    dashes = dash_indices(token)
    dash_count = len(dashes)

    if dash_count == 0:
        return RangeShape.POSITIVE
    if dash_count == 1:
        return RangeShape.NEGATIVE if dashes[0] == 0 else RangeShape.POSITIVE_TO_POSITIVE
    if dash_count == 2:
        return RangeShape.NEGATIVE_TO_POSITIVE if dashes[0] == 0 else RangeShape.POSITIVE_TO_NEGATIVE
    if dash_count == 3:
        return RangeShape.NEGATIVE_TO_NEGATIVE

    logger.debug("Unclassifiable range token", extra={"token": token, "dash_count": dash_count})
    raise UnclassifiableRangeError(token, dash_count)


def split_at_first_dash(token: str) -> list[str]:
    """Split a range that starts with a positive number.

    "3-7" -> ["3", "7"], "3--7" -> ["3", "-7"].
    """
    return _split_at(token, dash_indices(token)[0])


def split_at_second_dash(token: str) -> list[str]:
    """Split a range that starts with a negative number.

    "-3-7" -> ["-3", "7"], "-3--7" -> ["-3", "-7"].
    """
    return _split_at(token, dash_indices(token)[1])


def _split_at(token: str, index: int) -> list[str]:
    # The dash at index is the separator and belongs to neither side
    return [token[:index], token[index + 1:]]


def parse_sorted_ints(parts: list[str]) -> list[int]:
    """Parse each text as a signed integer and sort ascending.

    Args:
        parts: Texts to parse

    Returns:
        Parsed integers in ascending order

    Raises:
        MalformedNumberError: On the first text that is not a 32-bit integer
    """
    parsed = []
    for text in parts:
        if not INTEGER_PATTERN.fullmatch(text):
            raise MalformedNumberError(text)
        value = int(text)
        if not MIN_BOUND <= value <= MAX_BOUND:
            raise MalformedNumberError(text)
        parsed.append(value)
    return sorted(parsed)
