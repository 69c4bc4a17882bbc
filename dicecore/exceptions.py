"""Custom exceptions for dashroll."""


class RollError(Exception):
    """Base exception for all roll errors."""

    def __init__(self, message: str = "Unable to roll") -> None:
        """Initialize exception with message.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(self.message)


class MalformedNumberError(RollError):
    """A segment expected to be an integer could not be parsed."""

    def __init__(self, text: str) -> None:
        """Initialize malformed number error.

        Args:
            text: The segment that failed to parse
        """
        self.text = text
        super().__init__(f"Not an integer! {text!r}")


class UnclassifiableRangeError(RollError):
    """Range token has a dash count outside 0-3."""

    def __init__(self, token: str, dash_count: int) -> None:
        """Initialize unclassifiable range error.

        Args:
            token: The offending token
            dash_count: Number of dashes found in the token
        """
        self.token = token
        self.dash_count = dash_count
        super().__init__(
            f"Unable to determine roll type for {token!r} ({dash_count} dashes)"
        )


class MalformedDieTokenError(RollError):
    """Die token is missing a valid repeat count or upper bound."""

    def __init__(self, token: str, part: str, reason: str | None = None) -> None:
        """Initialize malformed die token error.

        Args:
            token: The offending die token
            part: Which part failed ("repeat_count" or "upper_bound")
            reason: Optional detail appended to the message
        """
        self.token = token
        self.part = part
        message = f"Malformed die token {token!r}: invalid {part}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class EmptyRangeError(RollError):
    """Specification has no integers between its bounds."""

    def __init__(self, lower_bound: int, upper_bound: int) -> None:
        """Initialize empty range error.

        Args:
            lower_bound: Inclusive lower bound
            upper_bound: Exclusive upper bound
        """
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        super().__init__(f"Empty roll range [{lower_bound}, {upper_bound})")


class ConfigurationError(RollError):
    """Configuration or environment error."""

    def __init__(self, message: str, config_key: str | None = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            config_key: Optional configuration key that caused the error
        """
        self.config_key = config_key
        super().__init__(message)
