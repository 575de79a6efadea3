"""Error types raised while assembling a game configuration.

All of them derive from ValueError so callers that only care about "bad input"
can catch that, while callers that want to tell the cases apart can catch the
specific class.
"""


class BuilderError(ValueError):
    """Base class for errors raised by ConfigurationBuilder setters."""

    prefix = "Builder error"

    def __init__(self, field: str, detail: str) -> None:
        self.field = field
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class InvalidOptionSpecified(BuilderError):
    """A setter was called for a field the builder's mode does not allow."""

    prefix = "Invalid option specified"


class InvalidOptionValueSpecified(BuilderError):
    """A setter received a value that is not valid for an allowed field."""

    prefix = "Invalid option value specified"


class InvalidRangeError(ValueError):
    """A random payoff was requested for an unusable range.

    The range must be non-negative integers with min_value < max_value.
    """

    def __init__(self, min_value: int, max_value: int, detail: str | None = None) -> None:
        self.min_value = min_value
        self.max_value = max_value
        if detail is None:
            detail = "min_value must be less than max_value"
        super().__init__(f"{detail}, got min_value={min_value!r}, max_value={max_value!r}")
