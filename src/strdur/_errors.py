"""Exception hierarchy for duration parsing and encoding."""


class DurationError(ValueError):
    """Base exception for duration errors.

    Provides dual messaging: a user-facing message and internal details
    for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidDurationError(DurationError):
    """Raised when text does not match the duration grammar."""


class InvalidByteLengthError(DurationError):
    """Raised when a binary encoding is not exactly 8 bytes long."""


class Int64OverflowError(DurationError):
    """Raised when a value does not fit in a signed 64-bit integer."""


class DecodeError(DurationError):
    """Raised when a structured decoder cannot assign a field."""


def quote(s: str) -> str:
    """Double-quote a string for inclusion in an error message."""
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


def invalid_duration(orig: str) -> InvalidDurationError:
    return InvalidDurationError(f"invalid duration {quote(orig)}")


def missing_unit(orig: str) -> InvalidDurationError:
    return InvalidDurationError(f"missing unit in duration {quote(orig)}")


def unknown_unit(unit: str, orig: str) -> InvalidDurationError:
    return InvalidDurationError(
        f"unknown unit {quote(unit)} in duration {quote(orig)}"
    )
