"""Exception types raised by the billing engine."""


class BillingError(Exception):
    """Base class for billing engine errors."""


class InvalidTimeFormatError(BillingError, ValueError):
    """Raised when a start or end time cannot be parsed as HH:MM.

    Attributes:
        value: The offending input
    """

    def __init__(self, value: object, message: str = "") -> None:
        self.value = value
        super().__init__(message or f"Invalid time format: {value!r} (expected HH:MM)")


class NonNumericInputError(BillingError, ValueError):
    """Raised when a rate, fee or hours value is not a finite number.

    Attributes:
        value: The offending input
    """

    def __init__(self, value: object, message: str = "") -> None:
        self.value = value
        super().__init__(message or f"Expected a number, got {value!r}")
