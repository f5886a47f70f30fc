class OdometerError(Exception):
    """Base class for odometer errors."""


class InvalidFormat(OdometerError, ValueError):
    """Raised when a format string does not match the digit format grammar."""

    def __init__(self, format_string: str):
        super().__init__(f"Odometer: unparsable digit format {format_string!r}")
        self.format_string = format_string


class BadFormat(OdometerError, ValueError):
    """Raised when a repeating pattern can never place a digit."""

    def __init__(self, pattern: str):
        super().__init__(f"Bad odometer format without digits: {pattern!r}")
        self.pattern = pattern
