"""
Custom exceptions for ksortable

A small, precise error hierarchy: callers can catch KsuidError for anything
this library raises, or narrow down to the decode or argument family.

Fun fact: the base62 alphabet has no room for punctuation, so a single '+'
anywhere in a 27-character string is enough to make it not a KSUID!
"""


class KsuidError(Exception):
    """Base exception for all ksortable errors"""

    pass


class InvalidArgument(KsuidError):
    """Base class for errors caused by a bad argument value"""

    pass


class InvalidTimeUnit(InvalidArgument):
    """Raised when a time unit has no identifier layout"""

    def __init__(self, unit: object) -> None:
        self.unit = unit
        super().__init__(
            f"Unsupported time unit {unit!r} - expected 'second' or 'millisecond'"
        )


class InvalidPayload(InvalidArgument):
    """Raised when a payload does not fill the bits left by the timestamp"""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Payload must be {expected} bytes, got {actual}")


class DecodeError(KsuidError):
    """Base class for errors raised while decoding an identifier"""

    pass


class InvalidCharacter(DecodeError):
    """Raised when text contains a character outside the base62 alphabet"""

    def __init__(self, text: str, char: str, position: int) -> None:
        self.text = text
        self.char = char
        self.position = position
        super().__init__(
            f"Invalid base62 character {char!r} at position {position} in {text!r}"
        )


class InvalidLength(DecodeError):
    """Raised when an encoded or binary identifier has the wrong length"""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected length {expected}, got {actual}")


class ValueOutOfRange(DecodeError):
    """Raised when a value does not fit in 160 bits"""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Value {value} does not fit in 160 unsigned bits")


class TimestampOutOfRange(KsuidError):
    """
    Raised when a timestamp cannot be represented

    Covers clocks set before the custom epoch, timestamps wider than their
    field, and decoded timestamps with no calendar representation (usually an
    identifier read back with a different unit than it was generated with).
    """

    def __init__(self, timestamp: int, unit: str, reason: str = "") -> None:
        self.timestamp = timestamp
        self.unit = unit
        super().__init__(
            f"Timestamp {timestamp} ({unit}) out of range"
            + (f" - {reason}" if reason else "")
        )
