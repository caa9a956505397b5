"""Tests for the error hierarchy"""

import pytest

from ksortable.kernel.errors import (
    DecodeError,
    InvalidArgument,
    InvalidCharacter,
    InvalidLength,
    InvalidPayload,
    InvalidTimeUnit,
    KsuidError,
    TimestampOutOfRange,
    ValueOutOfRange,
)


@pytest.mark.parametrize(
    "error,parent",
    [
        (InvalidTimeUnit("hour"), InvalidArgument),
        (InvalidPayload(16, 3), InvalidArgument),
        (InvalidCharacter("a+", "+", 1), DecodeError),
        (InvalidLength(27, 3), DecodeError),
        (ValueOutOfRange(2**160), DecodeError),
        (TimestampOutOfRange(-5, "second"), KsuidError),
    ],
)
def test_hierarchy(error: KsuidError, parent: type) -> None:
    assert isinstance(error, parent)
    assert isinstance(error, KsuidError)


def test_messages_name_the_problem() -> None:
    assert "'hour'" in str(InvalidTimeUnit("hour"))
    assert "position 1" in str(InvalidCharacter("a+", "+", 1))
    assert "before the KSUID epoch" in str(
        TimestampOutOfRange(-5, "second", "clock is before the KSUID epoch")
    )
