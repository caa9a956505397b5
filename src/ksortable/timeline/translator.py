"""
Time Translator - reading wall-clock time back out of an identifier

The timestamp field counts units since the KSUID epoch. Translating it means
decoding the text, taking the leading 32 or 64 bits, adding the epoch back
and handing the result to the calendar.

The unit is not recorded inside an identifier: reading a millisecond KSUID
as 'second' yields a date in 2014, and reading a second KSUID as
'millisecond' yields a timestamp far beyond any calendar. Only the second
case is detectable, and it is rejected with TimestampOutOfRange.
"""

from datetime import datetime, timedelta

from ksortable.codec.identifier import parse
from ksortable.codec.models import UNIX_EPOCH, TimeUnit, layout_for
from ksortable.kernel.errors import TimestampOutOfRange

_ONE_SECOND = timedelta(seconds=1)


def to_utc(system_time: int, unit: TimeUnit | str = TimeUnit.SECOND) -> datetime:
    """
    Convert a Unix-epoch timestamp in `unit` to an aware UTC datetime

    Raises:
        TimestampOutOfRange: If the instant has no datetime representation
    """
    layout = layout_for(unit)
    try:
        return UNIX_EPOCH + system_time * layout.tick
    except OverflowError:
        raise TimestampOutOfRange(
            system_time, layout.unit.value, "not representable as a datetime"
        ) from None


def to_local(system_time: int, unit: TimeUnit | str = TimeUnit.SECOND) -> datetime:
    """
    Convert a Unix-epoch timestamp in `unit` to naive local calendar time

    Uses the host time zone rules in force at call time. Sub-second
    precision is dropped.

    Raises:
        TimestampOutOfRange: If the instant has no calendar representation
    """
    layout = layout_for(unit)
    seconds = system_time // (_ONE_SECOND // layout.tick)
    try:
        return datetime.fromtimestamp(seconds)
    except (OverflowError, OSError, ValueError):
        raise TimestampOutOfRange(
            system_time, layout.unit.value, "not representable as a calendar date"
        ) from None


def system_time(
    text: str | bytes,
    unit: TimeUnit | str = TimeUnit.SECOND,
    *,
    strict_length: bool = True,
) -> int:
    """Unix-epoch timestamp of an identifier, in `unit`"""
    return parse(text, unit, strict_length=strict_length).system_time


def utc_time(
    text: str | bytes,
    unit: TimeUnit | str = TimeUnit.SECOND,
    *,
    strict_length: bool = True,
) -> datetime:
    """Aware UTC datetime of an identifier, at the identifier's resolution"""
    decoded = parse(text, unit, strict_length=strict_length)
    return to_utc(decoded.system_time, decoded.unit)


def local_time(
    text: str | bytes,
    unit: TimeUnit | str = TimeUnit.SECOND,
    *,
    strict_length: bool = True,
) -> datetime:
    """
    Local calendar time an identifier was generated at

    Args:
        text: Encoded identifier
        unit: Resolution it was generated with ('second' or 'millisecond')
        strict_length: Require exactly 27 characters

    Returns:
        Naive local datetime, to the second

    Raises:
        DecodeError: Text is not a valid encoded identifier
        InvalidTimeUnit: Unit has no layout
        TimestampOutOfRange: Timestamp has no calendar representation
    """
    decoded = parse(text, unit, strict_length=strict_length)
    return to_local(decoded.system_time, decoded.unit)
