"""Tests for the module-level convenience API"""

import time
from datetime import datetime

import pytest

import ksortable


def test_generate_default_is_second() -> None:
    before = int(time.time())
    text = ksortable.generate()
    after = int(time.time())

    assert len(text) == 27
    assert before <= ksortable.parse(text).system_time <= after


def test_generate_millisecond() -> None:
    text = ksortable.generate("millisecond")
    assert len(text) == 27
    assert ksortable.parse(text, "millisecond").system_time > 1_700_000_000_000


def test_generate_rejects_other_units() -> None:
    with pytest.raises(ksortable.InvalidArgument):
        ksortable.generate("microsecond")


def test_minimum_encoded() -> None:
    assert ksortable.minimum_encoded() == "000000000000000000000000000"
    assert ksortable.decode(ksortable.minimum_encoded()) == 0


def test_minimum_sorts_before_generated() -> None:
    ids = [ksortable.generate(), ksortable.generate("millisecond"), ksortable.generate_min()]
    assert all(ksortable.minimum_encoded() < text for text in ids)
    assert all(text < ksortable.maximum_encoded() for text in ids)


def test_local_time_is_recent() -> None:
    text = ksortable.generate()
    recovered = ksortable.local_time(text)
    assert abs((datetime.now() - recovered).total_seconds()) < 5


def test_utc_time_is_aware() -> None:
    assert ksortable.utc_time(ksortable.generate()).tzinfo is not None


def test_decode_error() -> None:
    with pytest.raises(ksortable.DecodeError):
        ksortable.local_time("+" * 27)


def test_encode_round_trip() -> None:
    value = 2**159 + 12345
    assert ksortable.decode(ksortable.encode(value)) == value


def test_errors_share_a_base() -> None:
    assert issubclass(ksortable.InvalidTimeUnit, ksortable.KsuidError)
    assert issubclass(ksortable.DecodeError, ksortable.KsuidError)
    assert issubclass(ksortable.TimestampOutOfRange, ksortable.KsuidError)
