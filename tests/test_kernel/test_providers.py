"""Tests for the injectable clock and entropy sources"""

from datetime import datetime, timezone

import pytest

from ksortable.kernel.entropy import (
    FixedRandomSource,
    SecretsRandomSource,
    default_random_source,
)
from ksortable.kernel.time import RealTimeProvider, TestTimeProvider


class TestTimeProviders:
    def test_real_time_is_aware_utc(self) -> None:
        now = RealTimeProvider().now()
        assert now.tzinfo is timezone.utc

    def test_at_unix(self) -> None:
        clock = TestTimeProvider.at_unix(1_700_000_000)
        assert clock.now() == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_time_is_frozen(self) -> None:
        clock = TestTimeProvider()
        assert clock.now() == clock.now()

    def test_advance(self) -> None:
        clock = TestTimeProvider(datetime(2025, 1, 1, tzinfo=timezone.utc))
        clock.advance_seconds(90)
        clock.advance_milliseconds(250)
        assert clock.now() == datetime(2025, 1, 1, 0, 1, 30, 250000, tzinfo=timezone.utc)

    def test_set_time(self) -> None:
        clock = TestTimeProvider()
        target = datetime(2030, 6, 1, tzinfo=timezone.utc)
        clock.set_time(target)
        assert clock.now() == target


class TestRandomSources:
    @pytest.mark.parametrize("size", [0, 12, 16])
    def test_secrets_source_length(self, size: int) -> None:
        assert len(SecretsRandomSource().token_bytes(size)) == size

    def test_default_is_secrets(self) -> None:
        assert isinstance(default_random_source, SecretsRandomSource)

    def test_fixed_source_repeats_pattern(self) -> None:
        source = FixedRandomSource(b"\x01\x02\x03")
        assert source.token_bytes(7) == b"\x01\x02\x03\x01\x02\x03\x01"
        assert source.calls == [7]

    def test_fixed_source_requires_pattern(self) -> None:
        with pytest.raises(ValueError):
            FixedRandomSource(b"")
