"""
Pytest configuration and shared fixtures

Fun fact: The name "conftest" comes from pytest's configuration testing
framework. Files named conftest.py are automatically discovered and their
fixtures are available to all tests in the same directory and subdirectories!
"""

import pytest

from ksortable.codec.identifier import KsuidGenerator
from ksortable.kernel.entropy import FixedRandomSource
from ksortable.kernel.policy import KsuidPolicy
from ksortable.kernel.time import TestTimeProvider
from ksortable.ksuid import KSUID

# 2023-11-14 22:13:20 UTC - a round number of seconds that is easy to eyeball
KNOWN_UNIX_SECONDS = 1_700_000_000


@pytest.fixture
def test_time() -> TestTimeProvider:
    """Provide a clock frozen at KNOWN_UNIX_SECONDS"""
    return TestTimeProvider.at_unix(KNOWN_UNIX_SECONDS)


@pytest.fixture
def fixed_entropy() -> FixedRandomSource:
    """Provide a random source whose every byte is 0xAB"""
    return FixedRandomSource(b"\xab")


@pytest.fixture
def generator(test_time: TestTimeProvider, fixed_entropy: FixedRandomSource) -> KsuidGenerator:
    """Provide a generator with pinned time and entropy"""
    return KsuidGenerator(time_provider=test_time, random_source=fixed_entropy)


@pytest.fixture
def ksuid(test_time: TestTimeProvider, fixed_entropy: FixedRandomSource) -> KSUID:
    """Provide a façade with pinned time and entropy and the default policy"""
    return KSUID(time_provider=test_time, random_source=fixed_entropy)


@pytest.fixture
def lax_policy() -> KsuidPolicy:
    """Policy that accepts encoded identifiers of any length"""
    return KsuidPolicy(strict_length=False)
