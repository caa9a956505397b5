"""Tests for KsuidPolicy settings"""

import pytest
from pydantic import ValidationError

from ksortable.kernel.policy import KsuidPolicy, default_policy


def test_defaults() -> None:
    assert default_policy.default_unit == "second"
    assert default_policy.strict_length is True


def test_frozen() -> None:
    policy = KsuidPolicy()
    with pytest.raises(ValidationError):
        policy.strict_length = False  # type: ignore[misc]


def test_rejects_unknown_unit() -> None:
    with pytest.raises(ValidationError):
        KsuidPolicy(default_unit="microsecond")  # type: ignore[arg-type]


def test_from_env_reads_variables() -> None:
    policy = KsuidPolicy.from_env(
        {"KSUID_DEFAULT_UNIT": " Millisecond ", "KSUID_STRICT_LENGTH": "false"}
    )
    assert policy.default_unit == "millisecond"
    assert policy.strict_length is False


def test_from_env_keeps_defaults_when_unset() -> None:
    assert KsuidPolicy.from_env({}) == KsuidPolicy()


def test_from_env_invalid_value() -> None:
    with pytest.raises(ValidationError):
        KsuidPolicy.from_env({"KSUID_STRICT_LENGTH": "sometimes"})


def test_from_env_uses_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KSUID_DEFAULT_UNIT", "millisecond")
    monkeypatch.delenv("KSUID_STRICT_LENGTH", raising=False)
    assert KsuidPolicy.from_env().default_unit == "millisecond"
