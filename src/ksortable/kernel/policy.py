"""
Ksuid Policy - Settings that govern generation and decoding

The policy picks the default resolution and decides how strictly encoded
identifiers are checked on the way in. It is a plain validated value: pass
one to the KSUID façade or a generator, or use the module default.
"""

import os
from typing import Any, Literal

from pydantic import BaseModel, Field

ENV_DEFAULT_UNIT = "KSUID_DEFAULT_UNIT"
ENV_STRICT_LENGTH = "KSUID_STRICT_LENGTH"


class KsuidPolicy(BaseModel):
    """
    Generation and decoding settings

    The defaults reproduce the classic KSUID behaviour: one-second
    resolution and exactly 27 characters on decode.
    """

    default_unit: Literal["second", "millisecond"] = Field(
        default="second",
        description="Resolution used when generate() is called without a unit",
    )

    strict_length: bool = Field(
        default=True,
        description="Reject encoded identifiers that are not exactly 27 characters",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "description": "Settings for KSUID generation and decoding"
        },
    }

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "KsuidPolicy":
        """
        Build a policy from environment variables

        Reads KSUID_DEFAULT_UNIT and KSUID_STRICT_LENGTH; unset variables
        keep their defaults.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Validated policy

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        if env.get(ENV_DEFAULT_UNIT):
            values["default_unit"] = env[ENV_DEFAULT_UNIT].strip().lower()
        if env.get(ENV_STRICT_LENGTH):
            values["strict_length"] = env[ENV_STRICT_LENGTH].strip()
        return cls(**values)


# Default global policy instance
default_policy = KsuidPolicy()
