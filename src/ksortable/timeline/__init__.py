"""
Timeline - converting identifier timestamps into calendar time
"""

from ksortable.timeline.translator import (
    local_time,
    system_time,
    to_local,
    to_utc,
    utc_time,
)

__all__ = [
    "local_time",
    "system_time",
    "to_local",
    "to_utc",
    "utc_time",
]
