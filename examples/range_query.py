#!/usr/bin/env python3
"""
Range Query Demonstration - Sorting and Slicing by Time

KSUIDs sort by creation time as plain strings, so a time window over a
sorted list (or a database index) is a string range between two bounds.

Key Concepts:
1. String order of encoded identifiers is chronological order
2. minimum_encoded() and maximum_encoded() bound every identifier
3. generate_at() builds bound keys for an arbitrary instant
4. The unit used to generate an identifier must be used to read it back

Run:
    python examples/range_query.py
"""

import random
from datetime import datetime, timezone

from ksortable import KSUID
from ksortable.codec.identifier import assemble
from ksortable.codec.models import SECS_EPOCH
from ksortable.kernel.time import TestTimeProvider


def print_section(title: str) -> None:
    """Print section header"""
    print(f"\n{'='*70}")
    print(f"  {title}")
    print(f"{'='*70}\n")


def bound(ksuid: KSUID, when: datetime) -> str:
    """Lowest identifier that can be minted at `when` (all-zero payload)"""
    timestamp = int(when.timestamp()) - SECS_EPOCH
    return ksuid.encode(assemble(timestamp, bytes(16)))


def main() -> None:
    clock = TestTimeProvider(datetime(2025, 3, 1, 9, 0, 0, tzinfo=timezone.utc))
    ksuid = KSUID(time_provider=clock)

    print_section("1. Generate one identifier per hour for a day")
    ids = []
    for _ in range(24):
        ids.append(ksuid.generate())
        clock.advance_seconds(3600)
    print(f"  First: {ids[0]}  ({ksuid.utc_time(ids[0]).isoformat()})")
    print(f"  Last:  {ids[-1]}  ({ksuid.utc_time(ids[-1]).isoformat()})")

    print_section("2. Shuffle, then sort as strings")
    shuffled = ids[:]
    random.shuffle(shuffled)
    print(f"  Sorted order equals creation order: {sorted(shuffled) == ids}")

    print_section("3. Select the afternoon with two bound keys")
    start = datetime(2025, 3, 1, 13, 0, 0, tzinfo=timezone.utc)
    end = datetime(2025, 3, 1, 18, 0, 0, tzinfo=timezone.utc)
    low = bound(ksuid, start)
    high = bound(ksuid, end)
    window = [text for text in sorted(shuffled) if low <= text < high]
    for text in window:
        print(f"  {text}  {ksuid.local_time(text)}")

    print_section("4. Sentinels bound everything")
    print(f"  minimum: {ksuid.minimum_encoded()}")
    print(f"  maximum: {ksuid.maximum_encoded()}")
    print(
        "  all inside: "
        f"{all(ksuid.minimum_encoded() < t < ksuid.maximum_encoded() for t in ids)}"
    )


if __name__ == "__main__":
    main()
