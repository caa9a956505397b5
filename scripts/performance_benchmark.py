#!/usr/bin/env python3
"""
Performance Benchmark for ksortable

Measures the hot paths of the library:

- Generation: >100K identifiers/sec at either resolution
- Decode: >100K identifiers/sec
- Time recovery: >50K local_time() calls/sec

Run:
    python scripts/performance_benchmark.py
"""

import time

from ksortable import KSUID
from ksortable.kernel.time import TestTimeProvider


def benchmark_generate(unit: str) -> dict:
    """Benchmark identifier generation"""
    print(f"\n=== Benchmark: Generate ({unit}) ===")

    ksuid = KSUID()
    count = 100_000
    start_time = time.perf_counter()

    for _ in range(count):
        ksuid.generate(unit)

    elapsed = time.perf_counter() - start_time
    per_sec = count / elapsed

    print(f"  Identifiers generated: {count}")
    print(f"  Time elapsed: {elapsed:.2f}s")
    print(f"  Identifiers/sec: {per_sec:.1f}")
    print(f"  Target: >100000/sec")
    print(f"  Status: {'✓ PASS' if per_sec > 100_000 else '✗ FAIL'}")

    return {"test": f"generate_{unit}", "per_sec": per_sec, "pass": per_sec > 100_000}


def benchmark_decode() -> dict:
    """Benchmark base62 decoding"""
    print("\n=== Benchmark: Decode ===")

    ksuid = KSUID()
    ids = [ksuid.generate() for _ in range(100_000)]

    start_time = time.perf_counter()
    for text in ids:
        ksuid.decode(text)
    elapsed = time.perf_counter() - start_time
    per_sec = len(ids) / elapsed

    print(f"  Identifiers decoded: {len(ids)}")
    print(f"  Time elapsed: {elapsed:.2f}s")
    print(f"  Identifiers/sec: {per_sec:.1f}")
    print(f"  Target: >100000/sec")
    print(f"  Status: {'✓ PASS' if per_sec > 100_000 else '✗ FAIL'}")

    return {"test": "decode", "per_sec": per_sec, "pass": per_sec > 100_000}


def benchmark_local_time() -> dict:
    """Benchmark timestamp recovery"""
    print("\n=== Benchmark: Local Time Recovery ===")

    clock = TestTimeProvider.at_unix(1_700_000_000)
    ksuid = KSUID(time_provider=clock)
    ids = []
    for _ in range(50_000):
        ids.append(ksuid.generate())
        clock.advance_seconds(1)

    start_time = time.perf_counter()
    for text in ids:
        ksuid.local_time(text)
    elapsed = time.perf_counter() - start_time
    per_sec = len(ids) / elapsed

    print(f"  Timestamps recovered: {len(ids)}")
    print(f"  Time elapsed: {elapsed:.2f}s")
    print(f"  Calls/sec: {per_sec:.1f}")
    print(f"  Target: >50000/sec")
    print(f"  Status: {'✓ PASS' if per_sec > 50_000 else '✗ FAIL'}")
    print(f"  Ordering check: {ids == sorted(ids)}")

    return {"test": "local_time", "per_sec": per_sec, "pass": per_sec > 50_000}


def main() -> None:
    """Run all benchmarks"""
    print("\n" + "="*70)
    print("  ksortable - Performance Benchmark Suite")
    print("="*70)

    results = []

    results.append(benchmark_generate("second"))
    results.append(benchmark_generate("millisecond"))
    results.append(benchmark_decode())
    results.append(benchmark_local_time())

    # Summary
    print("\n" + "="*70)
    print("  Summary")
    print("="*70)

    passed = sum(1 for r in results if r.get("pass", True))
    total = len([r for r in results if "pass" in r])

    for result in results:
        test_name = result["test"]
        status = "✓ PASS" if result.get("pass", True) else "✗ FAIL"
        print(f"  {test_name:30s} {status}")

    print(f"\n  Tests passed: {passed}/{total}")

    if passed == total:
        print("\n  ✓✓✓ All performance targets met!")
    else:
        print("\n  ⚠️ Some performance targets not met (see details above)")

    print("\n" + "="*70 + "\n")


if __name__ == "__main__":
    main()
