#!/usr/bin/env python3
"""
Compare parsing cost of plain "Given Surname" input against complex input.

Plain two-word names take the fast path; the complex mix exercises titles,
particles, nicknames, suffixes and Unicode. The complex rate should stay within
a small constant factor of the fast-path rate.
"""

import random
import sys
import time
from pathlib import Path
from typing import List

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from human_names import consistent_with, parse  # noqa: E402

FIRST_NAMES = ["John", "Mary", "David", "Sarah", "Michael", "Lisa", "James", "Jennifer", "Robert", "Jessica"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez", "Lopez"]

COMPLEX_NAMES = [
    "Garcia, J.Q.",
    "foo@bar.com",
    "鈴木 Velasquez y Garcia, Dr. Juan Q. 'Don Juan' Xavier III",
    "MR OSCAR DE LA HOYA JR",
    "Doe, John A. Kenneth III",
    "Rt. Hon. Jane (Janie) Smith-MacDonald, PhD",
    "M.D. ANDREWS, MD",
    "José Núñez y Gómez",
]


def generate_fast_path_names(count: int) -> List[str]:
    return [f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}" for _ in range(count)]


def time_parsing(label: str, names: List[str]) -> float:
    start = time.perf_counter()
    for name in names:
        parse(name)
    elapsed = time.perf_counter() - start

    rate = len(names) / elapsed
    per_name = (elapsed / len(names)) * 1_000_000
    print(f"{label}: {len(names)} names in {elapsed:.3f}s")
    print(f"Rate: {rate:.0f} names/second ({per_name:.1f} μs/name)")
    return per_name


def time_comparisons(count: int) -> None:
    pairs = [(parse(a), parse(b)) for a, b in zip(generate_fast_path_names(count), generate_fast_path_names(count))]
    start = time.perf_counter()
    for a, b in pairs:
        consistent_with(a, b)
    elapsed = time.perf_counter() - start
    print(f"Comparisons: {count} pairs in {elapsed:.3f}s ({(elapsed / count) * 1_000_000:.1f} μs/pair)")


def main() -> None:
    random.seed(42)

    fast = time_parsing("Fast path", generate_fast_path_names(10_000))
    print()
    slow = time_parsing("Complex", COMPLEX_NAMES * 1250)
    print(f"\nComplex input costs {slow / fast:.1f}x the fast path")
    print()
    time_comparisons(10_000)


if __name__ == "__main__":
    main()
