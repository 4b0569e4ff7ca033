"""
source.py — Input Arrays
=========================
Where the numbers come from before a tracer sees them.

    parse_array("6, 5, 8")        → [6, 5, 8]
    random_array(12, seed=7)      → 12 values, reproducible with the seed

The tracers never guess: a token that is not an integer is reported back
to the caller as InvalidInput and nothing is substituted for it.
"""

import random
from typing import List, Optional


class InvalidInput(ValueError):
    """Raised when array text cannot be turned into a list of integers."""


DEFAULT_ARRAY: List[int] = [6, 5, 8, 9, 3, 10, 15, 12, 16]

DEFAULT_RANDOM_LENGTH = 10
MAX_ARRAY_LENGTH      = 200     # every step stores a full snapshot
MAX_VALUE_RANGE       = 50


def parse_array(text: str) -> List[int]:
    """
    Parse comma-separated integers.

        "3, 1, 2"   → [3, 1, 2]
        " -4,7 "    → [-4, 7]
        "3, x"      → InvalidInput ("x")
        "1,,2"      → InvalidInput (empty token)
    """
    if text is None or not text.strip():
        raise InvalidInput("Please enter valid numbers separated by commas")

    values: List[int] = []
    for raw in text.split(","):
        token = raw.strip()
        try:
            values.append(int(token))
        except ValueError:
            raise InvalidInput(f"Invalid number: {token!r}") from None

    if len(values) > MAX_ARRAY_LENGTH:
        raise InvalidInput(f"At most {MAX_ARRAY_LENGTH} numbers are supported, got {len(values)}")
    return values


def random_array(
    length: Optional[int] = None,
    seed: Optional[int] = None,
    max_range: int = MAX_VALUE_RANGE,
) -> List[int]:
    """
    Generate `length` values (DEFAULT_RANDOM_LENGTH when 0 or None).

    A ceiling R is drawn from 1..max_range first and every value from
    1..R, so some arrays are full of duplicates and others spread out.
    """
    length = length or DEFAULT_RANDOM_LENGTH
    if length < 0 or length > MAX_ARRAY_LENGTH:
        raise InvalidInput(f"Array length must be between 1 and {MAX_ARRAY_LENGTH}, got {length}")
    if max_range < 1:
        raise InvalidInput(f"Value range must be at least 1, got {max_range}")

    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise InvalidInput(f"Seed must be an integer, got {seed!r}")

    rng = random.Random(seed)
    ceiling = rng.randint(1, max_range)
    return [rng.randint(1, ceiling) for _ in range(length)]
