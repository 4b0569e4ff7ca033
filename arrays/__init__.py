"""
arrays/
-------
Input layer.  Public API:

    from arrays import parse_array, random_array, InvalidInput
"""

from arrays.source import (
    InvalidInput,
    parse_array,
    random_array,
    DEFAULT_ARRAY,
    DEFAULT_RANDOM_LENGTH,
    MAX_ARRAY_LENGTH,
)

__all__ = [
    "InvalidInput",
    "parse_array",
    "random_array",
    "DEFAULT_ARRAY",
    "DEFAULT_RANDOM_LENGTH",
    "MAX_ARRAY_LENGTH",
]
