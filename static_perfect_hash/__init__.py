from .errors import (ConstructionExhaustedError, DuplicateRawHashError,
                     PerfectHashError, UnknownKeyError)
from .hashing import hash_value, raw_hash
from .perfect_map import PerfectHashMap, TableStats
from .primes import is_prime, next_prime

__version__ = "0.1.0"
__all__ = [
    "PerfectHashMap", "TableStats",
    "PerfectHashError", "UnknownKeyError",
    "ConstructionExhaustedError", "DuplicateRawHashError",
    "next_prime", "is_prime", "hash_value", "raw_hash",
]
