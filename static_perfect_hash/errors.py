# ==================================================
# static_perfect_hash/errors.py
# ==================================================

class PerfectHashError(Exception):
    """Base exception for static_perfect_hash errors"""
    pass


class UnknownKeyError(PerfectHashError, KeyError):
    """Raised when a key outside the construction key set is written"""

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key {self.key!r} was not in the original key set"


class ConstructionExhaustedError(PerfectHashError, RuntimeError):
    """Raised when no collision-free parameters exist; indicates a hashing bug"""
    pass


class DuplicateRawHashError(ConstructionExhaustedError):
    """Raised when keys of one bucket share a raw hash, so no multiplier can split them"""
    pass
