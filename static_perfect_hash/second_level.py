# ==================================================
# static_perfect_hash/second_level.py
# ==================================================
import logging

import numpy as np

from .const import SECOND_LEVEL_ATTEMPTS
from .errors import ConstructionExhaustedError, DuplicateRawHashError
from .hashing import FAST_MULTIPLIER_LIMIT, hash_many, index_of

logger = logging.getLogger(__name__)

_EMPTY = object()


def table_size_for(bucket_size: int) -> int:
    # b² slots leave room for a collision-free multiplier; +1 keeps b=0/1 sane
    return bucket_size * bucket_size + 1


def _collision_free(raws: np.ndarray, a: int, prime: int, table_size: int) -> bool:
    return np.unique(hash_many(raws, a, prime, table_size)).size == len(raws)


def find_multiplier(raws: np.ndarray,
                    table_size: int,
                    prime: int,
                    rng: np.random.Generator,
                    max_attempts: int = SECOND_LEVEL_ATTEMPTS) -> tuple[int, int]:
    """
    Return ``(a, attempts)`` such that ``((a*raw) % prime) % table_size`` is
    distinct for every raw hash in `raws`.

    Random multipliers are tried first. When `max_attempts` draws all collide
    the search falls back to scanning ``a = 1 .. prime-1`` in order, which
    always succeeds for distinct raws below `prime` and ``table_size >= b*b``.
    """
    b = len(raws)
    if table_size < b:
        raise ValueError(f"table of {table_size} slots cannot hold {b} keys")
    distinct = np.unique(raws).size
    if distinct < b:
        raise DuplicateRawHashError(f"{b - distinct} duplicate raw hashes in a bucket of {b}")
    if b <= 1:
        return 1, 0

    high = min(prime, FAST_MULTIPLIER_LIMIT)
    for attempt in range(1, max_attempts + 1):
        a = int(rng.integers(1, high))
        if _collision_free(raws, a, prime, table_size):
            return a, attempt

    logger.debug(f"Second level: {max_attempts} random multipliers collided "
                 f"for a bucket of {b}, scanning exhaustively")
    for a in range(1, prime):
        if _collision_free(raws, a, prime, table_size):
            return a, max_attempts + a
    raise ConstructionExhaustedError(
        f"no collision-free multiplier for a bucket of {b} in a table of {table_size}")


class SecondLevelTable:
    """Value slots for one first-level bucket, addressed without collisions."""

    __slots__ = ("_multiplier", "_size", "_prime", "_slots", "attempts")

    def __init__(self, multiplier: int, size: int, prime: int, attempts: int = 0):
        self._multiplier = multiplier
        self._size       = size
        self._prime      = prime
        self._slots      = [_EMPTY] * size
        self.attempts    = attempts

    @classmethod
    def build(cls, raws, prime: int, rng: np.random.Generator,
              max_attempts: int = SECOND_LEVEL_ATTEMPTS) -> "SecondLevelTable":
        raws = np.asarray(raws, dtype=np.uint64)
        size = table_size_for(len(raws))
        a, attempts = find_multiplier(raws, size, prime, rng, max_attempts)
        return cls(a, size, prime, attempts)

    @property
    def multiplier(self) -> int:
        return self._multiplier

    @property
    def size(self) -> int:
        return self._size

    # ------------------------------------------------------------------
    def slot_of(self, raw: int) -> int:
        return index_of(raw, self._multiplier, self._prime, self._size)

    def get(self, raw: int, default=None):
        value = self._slots[self.slot_of(raw)]
        return default if value is _EMPTY else value

    def put(self, raw: int, value):
        self._slots[self.slot_of(raw)] = value

    def is_set(self, raw: int) -> bool:
        return self._slots[self.slot_of(raw)] is not _EMPTY

    def occupied(self) -> int:
        return sum(1 for v in self._slots if v is not _EMPTY)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SecondLevelTable(multiplier={self._multiplier}, size={self._size})"
