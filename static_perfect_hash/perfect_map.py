# ==================================================
# static_perfect_hash/perfect_map.py
# ==================================================
import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass

import numpy as np

from .const import (DEFAULT_SEED, FIRST_LEVEL_ATTEMPTS, MAX_RESEEDS,
                    SECOND_LEVEL_ATTEMPTS)
from .errors import ConstructionExhaustedError, DuplicateRawHashError, UnknownKeyError
from .hashing import index_of, raw_hash
from .partition import first_level_size, partition
from .primes import hash_prime
from .second_level import SecondLevelTable

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class TableStats:
    """Shape and fill of a built map"""
    size: int
    first_level_size: int
    occupied_buckets: int
    max_bucket: int
    slot_count: int
    filled: int
    load_factor: float
    first_level_attempts: int
    reseeds: int


class PerfectHashMap:
    """
    Static two-level (FKS) perfect hash map.

    The key set is fixed when the map is built. Every key of that set owns
    exactly one value slot, reached through a first-level hash to its bucket
    and a collision-free second-level hash inside the bucket, so lookups are
    O(1) in the worst case. Values can be written and overwritten; keys can
    not be added or removed.

    Example:
        phm = PerfectHashMap({"apple", "banana"})
        phm.put("apple", 1)
        phm.get("apple")      # 1
        phm.get("banana")     # None, never written
        phm.get("kiwi")       # None, not in the key set
        phm.put("kiwi", 3)    # raises UnknownKeyError
    """

    def __init__(self,
                 keys: Iterable[Hashable],
                 seed: int = DEFAULT_SEED,
                 *,
                 first_level_attempts: int = FIRST_LEVEL_ATTEMPTS,
                 second_level_attempts: int = SECOND_LEVEL_ATTEMPTS,
                 max_reseeds: int = MAX_RESEEDS):
        """
        Args:
            keys: the key set; duplicates collapse
            seed: seeds both the raw key hashes and the multiplier search
            first_level_attempts: random draws for the bucket multiplier
            second_level_attempts: random draws per bucket before the
                exhaustive scan takes over
            max_reseeds: raw-hash seed pairs to try before giving up
        """
        if max_reseeds < 1:
            raise ValueError(f"max_reseeds must be >= 1, got {max_reseeds}")
        if second_level_attempts < 0:
            raise ValueError(f"second_level_attempts must be >= 0, got {second_level_attempts}")

        self._keys  = frozenset(keys)
        self._prime = hash_prime()
        self._seed  = seed
        self._first_level_size = first_level_size(len(self._keys))

        ordered = list(self._keys)
        rng = np.random.default_rng(seed)
        for round_ in range(max_reseeds):
            try:
                self._build(ordered, seed + 2 * round_, seed + 2 * round_ + 1,
                            rng, first_level_attempts, second_level_attempts)
            except DuplicateRawHashError as e:
                logger.info(f"Reseeding after round {round_}: {e}")
                continue
            self._reseeds = round_
            break
        else:
            raise ConstructionExhaustedError(
                f"every one of {max_reseeds} seed pairs left colliding raw hashes in a bucket")

        logger.info(f"Built perfect hash map: {len(self._keys)} keys, "
                    f"{self._first_level_size} buckets, max bucket {self._max_bucket}, "
                    f"{self._reseeds} reseeds")

    # ------------------------------------------------------------------
    def _build(self, keys, first_seed, second_seed, rng, first_attempts, second_attempts):
        first_raws  = np.fromiter((raw_hash(k, first_seed) for k in keys),
                                  dtype=np.uint64, count=len(keys))
        second_raws = np.fromiter((raw_hash(k, second_seed) for k in keys),
                                  dtype=np.uint64, count=len(keys))

        part = partition(first_raws, self._first_level_size, self._prime, rng, first_attempts)
        tables: list[SecondLevelTable | None] = [None] * part.table_size
        # sorted, so rng draws do not depend on set iteration order
        for bucket in sorted(part.buckets):
            tables[bucket] = SecondLevelTable.build(second_raws[part.buckets[bucket]],
                                                    self._prime, rng, second_attempts)

        # commit only once every bucket of the round is collision-free
        self._first_seed, self._second_seed = first_seed, second_seed
        self._multiplier = part.multiplier
        self._first_level_attempts = part.attempts
        self._max_bucket = part.max_bucket
        self._tables = tables

    def _table_for(self, key) -> SecondLevelTable:
        bucket = index_of(raw_hash(key, self._first_seed), self._multiplier,
                          self._prime, self._first_level_size)
        return self._tables[bucket]

    # ------------------------------------------------------------------
    def get(self, key, default=None):
        """Value stored for `key`; `default` if unknown or never written."""
        if key not in self._keys:
            return default
        return self._table_for(key).get(raw_hash(key, self._second_seed), default)

    def put(self, key, value) -> None:
        """Write `value` into the slot of `key`; raises UnknownKeyError outside the key set."""
        if key not in self._keys:
            raise UnknownKeyError(key)
        self._table_for(key).put(raw_hash(key, self._second_seed), value)

    def size(self) -> int:
        return len(self._keys)

    def locate(self, key) -> tuple[int, int]:
        """(bucket, slot) pair reserved for `key`."""
        if key not in self._keys:
            raise UnknownKeyError(key)
        bucket = index_of(raw_hash(key, self._first_seed), self._multiplier,
                          self._prime, self._first_level_size)
        return bucket, self._tables[bucket].slot_of(raw_hash(key, self._second_seed))

    @classmethod
    def from_mapping(cls, mapping, **kwargs) -> "PerfectHashMap":
        """Build over the keys of a mapping (or of (key, value) pairs) and store its values."""
        pairs = list(mapping.items() if isinstance(mapping, Mapping) else mapping)
        phm = cls((k for k, _ in pairs), **kwargs)
        phm.update(pairs)
        return phm

    def update(self, other) -> None:
        for key, value in (other.items() if isinstance(other, Mapping) else other):
            self.put(key, value)

    def keys(self) -> frozenset:
        return self._keys

    def items(self) -> Iterator[tuple]:
        """(key, value) for every key that has been written."""
        for key in self._keys:
            value = self.get(key, _MISSING)
            if value is not _MISSING:
                yield key, value

    def stats(self) -> TableStats:
        tables = [t for t in self._tables if t is not None]
        slot_count = sum(len(t) for t in tables)
        filled = sum(t.occupied() for t in tables)
        return TableStats(
            size=len(self._keys),
            first_level_size=self._first_level_size,
            occupied_buckets=len(tables),
            max_bucket=self._max_bucket,
            slot_count=slot_count,
            filled=filled,
            load_factor=filled / slot_count if slot_count else 0.0,
            first_level_attempts=self._first_level_attempts,
            reseeds=self._reseeds,
        )

    # Dict-like interface

    def __getitem__(self, key):
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key, value):
        self.put(key, value)

    def __contains__(self, key) -> bool:
        return key in self._keys

    def __iter__(self) -> Iterator:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return (f"PerfectHashMap(size={len(self._keys)}, "
                f"first_level_size={self._first_level_size}, seed={self._seed})")
