# ==================================================
# static_perfect_hash/partition.py
# ==================================================
import logging
import math
from dataclasses import dataclass, field

import numpy as np

from .const import BUCKET_SIZE_LIMIT, FIRST_LEVEL_ATTEMPTS, FIRST_LEVEL_LOAD
from .hashing import FAST_MULTIPLIER_LIMIT, hash_many

logger = logging.getLogger(__name__)


@dataclass
class Partition:
    """Outcome of the first-level search"""
    multiplier: int
    table_size: int
    max_bucket: int
    attempts: int
    buckets: dict[int, list[int]] = field(default_factory=dict)   # bucket → key positions


def first_level_size(n: int) -> int:
    return max(1, FIRST_LEVEL_LOAD * n)


def default_threshold(n: int, table_size: int) -> int:
    return max(BUCKET_SIZE_LIMIT, math.ceil(2 * n / table_size))


def partition(raws: np.ndarray,
              table_size: int,
              prime: int,
              rng: np.random.Generator,
              max_attempts: int = FIRST_LEVEL_ATTEMPTS,
              threshold: int | None = None) -> Partition:
    """
    Pick a first-level multiplier for `raws` by randomized search.

    Every candidate is scored by its largest bucket. The search stops at the
    first candidate whose largest bucket is <= `threshold`; otherwise the best
    one seen within `max_attempts` draws is kept.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
    n = len(raws)
    if n == 0:
        return Partition(multiplier=1, table_size=table_size, max_bucket=0, attempts=0)
    if threshold is None:
        threshold = default_threshold(n, table_size)

    high = min(prime, FAST_MULTIPLIER_LIMIT)
    best_a, best_max = 1, n + 1
    for attempt in range(1, max_attempts + 1):
        a = int(rng.integers(1, high))
        counts = np.bincount(hash_many(raws, a, prime, table_size), minlength=table_size)
        largest = int(counts.max())
        if largest < best_max:
            best_a, best_max = a, largest
        if largest <= threshold:
            break
    else:
        logger.info(f"First level: no multiplier met bucket limit {threshold} "
                    f"in {max_attempts} attempts, keeping max bucket {best_max}")

    buckets: dict[int, list[int]] = {}
    for pos, slot in enumerate(hash_many(raws, best_a, prime, table_size).tolist()):
        buckets.setdefault(slot, []).append(pos)

    logger.debug(f"First level: a={best_a} m={table_size} buckets={len(buckets)} "
                 f"max_bucket={best_max} attempts={attempt}")
    return Partition(multiplier=best_a, table_size=table_size, max_bucket=best_max,
                     attempts=attempt, buckets=buckets)
