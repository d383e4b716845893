# ==================================================
# static_perfect_hash/primes.py
# ==================================================
from functools import lru_cache

from .const import PRIME_FLOOR


def is_prime(n: int) -> bool:
    """Trial division over the 6k±1 wheel."""
    if n <= 3:
        return n >= 2
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def next_prime(n: int) -> int:
    """Smallest prime >= n."""
    if n <= 2:
        return 2
    if n % 2 == 0:
        n += 1
    while not is_prime(n):
        n += 2
    return n


@lru_cache(maxsize=None)
def hash_prime() -> int:
    # shared by every map in the process; strictly above any raw hash
    return next_prime(PRIME_FLOOR)
