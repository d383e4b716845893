# ==================================================
# static_perfect_hash/hashing.py
# ==================================================
import numbers

import numpy as np
import xxhash

from .const import RAW_HASH_BITS

_SEED_MASK            = (1 << 32) - 1
FAST_MULTIPLIER_LIMIT = 1 << (64 - RAW_HASH_BITS)   # a·raw < 2**64 below this

# -- key encoding ------------------------------------------------------------

def _int_bytes(v: int, tag: bytes = b"i") -> bytes:
    return tag + v.to_bytes((v.bit_length() + 8) // 8, "little", signed=True)

def _integral_value(num) -> int | None:
    """The int equal to `num`, or None if there is none."""
    if isinstance(num, complex):
        if num.imag != 0:
            return None
        num = num.real
    try:
        v = int(num)
    except (TypeError, ValueError, ArithmeticError):
        return None
    return v if num == v else None

def key_bytes(key) -> bytes:
    """
    Canonical bytes for a key; keys that compare equal encode equally.

    A one-byte tag separates str, bytes, integral numbers (2 == 2.0 ==
    Decimal(2) == 2+0j all take "i"), other numbers and remaining hashables.
    Non-integral numbers go through hash(), which agrees across numeric types.
    """
    if isinstance(key, bytes):
        return b"b" + key
    if isinstance(key, str):
        return b"s" + key.encode("utf-8", "surrogatepass")
    if isinstance(key, numbers.Integral):
        return _int_bytes(int(key))
    if isinstance(key, numbers.Number):
        v = _integral_value(key)
        if v is not None:
            return _int_bytes(v)
        return _int_bytes(hash(key), b"n")
    return _int_bytes(hash(key), b"h")

def raw_hash(key, seed: int = 0) -> int:
    return xxhash.xxh32_intdigest(key_bytes(key), seed=seed & _SEED_MASK)

# -- the affine family ((a·x) mod p) mod m -----------------------------------

def _check(prime: int, table_size: int):
    if prime < 2:
        raise ValueError(f"modulus must be >= 2, got {prime}")
    if table_size < 1:
        raise ValueError(f"table size must be >= 1, got {table_size}")

def index_of(raw: int, a: int, prime: int, table_size: int) -> int:
    # python ints never wrap and % by a positive modulus is never negative
    return (a * raw) % prime % table_size

def hash_value(key, a: int, prime: int, table_size: int, seed: int = 0) -> int:
    _check(prime, table_size)
    return index_of(raw_hash(key, seed), a, prime, table_size)

def hash_many(raws: np.ndarray, a: int, prime: int, table_size: int) -> np.ndarray:
    """Vectorized index_of over an array of raw hashes."""
    _check(prime, table_size)
    if 0 <= a < FAST_MULTIPLIER_LIMIT:
        out = raws.astype(np.uint64) * np.uint64(a)
        out %= np.uint64(prime)
        out %= np.uint64(table_size)
        return out.astype(np.int64)
    return np.fromiter((index_of(int(r), a, prime, table_size) for r in raws),
                       dtype=np.int64, count=len(raws))
