"""
Tests for key encoding and the ((a*x) mod p) mod m hash family
"""
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from static_perfect_hash import hash_value, raw_hash
from static_perfect_hash.hashing import FAST_MULTIPLIER_LIMIT, hash_many, index_of, key_bytes
from static_perfect_hash.primes import hash_prime


class TestKeyEncoding:

    def test_equal_numbers_encode_equally(self):
        assert key_bytes(1) == key_bytes(1.0) == key_bytes(True)
        assert key_bytes(0) == key_bytes(0.0) == key_bytes(False)
        assert key_bytes(2**70) == key_bytes(float(2**70))
        assert key_bytes(Decimal(2)) == key_bytes(2)

    def test_negative_ints(self):
        assert key_bytes(-1) == b"i\xff"
        assert key_bytes(-1) == key_bytes(-1.0)
        assert key_bytes(-1) != key_bytes(255)

    def test_integral_decimal_and_complex(self):
        """Numbers whose hash differs from their value still encode as that value"""
        assert key_bytes(Decimal(-1)) == key_bytes(-1)
        assert key_bytes(complex(-1, 0)) == key_bytes(-1)
        assert key_bytes(Fraction(6, 3)) == key_bytes(2)
        assert key_bytes(Decimal(-1)) != key_bytes(-2)

    def test_non_integral_numbers(self):
        assert key_bytes(2.5) == key_bytes(Decimal("2.5")) == key_bytes(Fraction(5, 2))
        assert key_bytes(complex(2.5, 0)) == key_bytes(2.5)
        assert key_bytes(float("inf")) == key_bytes(Decimal("Infinity"))
        assert key_bytes(1 + 2j) != key_bytes(1)

    def test_strings_and_bytes(self):
        assert key_bytes("apple") == b"sapple"
        assert key_bytes(b"\x00\x01") == b"b\x00\x01"
        assert key_bytes("a") != key_bytes(b"a")
        assert key_bytes("1") != key_bytes(1)

    def test_other_hashables(self):
        t = (1, 2)
        assert key_bytes(t) != key_bytes(hash(t))
        assert key_bytes((1, "a")) == key_bytes((1, "a"))
        assert key_bytes(frozenset({1, 2})) == key_bytes(frozenset({2, 1}))


class TestRawHash:

    def test_stable_and_in_range(self):
        for key in ["apple", b"bytes", 0, -12345, 3.5, (1, 2), None]:
            h = raw_hash(key)
            assert h == raw_hash(key)
            assert 0 <= h < 2**32

    def test_seed_changes_hash(self):
        assert raw_hash("apple", 0) != raw_hash("apple", 1)

    def test_equal_keys_share_raw_hash(self):
        assert raw_hash(7, 3) == raw_hash(7.0, 3)

    def test_large_seed_is_masked(self):
        assert raw_hash("apple", 2**32 + 5) == raw_hash("apple", 5)


class TestHashValue:

    @pytest.mark.parametrize("table_size", [1, 2, 7, 100, 4096])
    def test_index_never_negative(self, table_size):
        p = hash_prime()
        for key in [-1, -2**63, 2**64 + 3, "x", (-(2**40),)]:
            for a in [1, 2, 2**31 - 1, p - 1, 10 * p]:
                idx = hash_value(key, a, p, table_size)
                assert 0 <= idx < table_size

    def test_matches_formula(self):
        p = hash_prime()
        r = raw_hash("banana", 9)
        assert hash_value("banana", 12345, p, 17, seed=9) == ((12345 * r) % p) % 17

    @pytest.mark.parametrize("prime,table_size", [(1, 10), (0, 10), (7919, 0), (7919, -3)])
    def test_invalid_parameters(self, prime, table_size):
        with pytest.raises(ValueError):
            hash_value("k", 3, prime, table_size)


class TestHashMany:

    @pytest.mark.parametrize("a_offset", [1, 12345, FAST_MULTIPLIER_LIMIT - 1, None])
    def test_matches_scalar(self, a_offset):
        """uint64 path and exact path agree with index_of"""
        p = hash_prime()
        a = p - 1 if a_offset is None else a_offset
        raws = np.array([raw_hash(k) for k in range(50)], dtype=np.uint64)
        got = hash_many(raws, a, p, 97)
        assert got.dtype == np.int64
        assert got.tolist() == [index_of(int(r), a, p, 97) for r in raws]

    def test_empty(self):
        out = hash_many(np.array([], dtype=np.uint64), 5, hash_prime(), 3)
        assert out.size == 0
