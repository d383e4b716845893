# ==================================================
# examples/benchmark.py
# ==================================================
"""
Lookup latency of PerfectHashMap against dict.

Keys follow one of three distributions (SEQUENTIAL, RANDOM, ZIPFIAN); the
lookup stream is 75% hits and 25% misses, shuffled with a fixed seed.
"""
import argparse, logging, time

import numpy as np

from static_perfect_hash import PerfectHashMap

DISTRIBUTIONS = ("SEQUENTIAL", "RANDOM", "ZIPFIAN")
INT_MAX = 2**31 - 1
HIT_RATIO = 0.75

def _distinct_ints(rng: np.random.Generator, size: int) -> list[int]:
    out: set[int] = set()
    while len(out) < size:
        out.update(rng.integers(0, INT_MAX, size - len(out)).tolist())
    return list(out)

def generate_keys(distribution: str, size: int, seed: int = 42) -> list[int]:
    rng = np.random.default_rng(seed)
    if distribution == "SEQUENTIAL":
        return sorted(_distinct_ints(rng, size))
    if distribution == "RANDOM":
        return _distinct_ints(rng, size)
    if distribution == "ZIPFIAN":
        # a dense 0..size-1 range in shuffled order
        return rng.permutation(size).tolist()
    raise ValueError(f"Unknown distribution: {distribution}")

def generate_lookups(keys: list[int], count: int, seed: int = 42) -> list[int]:
    rng = np.random.default_rng(seed)
    hits = int(count * HIT_RATIO)
    lookups = [keys[i] for i in rng.integers(0, len(keys), hits).tolist()]
    known = set(keys)
    while len(lookups) < count:
        k = int(rng.integers(0, INT_MAX))
        if k not in known:
            lookups.append(k)
    rng.shuffle(lookups)
    return lookups

def _time_lookups(get, lookups) -> float:
    for k in lookups:        # warmup
        get(k)
    start = time.perf_counter()
    for k in lookups:
        get(k)
    return (time.perf_counter() - start) / len(lookups) * 1e9

def run(distribution: str, size: int, lookups: int) -> dict[str, float]:
    keys = generate_keys(distribution, size)
    stream = generate_lookups(keys, lookups)

    plain = {k: f"value-{k}" for k in keys}
    phm = PerfectHashMap.from_mapping(plain)
    return {"dict": _time_lookups(plain.get, stream),
            "perfect": _time_lookups(phm.get, stream)}

def main():
    p = argparse.ArgumentParser()
    p.add_argument("--sizes", type=int, nargs="+", default=[1000, 10000, 100000])
    p.add_argument("--distributions", nargs="+", choices=DISTRIBUTIONS, default=list(DISTRIBUTIONS))
    p.add_argument("--lookups", type=int, default=1_000_000)
    args = p.parse_args()
    logging.basicConfig(level=logging.WARNING)

    print(f"{'distribution':<12} {'size':>8} {'dict ns/op':>12} {'perfect ns/op':>14}")
    for dist in args.distributions:
        for size in args.sizes:
            r = run(dist, size, args.lookups)
            print(f"{dist:<12} {size:>8} {r['dict']:>12.1f} {r['perfect']:>14.1f}")

if __name__ == "__main__":
    main()
