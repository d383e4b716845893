# ==================================================
# examples/build_map.py
# ==================================================
import argparse, logging, time
from static_perfect_hash import PerfectHashMap

def main():
    p = argparse.ArgumentParser()
    p.add_argument("count", type=int, help="number of keys")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    keys = [f"key_{i}" for i in range(args.count)]
    start = time.perf_counter()
    phm = PerfectHashMap(keys, seed=args.seed)
    built = time.perf_counter() - start

    for i, k in enumerate(keys):
        phm.put(k, f"value_{i}")
    wrong = sum(1 for i, k in enumerate(keys) if phm.get(k) != f"value_{i}")
    if wrong:
        raise SystemExit(f"{wrong} keys read back a wrong value")

    s = phm.stats()
    print(f"built {s.size} keys in {built:.3f}s")
    print(f"  buckets   : {s.occupied_buckets}/{s.first_level_size} (max {s.max_bucket})")
    print(f"  slots     : {s.slot_count} ({s.load_factor:.2%} filled)")
    print(f"  attempts  : {s.first_level_attempts} first level, {s.reseeds} reseeds")

if __name__ == "__main__":
    main()
