# ==================================================
# static_perfect_hash/const.py
# ==================================================
import os

# ── tunables (env overrides are read once, at import) ─────────
DEFAULT_SEED           = int(os.getenv("SPH_SEED", "42"))
FIRST_LEVEL_ATTEMPTS   = int(os.getenv("SPH_FIRST_LEVEL_ATTEMPTS", "1000"))
SECOND_LEVEL_ATTEMPTS  = int(os.getenv("SPH_SECOND_LEVEL_ATTEMPTS", "10000"))
MAX_RESEEDS            = int(os.getenv("SPH_MAX_RESEEDS", "8"))

# ── fixed layout ──────────────────────────────────────────────
RAW_HASH_BITS      = 32               # xxh32 → every raw hash < 2**32
PRIME_FLOOR        = 1 << RAW_HASH_BITS   # modulus must exceed every raw hash
FIRST_LEVEL_LOAD   = 2                # m₁ = 2·n
BUCKET_SIZE_LIMIT  = 3                # early-exit bound for the first level
