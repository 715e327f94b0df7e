# --- Direction tables ---
# get_all_directions results are cached up to this dimension count
PRECOMPUTED_DIMENSIONS = 4
DIMENSION_NAMES = ("x", "y", "z", "w")

# --- Selection ---
DEFAULT_PRIM_CHANCE = 0.5

# --- CLI defaults ---
DEFAULT_SHAPE = (10, 10)
DEFAULT_ALGO = "default"
ALGO_CHOICES = ("default", "backtracker", "prim", "first", "middle")

# --- Benchmark ---
BENCHMARK_SIZE = 60
BENCHMARK_DIMENSIONS = (1, 2, 3, 4)
