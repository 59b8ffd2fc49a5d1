import time

# ────────────────────────────────
# Time Helpers
# ────────────────────────────────


def now() -> float:
    return time.perf_counter()


def clock_ns() -> int:
    return time.time_ns()
