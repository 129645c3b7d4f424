import time


def perf_counter() -> float:
    return time.perf_counter()


def perf_counter_elapsed(started_at: float) -> float:
    return max(0.0, perf_counter() - started_at)
