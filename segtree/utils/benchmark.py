import logging
import time

import numpy as np

from ..ops import Sum
from ..tree import SegmentTree

logger = logging.getLogger(__name__)

# --- Defaults ---
DEFAULT_SIZES = (2 ** 8, 2 ** 10, 2 ** 12, 2 ** 14)
DEFAULT_OPS = 1000


def _random_ranges(rng, n, count):
    a = rng.integers(0, n, size=count)
    b = rng.integers(0, n, size=count)
    return np.minimum(a, b), np.maximum(a, b) + 1


def benchmark(sizes=DEFAULT_SIZES, monoid=Sum, n_ops=DEFAULT_OPS, seed=0):
    """Mean wall-clock seconds per build, query and update for each tree size."""
    rng = np.random.default_rng(seed)
    results = {"sizes": np.asarray(sizes), "build": [], "query": [], "update": []}

    for n in sizes:
        data = rng.integers(0, 100, size=n).tolist()
        starts, stops = _random_ranges(rng, n, n_ops)

        t0 = time.perf_counter()
        tree = SegmentTree(data, monoid)
        results["build"].append(time.perf_counter() - t0)

        t0 = time.perf_counter()
        for a, b in zip(starts.tolist(), stops.tolist()):
            tree.query(slice(a, b))
        results["query"].append((time.perf_counter() - t0) / n_ops)

        t0 = time.perf_counter()
        for a, b in zip(starts.tolist(), stops.tolist()):
            tree.update(slice(a, b), 1)
        results["update"].append((time.perf_counter() - t0) / n_ops)

        logger.debug("n=%d build=%.6fs query=%.3gs update=%.3gs", n,
                     results["build"][-1], results["query"][-1], results["update"][-1])

    for key in ("build", "query", "update"):
        results[key] = np.asarray(results[key])
    return results
