"""Tests for the benchmark helpers."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
from segtree import Min
from segtree.utils import benchmark, plot_benchmark


class TestBenchmark:
    """Timings come back per size and can be plotted."""

    def test_shapes(self):
        results = benchmark(sizes=(4, 16), n_ops=10)
        np.testing.assert_array_equal(results["sizes"], [4, 16])
        for key in ("build", "query", "update"):
            assert results[key].shape == (2,)
            assert np.all(results[key] >= 0)

    def test_custom_monoid(self):
        results = benchmark(sizes=(8,), monoid=Min, n_ops=5, seed=1)
        assert len(results["query"]) == 1

    def test_plot(self, tmp_path):
        results = benchmark(sizes=(4, 8, 16), n_ops=5)
        filename = tmp_path / "bench.png"
        plot_benchmark(results, filename=str(filename))
        assert filename.exists()

    def test_plot_single_element_size(self, tmp_path):
        """A size of one has no log-scaled reference curve to draw."""
        results = benchmark(sizes=(1, 4), n_ops=5)
        filename = tmp_path / "bench_one.png"
        plot_benchmark(results, filename=str(filename))
        assert filename.exists()
