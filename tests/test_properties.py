"""Randomized checks of queries and updates against a plain list."""

import operator

import numpy as np
import pytest
from segtree import SegmentTree, Sum, Min, MatMul, DynamicMonoid

SEEDS = range(5)


def random_range(rng, n):
    a, b = sorted(rng.integers(0, n + 1, size=2).tolist())
    if a == b:
        b = a + 1 if a < n else a
        a = b - 1
    return a, b


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("monoid", [Sum, Min], ids=["sum", "min"])
def test_query_matches_fold(seed, monoid):
    rng = np.random.default_rng(seed)
    n = int(rng.integers(1, 64))
    values = rng.integers(-100, 100, size=n).tolist()
    tree = SegmentTree(values, monoid)
    for _ in range(50):
        a, b = random_range(rng, n)
        assert tree.query(slice(a, b)) == monoid().fold(values[a:b])


@pytest.mark.parametrize("seed", SEEDS)
def test_matrix_product_matches_fold(seed):
    rng = np.random.default_rng(seed)
    n = int(rng.integers(1, 24))
    mats = [rng.normal(size=(3, 3)) for _ in range(n)]
    monoid = MatMul(3)
    tree = SegmentTree(mats, monoid)
    for _ in range(20):
        a, b = random_range(rng, n)
        np.testing.assert_allclose(tree.query(slice(a, b)), monoid.fold(mats[a:b]))


@pytest.mark.parametrize("seed", SEEDS)
def test_concatenation_updates(seed):
    """Interleaved updates and queries on a non-commutative monoid."""
    rng = np.random.default_rng(seed)
    n = int(rng.integers(1, 32))
    letters = "abcdefghijklmnopqrstuvwxyz"
    values = [letters[i % 26] for i in range(n)]
    monoid = DynamicMonoid("", operator.add)
    tree = SegmentTree(values, monoid)
    for step in range(30):
        a, b = random_range(rng, n)
        if step % 2:
            suffix = str(step)
            tree.update(slice(a, b), suffix)
            for i in range(a, b):
                values[i] = values[i] + suffix
        assert tree.query(slice(a, b)) == "".join(values[a:b])
    assert tree.values() == values
