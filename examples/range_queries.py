import sys
import os

import numpy as np

# Add the project root to the path so we can import segtree
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from segtree import SegmentTree, SumSegmentTree, MatMul, DynamicMonoid, inclusive

def main():
    tree = SumSegmentTree([10, 11, 12, 13, 14])
    print(f"store: {tree.store}")
    print(f"sum[1..=3] = {tree.sum(inclusive(1, 3))}")
    tree.update(..., 3)
    print(f"after adding 3 everywhere: {tree.values()}, total {tree.total}")
    print(f"out of bounds query: {tree.query(slice(0, 99))}")

    # Rotations do not commute, order of the product matters
    def rotation(theta):
        c, s = np.cos(theta), np.sin(theta)
        return np.array([[c, -s], [s, c]])
    rotations = SegmentTree([rotation(np.pi / k) for k in range(1, 7)], MatMul(2))
    print(f"composed rotation over [2, 5):\n{rotations.query(slice(2, 5))}")

    words = SegmentTree(list("segment"), DynamicMonoid("", lambda a, b: a + b))
    print(f"concatenation over [3, 7): {words.query(range(3, 7))}")

if __name__ == "__main__":
    main()
