import copy
import logging
from typing import Any, Iterable, Iterator, List, Optional

from ..ops import Sum, Min, Max
from .ranges import normalize, is_valid

logger = logging.getLogger(__name__)


def store_size(n: int) -> int:
    """Number of heap slots addressed by a lower-biased tree over ``n`` leaves.

    Follows the right-most node of the deepest level: the left half of a span
    of ``L`` holds ``ceil(L / 2)`` leaves, and a subtree over ``L`` leaves is
    ``(L - 1).bit_length()`` levels deep.
    """
    if n <= 0:
        return 0
    p = 1
    while n > 1:
        left, right = n - n // 2, n // 2
        if (right - 1).bit_length() == (left - 1).bit_length():
            p, n = 2 * p + 1, right
        else:
            p, n = 2 * p, left
    return p


class SegmentTree:
    """Range aggregation over a fixed-length sequence under a monoid.

    Nodes live in ``store`` as a 1-based implicit heap: node ``p`` is kept at
    offset ``p - 1`` and its children are nodes ``2p`` and ``2p + 1``.

    ``update`` folds a value into every element of a range with the monoid's
    ``combine`` (it never overwrites); ``assign`` is the overwriting variant.
    """

    def __init__(self, values: Iterable[Any], monoid):
        values = list(values)
        self.monoid = monoid
        self._len = len(values)
        self.store: List[Any] = []
        if values:
            self.store = [monoid.identity()] * store_size(self._len)
            self._build(values, 0, self._len - 1, 1)
        logger.debug("built %s over %d elements (%d nodes)",
                     type(self).__name__, self._len, len(self.store))

    def _build(self, values, s, t, p):
        if s == t:
            self.store[p - 1] = copy.copy(values[s])
            return
        m = s + (t - s) // 2
        self._build(values, s, m, 2 * p)
        self._build(values, m + 1, t, 2 * p + 1)
        self._pull(p)

    def _pull(self, p):
        self.store[p - 1] = self.monoid.combine(self.store[2 * p - 1], self.store[2 * p])

    def _range(self, expr) -> Optional[range]:
        r = normalize(expr, self._len)
        if not is_valid(r, self._len):
            logger.debug("rejected range %r -> %r for length %d", expr, r, self._len)
            return None
        return r

    # --- Queries ---

    def query(self, expr=None):
        """Combine the elements covered by ``expr``, or ``None`` for an empty or out of bounds range."""
        r = self._range(expr)
        if r is None:
            return None
        return copy.copy(self._query(0, self._len - 1, r, 1))

    def _query(self, s, t, r, p):
        if r.start <= s and t < r.stop:
            return self.store[p - 1]
        m = s + (t - s) // 2
        acc = self.monoid.identity()
        if r.start <= m:
            acc = self.monoid.combine(acc, self._query(s, m, r, 2 * p))
        if r.stop > m + 1:
            acc = self.monoid.combine(acc, self._query(m + 1, t, r, 2 * p + 1))
        return acc

    # --- Modification ---

    def update(self, expr, value) -> None:
        """Replace every element ``x`` covered by ``expr`` with ``combine(x, value)``."""
        r = self._range(expr)
        if r is not None:
            self._modify(0, self._len - 1, r, 1, lambda old: self.monoid.combine(old, value))

    def assign(self, expr, value) -> None:
        """Overwrite every element covered by ``expr`` with ``value``."""
        r = self._range(expr)
        if r is not None:
            self._modify(0, self._len - 1, r, 1, lambda old: copy.copy(value))

    def _modify(self, s, t, r, p, leaf):
        if s == t:
            self.store[p - 1] = leaf(self.store[p - 1])
            return
        m = s + (t - s) // 2
        if m >= r.start:
            self._modify(s, m, r, 2 * p, leaf)
        if m + 1 < r.stop:
            self._modify(m + 1, t, r, 2 * p + 1, leaf)
        self._pull(p)

    # --- Sequence protocol ---

    def __len__(self):
        return self._len

    def __getitem__(self, idx: int):
        if not 0 <= idx < self._len:
            raise IndexError(f"index {idx} out of range for length {self._len}")
        return self.query(idx)

    def __setitem__(self, idx: int, value):
        if not 0 <= idx < self._len:
            raise IndexError(f"index {idx} out of range for length {self._len}")
        self.assign(idx, value)

    def values(self) -> List[Any]:
        out = []
        self._leaves(0, self._len - 1, 1, out)
        return out

    def _leaves(self, s, t, p, out):
        if s > t:
            return
        if s == t:
            out.append(copy.copy(self.store[p - 1]))
            return
        m = s + (t - s) // 2
        self._leaves(s, m, 2 * p, out)
        self._leaves(m + 1, t, 2 * p + 1, out)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values())

    def __repr__(self):
        return f"{type(self).__name__}({self.values()!r}, monoid={self.monoid!r})"


class SumSegmentTree(SegmentTree):
    def __init__(self, values):
        super().__init__(values, Sum)

    def sum(self, expr=None):
        return self.query(expr)

    @property
    def total(self):
        return self.query()

    def retrieve(self, upperbound) -> int:
        """Smallest index whose prefix sum exceeds ``upperbound``. Values must be non-negative."""
        if not self._len:
            raise IndexError("retrieve from an empty tree")
        if upperbound > self.total:
            upperbound = self.total - 1e-12
        s, t, p = 0, self._len - 1, 1
        while s < t:
            m = s + (t - s) // 2
            left = self.store[2 * p - 1]
            if left > upperbound:
                p, t = 2 * p, m
            else:
                upperbound -= left
                p, s = 2 * p + 1, m + 1
        return s


class MinSegmentTree(SegmentTree):
    def __init__(self, values):
        super().__init__(values, Min)

    def min(self, expr=None):
        return self.query(expr)


class MaxSegmentTree(SegmentTree):
    def __init__(self, values):
        super().__init__(values, Max)

    def max(self, expr=None):
        return self.query(expr)
