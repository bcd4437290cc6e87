"""Range expressions accepted by :class:`SegmentTree` and their normalization.

Every expression is reduced to a half-open ``range(start, end)`` over the
logical index domain before the tree is touched::

    None / ...            ->  0 .. length
    slice(a, b), range    ->  a .. b         (slice sides may be None)
    i                     ->  i ..= i
    inclusive(a, b)       ->  a ..= b
    Span(start, end)      ->  explicit Included / Excluded / UNBOUNDED bounds
"""
import numbers
from typing import NamedTuple, Optional


class Included(NamedTuple):
    value: int

class Excluded(NamedTuple):
    value: int

class _Unbounded:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNBOUNDED"

UNBOUNDED = _Unbounded()


class Span(NamedTuple):
    start: object = UNBOUNDED
    end: object = UNBOUNDED


def inclusive(start: Optional[int], end: int) -> Span:
    """``start..=end``; a ``None`` start is unbounded."""
    return Span(UNBOUNDED if start is None else Included(start), Included(end))


def _index(value) -> int:
    # bool is an Integral but never an index
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"range bounds must be integers, got {type(value).__name__}")
    return int(value)


def _start(bound) -> int:
    if bound is UNBOUNDED:
        return 0
    if isinstance(bound, Included):
        return _index(bound.value)
    if isinstance(bound, Excluded):
        return _index(bound.value) + 1
    raise TypeError(f"unsupported start bound {bound!r}")


def _end(bound, length: int) -> int:
    if bound is UNBOUNDED:
        return length
    if isinstance(bound, Included):
        return _index(bound.value) + 1
    if isinstance(bound, Excluded):
        return _index(bound.value)
    raise TypeError(f"unsupported end bound {bound!r}")


def to_span(expr) -> Span:
    if expr is None or expr is Ellipsis:
        return Span()
    if isinstance(expr, Span):
        return expr
    if isinstance(expr, slice):
        if expr.step not in (None, 1):
            raise ValueError("stepped slices are not contiguous ranges")
        start = UNBOUNDED if expr.start is None else Included(expr.start)
        end = UNBOUNDED if expr.stop is None else Excluded(expr.stop)
        return Span(start, end)
    if isinstance(expr, range):
        if expr.step != 1:
            raise ValueError("stepped ranges are not contiguous ranges")
        return Span(Included(expr.start), Excluded(expr.stop))
    if isinstance(expr, numbers.Integral) and not isinstance(expr, bool):
        return Span(Included(expr), Included(expr))
    raise TypeError(f"unsupported range expression {expr!r}")


def normalize(expr, length: int) -> range:
    """Reduce ``expr`` to a half-open range over ``0..length``.

    The result is not validated, see :func:`is_valid`.
    """
    span = to_span(expr)
    return range(_start(span.start), _end(span.end, length))


def is_valid(r: range, length: int) -> bool:
    return len(r) > 0 and r.start >= 0 and r.stop <= length
