import itertools
import operator

import numpy as np


class Monoid:
    """An identity element together with an associative binary operation.

    ``combine`` is never assumed to be commutative, callers always pass the
    left operand first.
    """

    def identity(self):
        raise NotImplementedError

    def combine(self, a, b):
        raise NotImplementedError

    def fold(self, values):
        acc = self.identity()
        for value in values:
            acc = self.combine(acc, value)
        return acc

# --- Stateless operations ---
# Static methods so the class itself can be handed to a tree.

class Sum(Monoid):
    @staticmethod
    def identity():
        return 0

    @staticmethod
    def combine(a, b):
        return a + b

class Product(Monoid):
    @staticmethod
    def identity():
        return 1

    @staticmethod
    def combine(a, b):
        return a * b

class Min(Monoid):
    @staticmethod
    def identity():
        return float("inf")

    @staticmethod
    def combine(a, b):
        return min(a, b)

class Max(Monoid):
    @staticmethod
    def identity():
        return float("-inf")

    @staticmethod
    def combine(a, b):
        return max(a, b)

# --- Numeric adapters ---

class _Numeric(Monoid):
    _unit = None
    _op = None

    def __init__(self, kind=int, shape=None):
        self.kind = kind
        self.shape = shape

    def identity(self):
        if self.shape is None:
            return self.kind(self._unit)
        return np.full(self.shape, self._unit, dtype=self.kind)

    def combine(self, a, b):
        # Never in-place: stored nodes may share the identity array
        return self._op(a, b)

    def __repr__(self):
        kind = getattr(self.kind, "__name__", self.kind)
        return f"{type(self).__name__}(kind={kind}, shape={self.shape})"

class Additive(_Numeric):
    """Addition over any type with a zero, or element-wise over arrays of ``shape``."""
    _unit = 0
    _op = staticmethod(operator.add)

class Multiplicative(_Numeric):
    """Multiplication over any type with a one, or element-wise over arrays of ``shape``."""
    _unit = 1
    _op = staticmethod(operator.mul)

class MatMul(Monoid):
    def __init__(self, size, dtype=float):
        self.size = size
        self.dtype = dtype

    def identity(self):
        return np.eye(self.size, dtype=self.dtype)

    def combine(self, a, b):
        return a @ b

    def __repr__(self):
        return f"MatMul(size={self.size})"

# --- Runtime operations ---

class DynamicMonoid(Monoid):
    """Monoid built from an explicit identity value and a callable ``op(a, b)``."""

    def __init__(self, identity, op):
        if not callable(op):
            raise TypeError(f"op must be callable, got {type(op).__name__}")
        self._identity = identity
        self.op = op

    def identity(self):
        return self._identity

    def combine(self, a, b):
        return self.op(a, b)

    def __repr__(self):
        return f"DynamicMonoid(identity={self._identity!r}, op={self.op!r})"


def is_lawful(monoid, samples, eq=operator.eq):
    """Check the identity and associativity laws over every combination of ``samples``."""
    samples = list(samples)
    unit = monoid.identity()
    for x in samples:
        if not (eq(monoid.combine(unit, x), x) and eq(monoid.combine(x, unit), x)):
            return False
    for a, b, c in itertools.product(samples, repeat=3):
        left = monoid.combine(monoid.combine(a, b), c)
        right = monoid.combine(a, monoid.combine(b, c))
        if not eq(left, right):
            return False
    return True
