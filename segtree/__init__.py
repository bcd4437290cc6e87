from .ops import Monoid, Sum, Product, Min, Max
from .ops import Additive, Multiplicative, MatMul, DynamicMonoid, is_lawful
from .tree import SegmentTree, SumSegmentTree, MinSegmentTree, MaxSegmentTree
from .tree import Span, Included, Excluded, UNBOUNDED, inclusive

__version__ = "0.1.0"
