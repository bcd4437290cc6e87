from .ranges import Span, Included, Excluded, UNBOUNDED, inclusive, normalize, is_valid
from .segment_tree import SegmentTree, SumSegmentTree, MinSegmentTree, MaxSegmentTree, store_size
