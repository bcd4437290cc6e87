from .monoids import Monoid, Sum, Product, Min, Max
from .monoids import Additive, Multiplicative, MatMul, DynamicMonoid, is_lawful
