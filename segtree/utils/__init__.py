from .benchmark import benchmark
from .plotting import plot_benchmark
