import sys
import os

# Add the project root to the path so we can import segtree
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from segtree import Sum, Min
from segtree.utils import benchmark, plot_benchmark

def run():
    for name, monoid in (('sum', Sum), ('min', Min)):
        results = benchmark(monoid=monoid, n_ops=2000)
        for n, q, u in zip(results['sizes'], results['query'], results['update']):
            print(f"[{name}] n={n}, query: {q * 1e6:.2f}us, update: {u * 1e6:.2f}us")

        filename = f'segment_tree_{name}.png'
        plot_benchmark(results, filename=filename)
        print(f"Plot saved to {filename}")

if __name__ == "__main__":
    run()
