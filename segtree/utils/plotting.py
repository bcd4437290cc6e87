import matplotlib.pyplot as plt
import numpy as np

def plot_benchmark(results, filename='segment_tree_benchmark.png'):
    sizes = np.asarray(results['sizes'])

    plt.figure(figsize=(12, 5))

    plt.subplot(1, 2, 1)
    plt.plot(sizes, results['build'], marker='o', label='Build')
    plt.xscale('log', base=2)
    plt.xlabel('Elements')
    plt.ylabel('Seconds')
    plt.title('Construction')
    plt.legend()

    plt.subplot(1, 2, 2)
    plt.plot(sizes, np.asarray(results['query']) * 1e6, marker='o', label='Query')
    plt.plot(sizes, np.asarray(results['update']) * 1e6, marker='o', label='Update')
    # Reference O(log n) curve scaled to the first query timing, log2(1) == 0
    if sizes[0] >= 2:
        reference = np.log2(sizes) / np.log2(sizes[0]) * results['query'][0] * 1e6
        plt.plot(sizes, reference, linestyle='--', label='log n')
    plt.xscale('log', base=2)
    plt.xlabel('Elements')
    plt.ylabel('Microseconds per operation')
    plt.title('Range operations')
    plt.legend()

    plt.tight_layout()
    plt.savefig(filename)
    plt.close()
