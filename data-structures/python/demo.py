"""
AlwaysResizeQueue Demo -- capacity traces for growth, shrink, ping-pong and
random workloads, plus the amortized copy cost of recentering.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- All figures in one PDF
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from always_resize_queue import AlwaysResizeQueue

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


class CountingQueue(AlwaysResizeQueue):
    """Counts element copies made by every recenter."""

    def __init__(self):
        super().__init__()
        self.copies = 0
        self.resizes = 0

    def _resize(self):
        self.copies += self.size()
        self.resizes += 1
        super()._resize()


def trace(ops):
    """Replay ops (True = enqueue, False = dequeue) and record the state after each.

    Returns (sizes, capacities, cumulative_copies) as int arrays.
    """
    q = CountingQueue()
    sizes = np.zeros(len(ops), dtype=int)
    caps = np.zeros(len(ops), dtype=int)
    copies = np.zeros(len(ops), dtype=int)
    for i, op in enumerate(ops):
        if op:
            q.enqueue(i)
        elif not q.is_empty():
            q.dequeue()
        sizes[i] = q.size()
        caps[i] = q.capacity()
        copies[i] = q.copies
    return sizes, caps, copies


def plot_trace(ax, sizes, caps, title):
    steps = np.arange(1, len(sizes) + 1)
    ax.step(steps, caps, where="post", color=COLORS["red"], label="capacity()")
    ax.plot(steps, sizes, color=COLORS["blue"], label="size()")
    ax.fill_between(steps, caps // AlwaysResizeQueue.SHRINK_RATIO, color=COLORS["orange"],
                    alpha=0.15, step="post", label="shrink threshold (cap / 4)")
    ax.set_xlabel("Operation")
    ax.set_ylabel("Slots")
    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.legend(fontsize=8)
    ax.grid(True, alpha=0.3)


# ---------------------------------------------------------------------------
# Example 1: Burst then drain
# ---------------------------------------------------------------------------
def example_1_burst_then_drain():
    print("=" * 60)
    print("Example 1: Burst then drain")
    print("=" * 60)

    n = 200
    ops = [True] * n + [False] * n
    sizes, caps, copies = trace(ops)

    distinct = [int(c) for i, c in enumerate(caps) if i == 0 or c != caps[i - 1]]
    print(f"  Capacity sequence: {distinct}")
    print(f"  Peak capacity: {caps.max()} for {n} items")
    print(f"  Capacity after drain: {caps[-1]}")
    print(f"  Total element copies: {copies[-1]} ({copies[-1] / len(ops):.2f} per op)")

    fig, ax = plt.subplots(figsize=(10, 5))
    plot_trace(ax, sizes, caps, f"Burst of {n} enqueues, then full drain")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_burst_then_drain.png", dpi=120)
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 2: Ping-pong
# ---------------------------------------------------------------------------
def example_2_ping_pong():
    print("\n" + "=" * 60)
    print("Example 2: Enqueue/dequeue ping-pong")
    print("=" * 60)

    ops = [True, False] * 1000
    sizes, caps, copies = trace(ops)

    assert caps.max() <= AlwaysResizeQueue.INITIAL_CAPACITY, "capacity grew under ping-pong"
    print(f"  Max capacity over {len(ops)} ops: {caps.max()}")
    print(f"  Total element copies: {copies[-1]}")

    fig, ax = plt.subplots(figsize=(10, 4))
    plot_trace(ax, sizes[:60], caps[:60], "Single item in, single item out (first 60 ops)")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_ping_pong.png", dpi=120)
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 3: Random workloads
# ---------------------------------------------------------------------------
def example_3_random_workloads():
    print("\n" + "=" * 60)
    print("Example 3: Random workloads")
    print("=" * 60)

    n_ops = 5000
    probabilities = [0.4, 0.5, 0.6]
    fig, axes = plt.subplots(1, len(probabilities), figsize=(18, 5))

    for ax, p in zip(axes, probabilities):
        np.random.seed(SEED)
        ops = (np.random.rand(n_ops) < p).tolist()
        sizes, caps, copies = trace(ops)
        nonzero = sizes > 0
        occupancy = (sizes[nonzero] / caps[nonzero]).mean() if nonzero.any() else 0.0
        print(f"  p(enqueue)={p}: final size {sizes[-1]}, peak capacity {caps.max()}, "
              f"mean occupancy {occupancy:.2f}, copies/op {copies[-1] / n_ops:.2f}")
        plot_trace(ax, sizes, caps, f"p(enqueue) = {p}")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_random_workloads.png", dpi=120)
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 4: Amortized copy cost
# ---------------------------------------------------------------------------
def example_4_amortized_cost():
    print("\n" + "=" * 60)
    print("Example 4: Amortized copy cost")
    print("=" * 60)

    ns = np.array([10, 100, 1000, 10000])
    per_op = []
    for n in ns:
        _, _, copies = trace([True] * n + [False] * n)
        per_op.append(copies[-1] / (2 * n))
        print(f"  n={n:>6}: {copies[-1]:>7} copies, {per_op[-1]:.3f} per op")

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.semilogx(ns, per_op, "o-", color=COLORS["green"])
    ax.set_xlabel("Items enqueued then dequeued (n)")
    ax.set_ylabel("Element copies per operation")
    ax.set_title("Copies per operation stay bounded\nAmortized O(1)", fontsize=10, fontweight="bold")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_amortized_cost.png", dpi=120)
    plt.close(fig)


def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF report")
    print("=" * 60)

    viz_files = sorted(VIZ_DIR.glob("*.png"))
    report_path = Path(__file__).parent / "report.pdf"
    with PdfPages(report_path) as pdf:
        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            fig.suptitle(viz_file.stem.replace("_", " ").title(), fontsize=14,
                         fontweight="bold", y=0.98)
            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files)} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("AlwaysResizeQueue Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print(f"Initial capacity: {AlwaysResizeQueue.INITIAL_CAPACITY}, "
          f"shrink floor: {AlwaysResizeQueue.SHRINK_FLOOR}, "
          f"shrink ratio: 1/{AlwaysResizeQueue.SHRINK_RATIO}")
    print()

    example_1_burst_then_drain()
    example_2_ping_pong()
    example_3_random_workloads()
    example_4_amortized_cost()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print("=" * 60)


if __name__ == "__main__":
    main()
