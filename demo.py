"""
Linked Stack Demo -- LIFO walk-through, operation cost scaling, and snapshot
iteration semantics.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from stack import Stack, EmptyStackError, UnsupportedOperationError

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

SIZES = [100, 500, 1_000, 5_000, 10_000, 50_000]
REPEATS = 5

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}


def _median_seconds(fn, repeats=REPEATS):
    timings = []
    for _ in range(repeats):
        start = time.perf_counter()
        fn()
        timings.append(time.perf_counter() - start)
    return float(np.median(timings))


# ---------------------------------------------------------------------------
# Example 1: LIFO Walk-through
# ---------------------------------------------------------------------------
def example_1_lifo_walkthrough():
    """Push, peek and pop a few values and print the stack at each step."""
    print("=" * 60)
    print("Example 1: LIFO Walk-through")
    print("=" * 60)

    s = Stack()
    history = [("init", str(s), len(s))]
    for value in (1, 2, 3):
        s.push(value)
        print(f"  push({value}) -> {s}")
        history.append((f"push({value})", str(s), len(s)))

    print(f"  top() = {s.top()}")
    for _ in range(2):
        value = s.pop()
        print(f"  pop() = {value} -> {s}")
        history.append((f"pop()={value}", str(s), len(s)))

    print(f"  iterate() = {list(s.iterate())}")

    s.clear()
    history.append(("clear()", str(s), len(s)))
    try:
        s.pop()
    except EmptyStackError as exc:
        print(f"  pop() on empty stack -> EmptyStackError({exc})")
    try:
        hash(s)
    except UnsupportedOperationError as exc:
        print(f"  hash(stack) -> UnsupportedOperationError({exc})")

    fig, ax = plt.subplots(figsize=(10, 5))
    steps = np.arange(len(history))
    sizes = [h[2] for h in history]
    ax.step(steps, sizes, where="mid", color=COLORS["blue"], linewidth=2)
    ax.scatter(steps, sizes, color=COLORS["dark"], zorder=3)
    for x, (label, text, size) in zip(steps, history):
        ax.annotate(f"{label}\n{text}", (x, size), textcoords="offset points",
                    xytext=(0, 10), ha="center", fontsize=8, family="monospace")
    ax.set_xticks(steps)
    ax.set_xticklabels([h[0] for h in history], rotation=20, fontsize=8)
    ax.set_ylabel("Stack size")
    ax.set_ylim(-0.5, max(sizes) + 1.5)
    ax.set_title("Stack Size Over a Push/Pop Sequence\nThe top is always the most recent unpopped push",
                 fontsize=10, fontweight="bold")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_lifo_walkthrough.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_lifo_walkthrough.png")


# ---------------------------------------------------------------------------
# Example 2: Operation Cost Scaling
# ---------------------------------------------------------------------------
def example_2_operation_cost():
    """Time push, pop, to_list and clone for growing stack sizes."""
    print("\n" + "=" * 60)
    print("Example 2: Operation Cost Scaling")
    print("=" * 60)

    results = {"push": [], "pop": [], "to_list": [], "clone": []}
    for n in SIZES:
        values = np.random.randint(0, 1_000_000, size=n).tolist()

        def run_push():
            s = Stack()
            for v in values:
                s.push(v)

        filled = Stack()
        filled.push_all(values)

        def run_pop():
            s = filled.clone()
            while s:
                s.pop()

        clone_cost = _median_seconds(filled.clone)
        results["push"].append(_median_seconds(run_push))
        results["pop"].append(max(_median_seconds(run_pop) - clone_cost, 0.0))
        results["to_list"].append(_median_seconds(filled.to_list))
        results["clone"].append(clone_cost)

        print(f"  n={n:>6}: " + ", ".join(
            f"{name}={results[name][-1] * 1e3:7.2f} ms" for name in results))

    sizes = np.array(SIZES)
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    palette = [COLORS["blue"], COLORS["red"], COLORS["green"], COLORS["purple"]]
    for (name, timings), color in zip(results.items(), palette):
        timings = np.array(timings)
        axes[0].plot(sizes, timings * 1e3, "o-", color=color, label=name, linewidth=2)
        per_op = timings / sizes * 1e9
        axes[1].plot(sizes, per_op, "o-", color=color, label=name, linewidth=2)

    axes[0].set_xlabel("n (elements)")
    axes[0].set_ylabel("Total time (ms)")
    axes[0].set_title("Total Time vs n\nAll four operations scale linearly over n elements",
                      fontsize=10, fontweight="bold")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].set_xscale("log")
    axes[1].set_xlabel("n (elements, log scale)")
    axes[1].set_ylabel("Time per element (ns)")
    axes[1].set_title("Time per Element\nFlat lines mean O(1) per push/pop",
                      fontsize=10, fontweight="bold")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_operation_cost.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_operation_cost.png")
    return results


# ---------------------------------------------------------------------------
# Example 3: Snapshot Iteration & Clone Independence
# ---------------------------------------------------------------------------
def example_3_snapshot_semantics():
    """Show that iterators and clones are unaffected by later mutation."""
    print("\n" + "=" * 60)
    print("Example 3: Snapshot Iteration & Clone Independence")
    print("=" * 60)

    s = Stack()
    s.push("a", "b", "c")
    snapshot = s.iterate()
    clone = s.clone()
    print(f"  original: {s}, clone: {clone}, equal: {s == clone}")

    s.pop()
    s.push("z")
    clone.push("d")
    print(f"  after mutation -> original: {s}, clone: {clone}, equal: {s == clone}")
    snapshot_values = list(snapshot)
    print(f"  snapshot taken before mutation: {snapshot_values}")

    short = Stack()
    short.push("a", "b")
    print(f"  {short} == {clone}: {short == clone}")

    rows = [
        ("original", s.to_list()),
        ("clone", clone.to_list()),
        ("snapshot", snapshot_values),
    ]
    width = max(len(r[1]) for r in rows)
    fig, ax = plt.subplots(figsize=(8, 3.5))
    for row, (label, elems) in enumerate(rows):
        for col, elem in enumerate(elems):
            is_top = col == len(elems) - 1 and label != "snapshot"
            color = COLORS["orange"] if is_top else COLORS["blue"]
            ax.add_patch(plt.Rectangle((col, -row - 0.4), 0.9, 0.8, color=color, alpha=0.8))
            ax.text(col + 0.45, -row, elem, ha="center", va="center",
                    fontsize=12, color="white", fontweight="bold")
        ax.text(-0.2, -row, label, ha="right", va="center", fontsize=10)
    ax.set_xlim(-1.5, width + 0.5)
    ax.set_ylim(-len(rows) + 0.3, 0.7)
    ax.axis("off")
    ax.set_title("Insertion Order (oldest left); top highlighted in orange",
                 fontsize=10, fontweight="bold")
    fig.savefig(VIZ_DIR / "03_snapshot_semantics.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_snapshot_semantics.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Generate a PDF report from the saved visualizations."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Linked Stack", fontsize=24, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "A LIFO container on a singly-linked node chain",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "Each push prepends a node at the head of the chain, so push, pop and\n"
            "top run in constant time. Iteration walks a snapshot taken in\n"
            "insertion order, which is the reverse of pop order.\n\n"
            "This demo covers:\n"
            "  1. LIFO walk-through with error cases\n"
            "  2. Operation cost scaling\n"
            "  3. Snapshot iteration and clone independence\n\n"
            f"Benchmark sizes: {SIZES}\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_lifo_walkthrough.png": "Example 1: LIFO Walk-through",
            "02_operation_cost.png": "Example 2: Operation Cost Scaling",
            "03_snapshot_semantics.png": "Example 3: Snapshot Iteration & Clone Independence",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Linked Stack Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_lifo_walkthrough()
    example_2_operation_cost()
    example_3_snapshot_semantics()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
