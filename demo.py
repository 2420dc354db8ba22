"""
AVL Tree Demo -- Rotation cases, height growth against the AVL bound, and
deletion-driven rebalancing, with the plain BST as a baseline.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import random
import sys
from pathlib import Path

_root = str(Path(__file__).resolve().parent)
if _root not in sys.path:
    sys.path.insert(0, _root)

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from balanced_tree.avl_tree import AVLTree
from balanced_tree.binary_search_tree import BinarySearchTree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "gray": "#95a5a6",
    "dark": "#2c3e50",
}

ROTATION_CASES = [
    ("Right-right: single left rotation", [10, 20, 30]),
    ("Left-left: single right rotation", [30, 20, 10]),
    ("Left-right: double rotation", [30, 10, 20]),
    ("Right-left: double rotation", [10, 30, 20]),
]


def avl_height_bound(n):
    """Worst-case AVL height (leaf = 0) for n keys."""
    return 1.44 * np.log2(np.asarray(n, dtype=float) + 2) - 0.33


def draw_tree(ax, root, title):
    """Draw a tree rooted at ``root``; x is the in-order rank, y the depth."""
    positions = {}
    edges = []

    def place(node, depth, rank):
        if node is None:
            return rank
        rank = place(node.left, depth + 1, rank)
        positions[id(node)] = (rank, -depth, node)
        rank += 1
        rank = place(node.right, depth + 1, rank)
        for child in (node.left, node.right):
            if child is not None:
                edges.append((id(node), id(child)))
        return rank

    place(root, 0, 0)

    for parent, child in edges:
        x0, y0, _ = positions[parent]
        x1, y1, _ = positions[child]
        ax.plot([x0, x1], [y0, y1], "-", color=COLORS["gray"], linewidth=1.5, zorder=1)

    for x, y, node in positions.values():
        bf = getattr(node, "balance_factor", 0)
        color = COLORS["green"] if abs(bf) <= 1 else COLORS["red"]
        ax.scatter([x], [y], s=900, color=color, edgecolor="white", zorder=2)
        ax.text(x, y, str(node.key), ha="center", va="center", fontsize=10,
                fontweight="bold", color="white", zorder=3)
        if hasattr(node, "balance_factor"):
            ax.text(x, y - 0.32, f"h={node.height} bf={bf}", ha="center",
                    va="top", fontsize=7, color=COLORS["dark"])

    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.set_xlim(-1, max(len(positions), 1))
    ax.set_ylim(min([y for _, y, _ in positions.values()] + [0]) - 1, 0.7)
    ax.axis("off")


# ---------------------------------------------------------------------------
# Example 1: Rotation Cases
# ---------------------------------------------------------------------------
def example_1_rotation_cases():
    """Insert three keys in each of the four imbalanced orders."""
    print("=" * 60)
    print("Example 1: Rotation Cases")
    print("=" * 60)

    fig, axes = plt.subplots(2, 4, figsize=(18, 8))

    for col, (name, keys) in enumerate(ROTATION_CASES):
        plain = BinarySearchTree(keys)
        tree = AVLTree(keys)
        root = tree.root

        print(f"\n  {name}")
        print(f"    Insert order: {keys}")
        print(f"    Plain BST height: {plain.height()}, level order: {plain.level_order()}")
        print(f"    AVL height:       {tree.height()}, level order: {tree.level_order()}")
        assert root.key == 20 and tree.is_balanced()

        draw_tree(axes[0, col], plain.root, f"Plain BST\n{keys}")
        draw_tree(axes[1, col], root, f"AVL\n{name}")

    fig.suptitle("AVL Tree: The Four Rotation Cases\nEvery order ends with root 20",
                 fontsize=14, fontweight="bold", y=1.0)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_rotation_cases.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_rotation_cases.png")


# ---------------------------------------------------------------------------
# Example 2: Height Growth
# ---------------------------------------------------------------------------
def example_2_height_growth():
    """Tree height for sorted and shuffled inserts against the AVL bound."""
    print("\n" + "=" * 60)
    print("Example 2: Height Growth")
    print("=" * 60)

    sizes = np.arange(1, 513)
    rng = random.Random(SEED)
    shuffled = list(range(sizes[-1]))
    rng.shuffle(shuffled)

    avl_sorted, avl_shuffled = AVLTree(), AVLTree()
    bst_sorted, bst_shuffled = BinarySearchTree(), BinarySearchTree()
    heights = {"avl_sorted": [], "avl_shuffled": [], "bst_sorted": [], "bst_shuffled": []}

    for i in range(sizes[-1]):
        avl_sorted.insert(i)
        avl_shuffled.insert(shuffled[i])
        bst_sorted.insert(i)
        bst_shuffled.insert(shuffled[i])
        heights["avl_sorted"].append(avl_sorted.height())
        heights["avl_shuffled"].append(avl_shuffled.height())
        heights["bst_sorted"].append(bst_sorted.height())
        heights["bst_shuffled"].append(bst_shuffled.height())

    bound = avl_height_bound(sizes)
    assert np.all(np.array(heights["avl_sorted"]) <= bound)
    assert np.all(np.array(heights["avl_shuffled"]) <= bound)

    print(f"\n  {'Keys':>8} {'AVL sorted':>12} {'AVL shuffled':>14} {'BST shuffled':>14} {'Bound':>8}")
    print(f"  {'-'*60}")
    for n in (8, 32, 128, 512):
        print(f"  {n:>8} {heights['avl_sorted'][n - 1]:>12} {heights['avl_shuffled'][n - 1]:>14}"
              f" {heights['bst_shuffled'][n - 1]:>14} {bound[n - 1]:>8.2f}")
    print(f"\n  Plain BST height after {sizes[-1]} sorted inserts: {heights['bst_sorted'][-1]}")

    fig, axes = plt.subplots(1, 2, figsize=(16, 6))

    axes[0].plot(sizes, heights["bst_sorted"], "-", color=COLORS["red"], linewidth=2,
                 label="Plain BST (sorted)")
    axes[0].plot(sizes, heights["avl_sorted"], "-", color=COLORS["green"], linewidth=2,
                 label="AVL (sorted)")
    axes[0].set_xlabel("Keys inserted")
    axes[0].set_ylabel("Height")
    axes[0].set_title("Sorted Inserts\nPlain BST degenerates into a list",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(sizes, heights["bst_shuffled"], "-", color=COLORS["orange"], linewidth=1.5,
                 label="Plain BST (shuffled)")
    axes[1].plot(sizes, heights["avl_shuffled"], "-", color=COLORS["blue"], linewidth=1.5,
                 label="AVL (shuffled)")
    axes[1].plot(sizes, heights["avl_sorted"], "-", color=COLORS["green"], linewidth=1.5,
                 label="AVL (sorted)")
    axes[1].plot(sizes, bound, "--", color=COLORS["dark"], linewidth=1.5,
                 label=r"$1.44 \log_2(n+2) - 0.33$")
    axes[1].plot(sizes, np.floor(np.log2(sizes)), ":", color=COLORS["purple"], linewidth=1.5,
                 label=r"$\lfloor \log_2 n \rfloor$ (perfect)")
    axes[1].set_xlabel("Keys inserted")
    axes[1].set_ylabel("Height")
    axes[1].set_title("AVL Height Stays Under the Bound\nRegardless of insertion order",
                      fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_height_growth.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_height_growth.png")


# ---------------------------------------------------------------------------
# Example 3: Deletion and Rebalancing
# ---------------------------------------------------------------------------
def example_3_deletion():
    """Remove keys one at a time and watch the tree repair itself."""
    print("\n" + "=" * 60)
    print("Example 3: Deletion and Rebalancing")
    print("=" * 60)

    keys = [50, 30, 70, 20, 40, 60, 80]
    tree = AVLTree(keys)
    before = tree.copy()

    removed = tree.remove(50)
    print(f"\n  Built from {keys}")
    print(f"  remove(50) -> {removed}; successor {tree.root.key} is the new root")
    print(f"  In order: {tree.in_order()}, size: {tree.size()}")
    assert tree.root.key == 60 and tree.is_balanced()

    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    draw_tree(axes[0], before.root, f"Before: {keys}")
    draw_tree(axes[1], tree.root, "After remove(50)\nTwo children: successor 60 moves up")

    rng = random.Random(SEED)
    big = AVLTree(range(256))
    order = big.in_order()
    rng.shuffle(order)
    sizes, heights = [], []
    for key in order:
        big.remove(key)
        assert big.is_balanced()
        sizes.append(big.size())
        heights.append(big.height())
    bounds = avl_height_bound(sizes)
    print(f"\n  Removed {len(order)} keys in random order; balance held after every call")

    axes[2].step(sizes, heights, "-", color=COLORS["blue"], linewidth=1.5, where="post",
                 label="AVL height")
    axes[2].plot(sizes, bounds, "--", color=COLORS["dark"], linewidth=1.5, label="AVL bound")
    axes[2].invert_xaxis()
    axes[2].set_xlabel("Keys remaining")
    axes[2].set_ylabel("Height")
    axes[2].set_title("Height While Draining 256 Keys\nShrinks with log n",
                      fontsize=10, fontweight="bold")
    axes[2].legend(fontsize=9)
    axes[2].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_deletion.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_deletion.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Bundle the visualizations into a single PDF."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "AVL Tree", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Height-Balanced Search in O(log n)",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "An AVL tree stores a height and a balance factor in every node.\n"
            "After each insert or remove, the ancestors on the search path are\n"
            "refreshed bottom-up and at most one rotation per node restores\n"
            "|balance factor| <= 1, which keeps the height logarithmic.\n\n"
            "This demo covers:\n"
            "  1. The four rotation cases (LL, RR, LR, RL)\n"
            "  2. Height growth against the AVL bound\n"
            "  3. Deletion and successor splicing\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.30, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_rotation_cases.png": "Example 1: Rotation Cases",
            "02_height_growth.png": "Example 2: Height Growth",
            "03_deletion.png": "Example 3: Deletion and Rebalancing",
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
    print("AVL Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_rotation_cases()
    example_2_height_growth()
    example_3_deletion()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
