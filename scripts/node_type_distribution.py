"""Sample many seeds and chart how often each node type lands on each floor.

A sanity check for the node probability tables: floors below 5 should show
no elites or rest sites, and the fixed floors should be a single colour.

Usage:
    uv run python scripts/node_type_distribution.py [--seeds N] [--ascension 20]
"""

from __future__ import annotations

import argparse
import time

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from sts_seedmap.dungeon.layout import DEFAULT_LAYOUT
from sts_seedmap.dungeon.map_gen import generate_map
from sts_seedmap.dungeon.models import NodeType

_TYPES = [
    NodeType.MONSTER,
    NodeType.ELITE,
    NodeType.EVENT,
    NodeType.SHOP,
    NodeType.REST,
    NodeType.TREASURE,
]

_COLORS = {
    NodeType.MONSTER: "#c0392b",
    NodeType.ELITE: "#8e44ad",
    NodeType.EVENT: "#2980b9",
    NodeType.SHOP: "#f1c40f",
    NodeType.REST: "#27ae60",
    NodeType.TREASURE: "#e67e22",
}


def count_types(n_seeds: int, act: int, ascension: int) -> np.ndarray:
    """Return a ``(floors, len(_TYPES))`` array of node counts."""
    counts = np.zeros((DEFAULT_LAYOUT.floors, len(_TYPES)), dtype=np.int64)
    col_of = {t: i for i, t in enumerate(_TYPES)}
    for seed in range(n_seeds):
        act_map = generate_map(seed, act, ascension)
        for node in act_map.nodes:
            counts[node.y, col_of[node.type]] += 1
    return counts


def generate_chart(freqs: np.ndarray, n_seeds: int, ascension: int, out_path: str) -> None:
    fig, ax = plt.subplots(figsize=(12, 7))
    floors = np.arange(freqs.shape[0])
    bottom = np.zeros(freqs.shape[0])
    for i, node_type in enumerate(_TYPES):
        ax.bar(
            floors + 1, freqs[:, i], bottom=bottom, label=node_type.label,
            color=_COLORS[node_type], edgecolor="black", linewidth=0.3,
        )
        bottom += freqs[:, i]
    ax.set_xlabel("Floor")
    ax.set_ylabel("Share of nodes")
    ax.set_title(f"Node types per floor, {n_seeds} seeds, ascension {ascension}")
    ax.set_xticks(floors + 1)
    ax.legend(loc="upper right")
    plt.tight_layout()
    plt.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"\nChart saved to {out_path}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Node type distribution across seeds")
    parser.add_argument("--seeds", type=int, default=2_000, help="Number of seeds to sample")
    parser.add_argument("--act", type=int, default=1, help="Act number")
    parser.add_argument("--ascension", type=int, default=20, help="Ascension level")
    parser.add_argument("--output", type=str, default="node_type_distribution.png", help="Chart path")
    args = parser.parse_args()

    print(f"Generating {args.seeds:,} maps...")
    t0 = time.perf_counter()
    counts = count_types(args.seeds, args.act, args.ascension)
    elapsed = time.perf_counter() - t0
    print(f"Done in {elapsed:.1f}s")

    freqs = counts / counts.sum(axis=1, keepdims=True)

    header = "Floor " + " ".join(f"{t.label:>9}" for t in _TYPES)
    print()
    print(header)
    for floor, row in enumerate(freqs):
        print(f"{floor + 1:>5} " + " ".join(f"{v:>9.3f}" for v in row))

    overall = counts.sum(axis=0) / counts.sum()
    print()
    for node_type, share in zip(_TYPES, overall):
        print(f"  {node_type.label:<9} {share:.3f}")

    generate_chart(freqs, args.seeds, args.ascension, args.output)


if __name__ == "__main__":
    main()
