"""Edge construction between adjacent floors.

For each floor, every node links to the nearest nodes (by column distance)
on the floor above.  The engine draws ``next_int(2) + 1`` per node but the
link count taken is one more than the draw, so a node gets two or three
links (fewer if the next floor is narrower).
"""

from __future__ import annotations

import logging
from typing import Sequence

from sts_seedmap.core.rng import PseudoRandomEngine
from sts_seedmap.dungeon.models import MapNode, group_by_floor

logger = logging.getLogger(__name__)

Edge = tuple[int, int]


class PathBuilder:
    """Connects each floor of a node grid to the next.

    Parameters
    ----------
    rng:
        The map's engine, continuing from where node typing left it.
    """

    def __init__(self, rng: PseudoRandomEngine) -> None:
        self.rng = rng

    def build(self, nodes: Sequence[MapNode], floors: int) -> list[Edge]:
        """Return the deduplicated edge list for *nodes*.

        Floors ``0 .. floors - 2`` are linked to the floor above.  A floor
        pair is skipped without drawing when either side is empty.
        """
        by_floor = group_by_floor(nodes)
        edges: list[Edge] = []

        for floor in range(floors - 1):
            current = by_floor.get(floor, [])
            upper = by_floor.get(floor + 1, [])
            if not current or not upper:
                continue

            for from_idx in current:
                from_x = nodes[from_idx].x
                # sorted() is stable, so ties keep index order
                nearest = sorted(upper, key=lambda idx: abs(nodes[idx].x - from_x))

                num_connections = self.rng.next_int(2) + 1
                for to_idx in nearest[: num_connections + 1]:
                    edges.append((from_idx, to_idx))

        unique = list(dict.fromkeys(edges))
        if len(unique) != len(edges):
            logger.debug("Dropped %d duplicate edges", len(edges) - len(unique))
        return unique


def link_nodes(nodes: Sequence[MapNode], edges: Sequence[Edge]) -> list[MapNode]:
    """Return copies of *nodes* with parents/children filled from *edges*.

    Edges are scanned once, in order, so adjacency lists follow edge order.
    """
    parents: list[list[int]] = [[] for _ in nodes]
    children: list[list[int]] = [[] for _ in nodes]
    for src, dst in edges:
        children[src].append(dst)
        parents[dst].append(src)

    return [
        node.model_copy(
            update={"parents": tuple(parents[i]), "children": tuple(children[i])},
        )
        for i, node in enumerate(nodes)
    ]
