"""Deterministic act map generator.

Builds a 7-column by 15-floor grid of typed nodes and links adjacent
floors into a directed acyclic graph.  The whole map comes from a single
engine stream: node types are drawn first in row-major order, then edges.
The boss sits on floor 15, outside the returned grid.
"""

from __future__ import annotations

import logging

from sts_seedmap.core.rng import PseudoRandomEngine
from sts_seedmap.core.seeds import SeedLike
from sts_seedmap.dungeon.layout import DEFAULT_LAYOUT, MapLayout
from sts_seedmap.dungeon.models import ActMap, MapNode
from sts_seedmap.dungeon.node_types import NodeTypeAssigner
from sts_seedmap.dungeon.paths import PathBuilder, link_nodes

logger = logging.getLogger(__name__)


class MapGenerator:
    """Generates act maps for a fixed grid layout."""

    def __init__(self, layout: MapLayout = DEFAULT_LAYOUT) -> None:
        self.layout = layout

    def generate(
        self,
        rng: PseudoRandomEngine,
        act: int,
        ascension_level: int,
    ) -> ActMap:
        """Generate one act map by consuming *rng*.

        Returns an immutable :class:`ActMap` whose node indices follow
        row-major grid order (floor, then column).
        """
        assigner = NodeTypeAssigner(rng, ascension_level, self.layout)

        nodes: list[MapNode] = []
        for floor in range(self.layout.floors):
            for col in range(self.layout.columns):
                node_type = assigner.assign(floor, col)
                if node_type is None:
                    continue
                nodes.append(MapNode(x=col, y=floor, type=node_type))

        edges = PathBuilder(rng).build(nodes, self.layout.floors)
        act_map = ActMap(
            act=act,
            nodes=tuple(link_nodes(nodes, edges)),
            paths=tuple(edges),
            layout=self.layout,
        )

        logger.debug(
            "Generated act %d map (seed=%s, ascension=%d): %d nodes, %d edges",
            act, rng.seed, ascension_level, len(act_map.nodes), len(act_map.paths),
        )
        return act_map


def generate_map(seed: SeedLike, act: int, ascension_level: int) -> ActMap:
    """Generate the standard act map for ``(seed, act, ascension_level)``.

    Same inputs always produce an equal :class:`ActMap`.  The act number is
    recorded on the map but does not affect the layout.
    """
    return MapGenerator().generate(PseudoRandomEngine(seed), act, ascension_level)
