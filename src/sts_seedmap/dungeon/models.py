"""Immutable value types for generated act maps.

An :class:`ActMap` is a pure function of ``(seed, act, ascension_level)``
and is modelled as a frozen pydantic value: two maps generated from the
same inputs compare equal, and both serialise to identical JSON.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from pydantic import BaseModel, model_validator

from sts_seedmap.dungeon.layout import DEFAULT_LAYOUT, MapLayout

BOSS_FLOOR = 15
"""Floor index of the synthetic Boss node, one past the generated grid."""


class NodeType(str, Enum):
    """Activity tag carried by every map node.

    Values are the one-character symbols used by the map legend.
    """

    MONSTER = "M"
    ELITE = "E"
    EVENT = "?"
    SHOP = "$"
    REST = "R"
    TREASURE = "T"
    BOSS = "BOSS"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"Monster"``."""
        return _LABELS[self]


_LABELS: dict[NodeType, str] = {
    NodeType.MONSTER: "Monster",
    NodeType.ELITE: "Elite",
    NodeType.EVENT: "Event",
    NodeType.SHOP: "Shop",
    NodeType.REST: "Rest",
    NodeType.TREASURE: "Treasure",
    NodeType.BOSS: "Boss",
}


class MapNode(BaseModel):
    """One traversable position in the act graph."""

    model_config = {"frozen": True}

    x: int
    """Column index (0-6)."""

    y: int
    """Floor index (0-14); floor 0 is the first floor of the act."""

    type: NodeType

    parents: tuple[int, ...] = ()
    """Indices of nodes on floor ``y - 1`` with an edge into this node."""

    children: tuple[int, ...] = ()
    """Indices of nodes on floor ``y + 1`` this node has an edge to."""


def group_by_floor(nodes: Sequence[MapNode]) -> dict[int, list[int]]:
    """Map each floor to the indices of its nodes, in index order."""
    grouped: dict[int, list[int]] = {}
    for idx, node in enumerate(nodes):
        grouped.setdefault(node.y, []).append(idx)
    return grouped


class ActMap(BaseModel):
    """A fully generated act: nodes (index = identity) plus directed edges."""

    model_config = {"frozen": True}

    act: int
    nodes: tuple[MapNode, ...]
    paths: tuple[tuple[int, int], ...]
    """Directed ``(from_index, to_index)`` edges, unique, in generation order."""
    layout: MapLayout = DEFAULT_LAYOUT
    """Grid the nodes were generated on; node types are checked against it."""

    # -- queries -------------------------------------------------------------

    @property
    def boss_floor(self) -> int:
        return self.layout.boss_floor

    @property
    def floor_count(self) -> int:
        """Number of distinct floors that hold at least one node."""
        return len({node.y for node in self.nodes})

    def nodes_by_floor(self) -> dict[int, list[int]]:
        """Group node indices by floor, preserving index order within a floor."""
        return group_by_floor(self.nodes)

    def nodes_on_floor(self, floor: int) -> list[MapNode]:
        return [node for node in self.nodes if node.y == floor]

    def count_by_type(self) -> dict[NodeType, int]:
        counts: dict[NodeType, int] = {}
        for node in self.nodes:
            counts[node.type] = counts.get(node.type, 0) + 1
        return counts

    # -- validation ----------------------------------------------------------

    @model_validator(mode="after")
    def _validate_node_types(self) -> "ActMap":
        """Nodes must sit inside the grid with the types their floor allows."""
        layout = self.layout
        fixed = {
            0: NodeType.MONSTER,
            layout.treasure_floor: NodeType.TREASURE,
            layout.rest_floor: NodeType.REST,
        }
        for idx, node in enumerate(self.nodes):
            if not (0 <= node.y < layout.floors and 0 <= node.x < layout.columns):
                raise ValueError(f"Node {idx} at ({node.x}, {node.y}) is outside the grid")
            if node.type is NodeType.BOSS:
                raise ValueError(f"Node {idx} is a boss; the boss floor is not part of the grid")
            if node.y in fixed:
                if node.type is not fixed[node.y]:
                    raise ValueError(
                        f"Node {idx} on floor {node.y} must be "
                        f"{fixed[node.y].label}, got {node.type.label}"
                    )
            elif node.y < layout.restricted_below and node.type in (
                NodeType.ELITE, NodeType.REST,
            ):
                raise ValueError(
                    f"Node {idx} on floor {node.y} cannot be {node.type.label} "
                    f"below floor {layout.restricted_below}"
                )
        return self

    @model_validator(mode="after")
    def _validate_paths(self) -> "ActMap":
        """Every edge must join existing nodes on adjacent floors, exactly once."""
        seen: set[tuple[int, int]] = set()
        n = len(self.nodes)
        for edge in self.paths:
            src, dst = edge
            if not (0 <= src < n and 0 <= dst < n):
                raise ValueError(f"Edge {edge} refers to a missing node")
            if self.nodes[dst].y != self.nodes[src].y + 1:
                raise ValueError(
                    f"Edge {edge} must go from floor f to f+1, got "
                    f"{self.nodes[src].y} -> {self.nodes[dst].y}"
                )
            if edge in seen:
                raise ValueError(f"Duplicate edge {edge}")
            seen.add(edge)
        return self
