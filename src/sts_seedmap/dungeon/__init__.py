"""Dungeon module -- act map generation and hallway encounters."""

from sts_seedmap.dungeon.encounters import (
    EncounterSelector,
    encounter_seed_key,
    encounters_for_map,
    get_encounter_for_node,
)
from sts_seedmap.dungeon.layout import DEFAULT_LAYOUT, MapLayout
from sts_seedmap.dungeon.map_gen import MapGenerator, generate_map
from sts_seedmap.dungeon.models import BOSS_FLOOR, ActMap, MapNode, NodeType
from sts_seedmap.dungeon.node_types import NodeTypeAssigner, NodeWeights
from sts_seedmap.dungeon.paths import PathBuilder

__all__ = [
    "ActMap",
    "BOSS_FLOOR",
    "DEFAULT_LAYOUT",
    "EncounterSelector",
    "MapGenerator",
    "MapLayout",
    "MapNode",
    "NodeType",
    "NodeTypeAssigner",
    "NodeWeights",
    "PathBuilder",
    "encounter_seed_key",
    "encounters_for_map",
    "generate_map",
    "get_encounter_for_node",
]
