"""Deterministic act map and encounter generation for Slay the Spire seeds.

Two pure entry points make up the public surface:

- :func:`generate_map` -- ``(seed, act, ascension_level)`` to an :class:`ActMap`
- :func:`get_encounter_for_node` -- ``(seed, act, floor, ascension_level)`` to
  the list of enemy group names fought on that floor
"""

from sts_seedmap.core import (
    EmptyInputError,
    InvalidArgumentError,
    NumericSeed,
    PseudoRandomEngine,
    TextualSeed,
)
from sts_seedmap.dungeon import (
    ActMap,
    MapNode,
    NodeType,
    encounters_for_map,
    generate_map,
    get_encounter_for_node,
)

__version__ = "0.1.0"

__all__ = [
    "ActMap",
    "EmptyInputError",
    "InvalidArgumentError",
    "MapNode",
    "NodeType",
    "NumericSeed",
    "PseudoRandomEngine",
    "TextualSeed",
    "encounters_for_map",
    "generate_map",
    "get_encounter_for_node",
]
