"""Hallway monster encounters for map nodes.

Each lookup runs on its own engine seeded from ``"{seed}-{act}-{floor}"``,
so the encounter shown on a floor never depends on how the map itself
was generated.  Tables keep their repeated entries: a group listed twice
is twice as likely.

Note: ``ascension_level`` is accepted for interface stability but does not
change the pools yet; the real game swaps in harder groups at high
ascension.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from sts_seedmap.core.errors import EmptyInputError
from sts_seedmap.core.rng import PseudoRandomEngine
from sts_seedmap.core.seeds import SeedLike, resolve_seed
from sts_seedmap.dungeon.models import ActMap, NodeType

logger = logging.getLogger(__name__)

Encounter = tuple[str, ...]

ACT_1_ENCOUNTERS: tuple[Encounter, ...] = (
    ("Cultist",),
    ("Jaw Worm",),
    ("2x Louse",),
    ("Small Slimes",),
    ("Blue Slaver",),
    ("Looter",),
    ("Cultist", "Jaw Worm"),
    ("2x Fungi Beast",),
    ("Exordium Thugs",),
    ("Exordium Wildlife",),
    ("Red Slaver",),
    ("3x Louse",),
    ("2x Cultist",),
    ("Lots of Slimes",),
    ("Blue Slaver", "Jaw Worm"),
    ("Red Slaver", "Cultist"),
    ("3x Cultist",),
    ("Slime Gang",),
)

ACT_2_ENCOUNTERS: tuple[Encounter, ...] = (
    ("Spheric Guardian",),
    ("Chosen",),
    ("Shell Parasite",),
    ("3x Byrds",),
    ("Chosen", "Byrd"),
    ("Sentry", "Spheric Guardian"),
    ("Chosen", "Cultist"),
    ("3x Cultist",),
    ("Looter", "Mugger"),
    ("2x Thieves",),
    ("Centurion", "Mystic"),
    ("Snake Plant",),
    ("Snecko",),
    ("Fungi Beast", "Cultist"),
    ("2x Spheric Guardian",),
    ("Centurion", "Healer"),
    ("Cultist", "Chosen"),
    ("3x Byrds",),
    ("Spheric Guardian", "Chosen"),
    ("Shelled Parasite", "Fungi Beast"),
)

ACT_3_ENCOUNTERS: tuple[Encounter, ...] = (
    ("Spheric Guardian", "2x Shapes"),
    ("Jaw Worm Horde",),
    ("3x Darklings",),
    ("Orb Walker",),
    ("3x Shapes",),
    ("Spire Growth",),
    ("Transient",),
    ("4x Shapes",),
    ("Maw", "2x Jaw Worms"),
    ("Sphere Guardian", "Shape", "Exploder"),
    ("Writhing Mass",),
    ("Giant Head",),
    ("Nemesis",),
    ("Repulsor",),
    ("2x Orb Walker",),
    ("Spire Growth", "Exploder"),
    ("Jaw Worm Horde",),
    ("Darklings", "Orb Walker"),
    ("Reptomancer",),
    ("3x Exploder",),
)

_TABLES: dict[int, tuple[Encounter, ...]] = {
    1: ACT_1_ENCOUNTERS,
    2: ACT_2_ENCOUNTERS,
    3: ACT_3_ENCOUNTERS,
}


def encounter_seed_key(seed: SeedLike, act: int, floor: int) -> str:
    """Return the text seed for one floor's encounter lookup."""
    return f"{resolve_seed(seed)}-{act}-{floor}"


class EncounterSelector:
    """Picks hallway encounters from per-act tables.

    Parameters
    ----------
    tables:
        Act number to encounter list.  Acts missing from the mapping fall
        back to the highest act's table.
        Raises :class:`EmptyInputError` when the mapping is empty.
    """

    def __init__(
        self,
        tables: Mapping[int, Sequence[Encounter]] = _TABLES,
    ) -> None:
        if not tables:
            raise EmptyInputError("EncounterSelector needs at least one act table")
        self.tables = tables

    def table_for_act(self, act: int) -> Sequence[Encounter]:
        if act in self.tables:
            return self.tables[act]
        return self.tables[max(self.tables)]

    def select(
        self,
        seed: SeedLike,
        act: int,
        floor: int,
        ascension_level: int,
    ) -> list[str]:
        """Return the encounter (enemy group names) for a monster node."""
        rng = PseudoRandomEngine(encounter_seed_key(seed, act, floor))
        encounter = rng.choice(self.table_for_act(act))
        logger.debug(
            "Encounter for act %d floor %d (ascension %d): %s",
            act, floor, ascension_level, ", ".join(encounter),
        )
        return list(encounter)


_DEFAULT_SELECTOR = EncounterSelector()


def get_encounter_for_node(
    seed: SeedLike,
    act: int,
    floor: int,
    ascension_level: int,
) -> list[str]:
    """Return the deterministic encounter for ``(seed, act, floor)``."""
    return _DEFAULT_SELECTOR.select(seed, act, floor, ascension_level)


def encounters_for_map(
    seed: SeedLike,
    act_map: ActMap,
    ascension_level: int,
) -> dict[int, list[str]]:
    """Return ``{node_index: encounter}`` for every monster node of *act_map*.

    Lookups use the 1-based floor number (``y + 1``), so every monster node
    on the same floor shares an encounter.
    """
    return {
        idx: get_encounter_for_node(seed, act_map.act, node.y + 1, ascension_level)
        for idx, node in enumerate(act_map.nodes)
        if node.type is NodeType.MONSTER
    }
