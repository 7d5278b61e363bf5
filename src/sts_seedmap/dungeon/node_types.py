"""Per-cell node type assignment.

Fixed floors:
- Floor 0: always monster
- Treasure floor (8): always treasure
- Rest floor (14): always rest site
- Boss floor (15): boss, synthesised outside the grid

Every other floor rolls one float against a cumulative table walked in the
order monster, elite, event, shop, rest.  Below the restricted floor (5)
elite and rest weights are handed to the other types instead.
"""

from __future__ import annotations

from pydantic import BaseModel

from sts_seedmap.core.rng import PseudoRandomEngine
from sts_seedmap.dungeon.layout import DEFAULT_LAYOUT, MapLayout
from sts_seedmap.dungeon.models import NodeType


class NodeWeights(BaseModel):
    """Probability of each rollable node type."""

    model_config = {"frozen": True}

    monster: float
    elite: float
    event: float
    shop: float
    rest: float

    def restricted(self) -> NodeWeights:
        """Return weights with elite and rest redistributed away.

        The elite weight is cut into four shares (two to monster, one each
        to event and shop), then the rest weight into three (one each to
        monster, event and shop).  The additions happen in exactly this
        order so the float sums match the reference tables.
        """
        monster, event, shop = self.monster, self.event, self.shop

        elite_share = self.elite / 4
        monster += elite_share * 2
        event += elite_share
        shop += elite_share

        rest_share = self.rest / 3
        monster += rest_share
        event += rest_share
        shop += rest_share

        return NodeWeights(monster=monster, elite=0, event=event, shop=shop, rest=0)

    def pick(self, roll: float) -> NodeType:
        """Walk the cumulative table; rest is the catch-all last bucket."""
        cumulative = 0.0
        for node_type, weight in (
            (NodeType.MONSTER, self.monster),
            (NodeType.ELITE, self.elite),
            (NodeType.EVENT, self.event),
            (NodeType.SHOP, self.shop),
        ):
            cumulative += weight
            if roll < cumulative:
                return node_type
        return NodeType.REST


WEIGHTS_HIGH_ASCENSION = NodeWeights(
    monster=0.53, elite=0.08, event=0.20, shop=0.12, rest=0.07,
)
WEIGHTS_LOW_ASCENSION = NodeWeights(
    monster=0.55, elite=0.07, event=0.22, shop=0.10, rest=0.06,
)


class NodeTypeAssigner:
    """Decides the node type of each grid cell.

    Parameters
    ----------
    rng:
        The map's engine.  One float is drawn per cell on non-fixed floors.
    ascension_level:
        Selects the weight table.
    layout:
        Grid dimensions and fixed-floor positions.
    """

    def __init__(
        self,
        rng: PseudoRandomEngine,
        ascension_level: int,
        layout: MapLayout = DEFAULT_LAYOUT,
    ) -> None:
        self.rng = rng
        self.layout = layout
        base = (
            WEIGHTS_HIGH_ASCENSION
            if ascension_level >= layout.ascension_threshold
            else WEIGHTS_LOW_ASCENSION
        )
        self._weights = base
        self._restricted_weights = base.restricted()

    def weights_for_floor(self, floor: int) -> NodeWeights:
        if floor < self.layout.restricted_below:
            return self._restricted_weights
        return self._weights

    def assign(self, floor: int, column: int) -> NodeType | None:
        """Return the type for cell ``(floor, column)``, or ``None`` for no node.

        *column* does not influence the result; cells are visited in
        row-major order so that draws line up with the reference stream.
        """
        if floor < 0 or floor > self.layout.boss_floor:
            return None
        if floor == 0:
            return NodeType.MONSTER
        if floor == self.layout.treasure_floor:
            return NodeType.TREASURE
        if floor == self.layout.rest_floor:
            return NodeType.REST
        if floor == self.layout.boss_floor:
            return NodeType.BOSS

        roll = self.rng.next_float()
        return self.weights_for_floor(floor).pick(roll)
