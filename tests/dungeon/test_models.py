"""Tests for map value types."""

import pytest
from pydantic import ValidationError

from sts_seedmap.dungeon.layout import MapLayout
from sts_seedmap.dungeon.models import BOSS_FLOOR, ActMap, MapNode, NodeType


def _node(x: int, y: int, node_type: NodeType = NodeType.MONSTER) -> MapNode:
    return MapNode(x=x, y=y, type=node_type)


def _small_map(**overrides: object) -> ActMap:
    defaults = dict(
        act=1,
        nodes=(_node(0, 0), _node(2, 0), _node(1, 1, NodeType.EVENT)),
        paths=((0, 2), (1, 2)),
    )
    defaults.update(overrides)
    return ActMap(**defaults)


class TestNodeType:
    def test_symbols(self):
        assert [t.value for t in NodeType] == ["M", "E", "?", "$", "R", "T", "BOSS"]

    def test_labels(self):
        assert NodeType.MONSTER.label == "Monster"
        assert NodeType.SHOP.label == "Shop"
        assert NodeType.BOSS.label == "Boss"

    def test_lookup_by_symbol(self):
        assert NodeType("?") is NodeType.EVENT


class TestMapNode:
    def test_defaults_have_no_links(self):
        node = _node(3, 4)
        assert node.parents == ()
        assert node.children == ()

    def test_frozen(self):
        node = _node(3, 4)
        with pytest.raises(ValidationError):
            node.x = 5


class TestActMap:
    def test_nodes_by_floor(self):
        assert _small_map().nodes_by_floor() == {0: [0, 1], 1: [2]}

    def test_nodes_on_floor(self):
        assert [n.x for n in _small_map().nodes_on_floor(0)] == [0, 2]
        assert _small_map().nodes_on_floor(9) == []

    def test_floor_count(self):
        assert _small_map().floor_count == 2

    def test_count_by_type(self):
        assert _small_map().count_by_type() == {NodeType.MONSTER: 2, NodeType.EVENT: 1}

    def test_boss_floor(self):
        assert _small_map().boss_floor == BOSS_FLOOR == 15

    def test_rejects_backward_edge(self):
        with pytest.raises(ValidationError, match="floor"):
            _small_map(paths=((2, 0),))

    def test_rejects_same_floor_edge(self):
        with pytest.raises(ValidationError):
            _small_map(paths=((0, 1),))

    def test_rejects_duplicate_edge(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            _small_map(paths=((0, 2), (0, 2)))

    def test_rejects_missing_node(self):
        with pytest.raises(ValidationError, match="missing"):
            _small_map(paths=((0, 7),))

    def test_frozen(self):
        act_map = _small_map()
        with pytest.raises(ValidationError):
            act_map.act = 2

    def test_rejects_non_monster_on_first_floor(self):
        with pytest.raises(ValidationError, match="must be Monster"):
            _small_map(nodes=(_node(0, 0, NodeType.SHOP),), paths=())

    @pytest.mark.parametrize(
        "floor, expected",
        [(8, NodeType.TREASURE), (14, NodeType.REST)],
    )
    def test_rejects_wrong_type_on_fixed_floor(self, floor, expected):
        with pytest.raises(ValidationError, match=f"must be {expected.label}"):
            _small_map(nodes=(_node(0, floor, NodeType.EVENT),), paths=())

    @pytest.mark.parametrize("node_type", [NodeType.ELITE, NodeType.REST])
    def test_rejects_elite_or_rest_below_floor_5(self, node_type):
        with pytest.raises(ValidationError, match="below floor 5"):
            _small_map(nodes=(_node(0, 4, node_type),), paths=())

    def test_allows_elite_and_rest_from_floor_5(self):
        act_map = _small_map(
            nodes=(_node(0, 5, NodeType.ELITE), _node(1, 6, NodeType.REST)),
            paths=((0, 1),),
        )
        assert act_map.count_by_type() == {NodeType.ELITE: 1, NodeType.REST: 1}

    def test_rejects_boss_in_grid(self):
        with pytest.raises(ValidationError, match="boss"):
            _small_map(nodes=(_node(0, 10, NodeType.BOSS),), paths=())

    @pytest.mark.parametrize("x, y", [(7, 2), (-1, 2), (0, 15), (0, -1)])
    def test_rejects_nodes_outside_grid(self, x, y):
        with pytest.raises(ValidationError, match="outside the grid"):
            _small_map(nodes=(_node(x, y, NodeType.EVENT),), paths=())

    def test_fixed_floors_follow_layout(self):
        layout = MapLayout(floors=10, treasure_floor=4, rest_floor=9)
        act_map = _small_map(
            nodes=(_node(0, 8, NodeType.EVENT), _node(0, 4, NodeType.TREASURE)),
            paths=(),
            layout=layout,
        )
        assert act_map.boss_floor == 10
        with pytest.raises(ValidationError):
            _small_map(nodes=(_node(0, 4, NodeType.EVENT),), paths=(), layout=layout)

    def test_json_round_trip(self):
        act_map = _small_map()
        restored = ActMap.model_validate_json(act_map.model_dump_json())
        assert restored == act_map
        assert restored.nodes[2].type is NodeType.EVENT
