"""Tests for edge construction between floors."""

from sts_seedmap.core.rng import PseudoRandomEngine
from sts_seedmap.dungeon.models import MapNode, NodeType
from sts_seedmap.dungeon.paths import PathBuilder, link_nodes


def _row(y: int, xs: list[int]) -> list[MapNode]:
    return [MapNode(x=x, y=y, type=NodeType.MONSTER) for x in xs]


class TestPathBuilder:
    def test_links_to_nearest_columns(self):
        nodes = _row(0, [3]) + _row(1, [0, 3, 6])
        twin = PseudoRandomEngine(11)
        num_connections = twin.next_int(2) + 1

        edges = PathBuilder(PseudoRandomEngine(11)).build(nodes, floors=2)

        # distance ties (columns 0 and 6) keep index order
        expected = [(0, 2), (0, 1), (0, 3)][: num_connections + 1]
        assert edges == expected

    def test_slice_is_one_more_than_draw(self):
        nodes = _row(0, [0, 1, 2, 3, 4, 5, 6]) + _row(1, [0, 1, 2, 3, 4, 5, 6])
        twin = PseudoRandomEngine("links")
        expected_counts = [twin.next_int(2) + 2 for _ in range(7)]

        edges = PathBuilder(PseudoRandomEngine("links")).build(nodes, floors=2)

        per_node = [sum(1 for src, _ in edges if src == i) for i in range(7)]
        assert per_node == expected_counts

    def test_narrow_next_floor_clamps(self):
        nodes = _row(0, [1, 5]) + _row(1, [3])
        edges = PathBuilder(PseudoRandomEngine(2)).build(nodes, floors=2)
        assert edges == [(0, 2), (1, 2)]

    def test_empty_floor_is_skipped_without_drawing(self):
        nodes = _row(0, [1]) + _row(2, [1])
        rng = PseudoRandomEngine(4)
        before = rng.state
        assert PathBuilder(rng).build(nodes, floors=3) == []
        assert rng.state == before

    def test_one_draw_per_source_node(self):
        nodes = _row(0, [0, 2, 4]) + _row(1, [1, 3]) + _row(2, [2])
        rng = PseudoRandomEngine(8)
        twin = PseudoRandomEngine(8)
        PathBuilder(rng).build(nodes, floors=3)
        for _ in range(5):
            twin.next_int(2)
        assert rng.state == twin.state

    def test_edges_are_forward_and_unique(self):
        nodes = _row(0, [0, 3, 6]) + _row(1, [1, 2, 4, 5]) + _row(2, [3])
        edges = PathBuilder(PseudoRandomEngine(5)).build(nodes, floors=3)
        assert len(edges) == len(set(edges))
        for src, dst in edges:
            assert nodes[dst].y == nodes[src].y + 1


class TestLinkNodes:
    def test_fills_parents_and_children(self):
        nodes = _row(0, [0, 1]) + _row(1, [0])
        linked = link_nodes(nodes, [(0, 2), (1, 2)])
        assert linked[0].children == (2,)
        assert linked[1].children == (2,)
        assert linked[2].parents == (0, 1)
        assert linked[2].children == ()

    def test_does_not_touch_inputs(self):
        nodes = _row(0, [0]) + _row(1, [0])
        link_nodes(nodes, [(0, 1)])
        assert nodes[0].children == ()
