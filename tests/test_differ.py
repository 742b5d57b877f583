"""Tests for GraphDiffer."""

from netgraph.differ import GraphDiffer
from netgraph.graph import NetGraph
from netgraph.models import Action, NodeObject, RandomActionFactory
from netgraph.randomness import SupplierOfRandomness
from netgraph.store import DiGraphStore


def _make_graph(count: int, edges: list[tuple[int, int, float]]) -> NetGraph:
    nodes = [NodeObject(id=i) for i in range(count)]
    actions = [
        Action(from_node=nodes[u], to_node=nodes[v], from_id=u, to_id=v, cost=cost)
        for u, v, cost in edges
    ]
    rnd = SupplierOfRandomness(seed=3)
    return NetGraph(
        DiGraphStore.from_components(nodes, actions),
        nodes[0],
        randomness=rnd,
        action_factory=RandomActionFactory(rnd),
    )


def test_identical_graphs_no_changes():
    g1 = _make_graph(3, [(0, 1, 1.0)])
    g2 = _make_graph(3, [(0, 1, 1.0)])

    diff = GraphDiffer().diff(g1, g2)

    assert diff.has_changes is False
    assert diff.total_changes == 0


def test_added_node_detected():
    g1 = _make_graph(2, [])
    g2 = _make_graph(3, [])

    diff = GraphDiffer().diff(g1, g2)

    assert len(diff.node_changes) == 1
    assert diff.node_changes[0].node_id == 2
    assert diff.node_changes[0].change_type == "added"


def test_removed_edge_detected():
    g1 = _make_graph(2, [(0, 1, 1.0)])
    g2 = _make_graph(2, [])

    diff = GraphDiffer().diff(g1, g2)

    assert len(diff.removed_edges) == 1
    assert diff.removed_edges[0].cost_before == 1.0


def test_modified_cost_detected():
    g1 = _make_graph(2, [(0, 1, 1.0)])
    g2 = _make_graph(2, [(0, 1, 2.0)])

    diff = GraphDiffer().diff(g1, g2)

    assert len(diff.edge_changes) == 1
    assert diff.edge_changes[0].change_type == "modified"
    assert diff.edge_changes[0].cost_after == 2.0


def test_repair_edges_show_up_as_added():
    graph = _make_graph(5, [(0, 1, 1.0)])
    before = graph.copy()
    graph.force_reachability(edge_probability=0.0)

    diff = GraphDiffer().diff(before, graph)

    assert diff.node_changes == []
    assert len(diff.added_edges) == 3
    assert all(c.source != c.target for c in diff.added_edges)
    assert diff.removed_edges == []
