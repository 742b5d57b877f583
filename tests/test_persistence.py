"""Tests for loading persisted graph snapshots."""

import operator
import os
import pickle

import pytest

from netgraph.graph import NetGraph
from netgraph.models import Action, NodeObject
from netgraph.persistence import load_graph, partition_components


def _components() -> list:
    a, b, c = NodeObject(id=0), NodeObject(id=1), NodeObject(id=2)
    return [
        b,
        Action(from_node=a, to_node=b, from_id=0, to_id=1, cost=1.0),
        a,
        Action(from_node=b, to_node=c, from_id=1, to_id=2, cost=2.5),
        c,
    ]


@pytest.fixture
def snapshot_dir(tmp_path) -> str:
    with open(tmp_path / "graph.ser", "wb") as fh:
        pickle.dump(_components(), fh)
    return f"{tmp_path}{os.sep}"


def test_partition_keeps_order():
    nodes, edges = partition_components(_components())
    assert [n.id for n in nodes] == [1, 0, 2]
    assert [(e.from_id, e.to_id) for e in edges] == [(0, 1), (1, 2)]


def test_partition_ignores_unknown_records():
    nodes, edges = partition_components([NodeObject(id=0), "junk", 42])
    assert len(nodes) == 1
    assert edges == []


def test_load_graph(snapshot_dir):
    graph = load_graph("graph.ser", snapshot_dir)

    assert isinstance(graph, NetGraph)
    assert graph.total_nodes() == 3
    assert graph.total_edges() == 2
    assert graph.init_state == NodeObject(id=0)
    assert graph.distances()[NodeObject(id=2)] == 3.5


def test_netgraph_load(snapshot_dir):
    graph = NetGraph.load("graph.ser", snapshot_dir)
    assert graph is not None
    assert graph.unreachable_nodes() == (set(), 0)


def test_load_uses_configured_directory(snapshot_dir, monkeypatch):
    from netgraph.config import clear_settings_cache

    monkeypatch.setenv("NETGRAPH_OUTPUT_DIRECTORY", snapshot_dir)
    clear_settings_cache()
    try:
        assert load_graph("graph.ser") is not None
    finally:
        clear_settings_cache()


def test_missing_file_returns_none(tmp_path):
    assert load_graph("nope.ser", f"{tmp_path}{os.sep}") is None


def test_corrupt_file_returns_none(tmp_path):
    (tmp_path / "bad.ser").write_bytes(b"definitely not a pickle")
    assert load_graph("bad.ser", f"{tmp_path}{os.sep}") is None


def test_truncated_file_returns_none(tmp_path):
    data = pickle.dumps(_components())
    (tmp_path / "short.ser").write_bytes(data[: len(data) // 2])
    assert load_graph("short.ser", f"{tmp_path}{os.sep}") is None


def test_non_list_payload_returns_none(tmp_path):
    (tmp_path / "dict.ser").write_bytes(pickle.dumps({"nodes": []}))
    assert load_graph("dict.ser", f"{tmp_path}{os.sep}") is None


def test_empty_snapshot_returns_none(tmp_path):
    (tmp_path / "empty.ser").write_bytes(pickle.dumps([]))
    assert load_graph("empty.ser", f"{tmp_path}{os.sep}") is None


def test_assembler_failure_returns_none(snapshot_dir):
    def failing(nodes, edges):
        raise ValueError("cannot assemble")

    assert load_graph("graph.ser", snapshot_dir, assembler=failing) is None


def test_custom_assembler_receives_partitions(snapshot_dir):
    seen = {}

    def recording(nodes, edges):
        seen["nodes"] = nodes
        seen["edges"] = edges
        return None

    assert load_graph("graph.ser", snapshot_dir, assembler=recording) is None
    assert len(seen["nodes"]) == 3
    assert len(seen["edges"]) == 2


class _DivideByZero:
    """Record whose unpickling fails with a non-I/O error."""

    def __reduce__(self):
        return (operator.truediv, (1, 0))


def test_unpickling_error_of_any_type_returns_none(tmp_path):
    (tmp_path / "boom.ser").write_bytes(pickle.dumps([_DivideByZero()]))
    assert load_graph("boom.ser", f"{tmp_path}{os.sep}") is None


def test_malformed_action_returns_none(tmp_path):
    a = NodeObject(id=0)
    broken = Action.model_construct(from_node="not-a-node", to_node=a, cost=1.0)
    (tmp_path / "broken.ser").write_bytes(pickle.dumps([a, broken]))
    assert load_graph("broken.ser", f"{tmp_path}{os.sep}") is None


def test_assembler_runtime_error_returns_none(snapshot_dir):
    def failing(nodes, edges):
        raise RuntimeError("assembly crashed")

    assert load_graph("graph.ser", snapshot_dir, assembler=failing) is None
