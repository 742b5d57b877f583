"""Graph container capability and its networkx-backed implementation.

The algorithms in ``netgraph`` only need the operations named by
``GraphStore``; ``DiGraphStore`` provides them on top of ``networkx.DiGraph``,
keeping at most one ``Action`` per ordered node pair under the ``action``
edge attribute.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol

import networkx as nx

from netgraph.models import Action, NodeObject

ACTION_ATTR = "action"


class GraphStore(Protocol):
    """Minimal directed value-graph contract."""

    def nodes(self) -> Iterator[NodeObject]: ...

    def successors(self, node: NodeObject) -> Iterator[NodeObject]: ...

    def predecessors(self, node: NodeObject) -> Iterator[NodeObject]: ...

    def in_degree(self, node: NodeObject) -> int: ...

    def out_degree(self, node: NodeObject) -> int: ...

    def has_edge(self, u: NodeObject, v: NodeObject) -> bool: ...

    def edge_value(self, u: NodeObject, v: NodeObject) -> Action | None: ...

    def put_edge_value(self, u: NodeObject, v: NodeObject, action: Action) -> Action | None: ...

    def add_node(self, node: NodeObject) -> bool: ...

    def has_node(self, node: NodeObject) -> bool: ...

    def number_of_nodes(self) -> int: ...

    def number_of_edges(self) -> int: ...

    def edges(self) -> Iterator[tuple[NodeObject, NodeObject, Action]]: ...

    def copy(self) -> GraphStore: ...


class DiGraphStore:
    """``GraphStore`` over a ``networkx.DiGraph``.

    Node iteration order is insertion order, so repeated matrix builds on an
    unchanged graph use the same node enumeration.
    """

    def __init__(self, graph: nx.DiGraph | None = None) -> None:
        self._g: nx.DiGraph = graph if graph is not None else nx.DiGraph()

    @classmethod
    def from_components(
        cls, nodes: Iterable[NodeObject], actions: Iterable[Action]
    ) -> DiGraphStore:
        store = cls()
        for node in nodes:
            store.add_node(node)
        for action in actions:
            store.put_edge_value(action.from_node, action.to_node, action)
        return store

    @property
    def graph(self) -> nx.DiGraph:
        return self._g

    def nodes(self) -> Iterator[NodeObject]:
        return iter(self._g.nodes)

    def successors(self, node: NodeObject) -> Iterator[NodeObject]:
        return self._g.successors(node)

    def predecessors(self, node: NodeObject) -> Iterator[NodeObject]:
        return self._g.predecessors(node)

    def in_degree(self, node: NodeObject) -> int:
        return self._g.in_degree(node)

    def out_degree(self, node: NodeObject) -> int:
        return self._g.out_degree(node)

    def has_edge(self, u: NodeObject, v: NodeObject) -> bool:
        return self._g.has_edge(u, v)

    def edge_value(self, u: NodeObject, v: NodeObject) -> Action | None:
        data = self._g.get_edge_data(u, v)
        if data is None:
            return None
        return data.get(ACTION_ATTR)

    def put_edge_value(self, u: NodeObject, v: NodeObject, action: Action) -> Action | None:
        """Set the value of edge ``u -> v``, returning the value it replaced."""
        previous = self.edge_value(u, v)
        self._g.add_edge(u, v, **{ACTION_ATTR: action})
        return previous

    def add_node(self, node: NodeObject) -> bool:
        if self._g.has_node(node):
            return False
        self._g.add_node(node)
        return True

    def has_node(self, node: NodeObject) -> bool:
        return self._g.has_node(node)

    def number_of_nodes(self) -> int:
        return self._g.number_of_nodes()

    def number_of_edges(self) -> int:
        return self._g.number_of_edges()

    def edges(self) -> Iterator[tuple[NodeObject, NodeObject, Action]]:
        for u, v, action in self._g.edges(data=ACTION_ATTR):
            yield u, v, action

    def copy(self) -> DiGraphStore:
        """Structurally independent duplicate; node and action values are shared."""
        return DiGraphStore(self._g.copy())

    def __len__(self) -> int:
        return self._g.number_of_nodes()

    def __repr__(self) -> str:
        return (
            f"DiGraphStore(nodes={self._g.number_of_nodes()}, "
            f"edges={self._g.number_of_edges()})"
        )
