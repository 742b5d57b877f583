"""Graph builder — assembles a NetGraph from node and action components.

Receives the node and action records of a snapshot and assembles them
into a NetGraph with deduplication and validation.
"""

from __future__ import annotations

import logging

from netgraph.graph import NetGraph
from netgraph.models import Action, NodeObject
from netgraph.store import DiGraphStore

logger = logging.getLogger(__name__)

INIT_STATE_ID = 0


class GraphBuilder:
    """Builds a NetGraph from nodes and actions.

    Handles:
    - Node deduplication by id
    - Edge validation (source/target exist, no self-loops)
    - Initial state selection
    """

    def __init__(self) -> None:
        self._store = DiGraphStore()
        self._node_index: dict[int, NodeObject] = {}

    def add_nodes(self, nodes: list[NodeObject]) -> None:
        """Add nodes with deduplication."""
        for node in nodes:
            if node.id not in self._node_index:
                self._store.add_node(node)
                self._node_index[node.id] = node
            else:
                logger.debug("Skipping duplicate node: %d", node.id)

    def add_edges(self, edges: list[Action]) -> None:
        """Add edges with validation."""
        for edge in edges:
            source = self._node_index.get(edge.from_node.id)
            target = self._node_index.get(edge.to_node.id)
            if source is None or target is None:
                logger.debug(
                    "Skipping edge %d→%d: missing node(s)",
                    edge.from_node.id, edge.to_node.id,
                )
            elif source == target:
                logger.debug("Skipping self-loop on node %d", source.id)
            else:
                self._store.put_edge_value(source, target, edge)

    def build(self, init_state: NodeObject | None = None) -> NetGraph:
        """Return the constructed graph.

        Without an explicit ``init_state`` the node with id 0 is used, or the
        first added node when there is none.
        """
        if init_state is None:
            if not self._node_index:
                raise ValueError("Cannot build a graph without nodes")
            init_state = self._node_index.get(INIT_STATE_ID) or next(iter(self._node_index.values()))
        graph = NetGraph(self._store, init_state)
        logger.info(
            "Graph built: %d nodes, %d edges, init state %d",
            graph.total_nodes(), graph.total_edges(), init_state.id,
        )
        return graph

    @classmethod
    def from_components(
        cls,
        nodes: list[NodeObject],
        edges: list[Action],
    ) -> NetGraph | None:
        """Convenience: build a graph from snapshot components in one call."""
        if not nodes:
            logger.error("No nodes among the graph components")
            return None
        builder = cls()
        builder.add_nodes(nodes)
        builder.add_edges(edges)
        return builder.build()
