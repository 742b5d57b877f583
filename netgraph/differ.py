"""Graph differ — compare two NetGraphs and produce a structured diff.

Detects added/removed nodes and added/removed/re-costed edges between two
snapshots of the same graph, e.g. a ``copy()`` taken before a reachability
repair and the repaired graph.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from netgraph.graph import NetGraph

logger = logging.getLogger(__name__)


class NodeChange(BaseModel):
    """A change to a single node."""

    change_type: str  # added, removed
    node_id: int


class EdgeChange(BaseModel):
    """A change to a single edge."""

    change_type: str  # added, removed, modified
    source: int
    target: int
    cost_before: float | None = None
    cost_after: float | None = None


class GraphDiff(BaseModel):
    """Structured diff between two graphs."""

    node_changes: list[NodeChange] = Field(default_factory=list)
    edge_changes: list[EdgeChange] = Field(default_factory=list)

    @property
    def total_changes(self) -> int:
        return len(self.node_changes) + len(self.edge_changes)

    @property
    def added_edges(self) -> list[EdgeChange]:
        return [c for c in self.edge_changes if c.change_type == "added"]

    @property
    def removed_edges(self) -> list[EdgeChange]:
        return [c for c in self.edge_changes if c.change_type == "removed"]

    @property
    def has_changes(self) -> bool:
        return self.total_changes > 0


class GraphDiffer:
    """Compares two NetGraphs and produces a GraphDiff.

    Usage:
        before = graph.copy()
        graph.force_reachability()
        diff = GraphDiffer().diff(before, graph)
    """

    def diff(self, before: NetGraph, after: NetGraph) -> GraphDiff:
        """Compute the diff between two graphs."""
        result = GraphDiff()

        before_nodes = {n.id for n in before.sm.nodes()}
        after_nodes = {n.id for n in after.sm.nodes()}

        for node_id in sorted(after_nodes - before_nodes):
            result.node_changes.append(NodeChange(change_type="added", node_id=node_id))
        for node_id in sorted(before_nodes - after_nodes):
            result.node_changes.append(NodeChange(change_type="removed", node_id=node_id))

        before_edges = {(u.id, v.id): a.cost for u, v, a in before.sm.edges()}
        after_edges = {(u.id, v.id): a.cost for u, v, a in after.sm.edges()}

        for key in sorted(after_edges.keys() - before_edges.keys()):
            result.edge_changes.append(EdgeChange(
                change_type="added",
                source=key[0],
                target=key[1],
                cost_after=after_edges[key],
            ))

        for key in sorted(before_edges.keys() - after_edges.keys()):
            result.edge_changes.append(EdgeChange(
                change_type="removed",
                source=key[0],
                target=key[1],
                cost_before=before_edges[key],
            ))

        for key in sorted(before_edges.keys() & after_edges.keys()):
            if before_edges[key] != after_edges[key]:
                result.edge_changes.append(EdgeChange(
                    change_type="modified",
                    source=key[0],
                    target=key[1],
                    cost_before=before_edges[key],
                    cost_after=after_edges[key],
                ))

        logger.info(
            "GraphDiff: %d node change(s), %d edge change(s)",
            len(result.node_changes), len(result.edge_changes),
        )
        return result
