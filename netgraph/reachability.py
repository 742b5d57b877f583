"""Reachability analysis and repair.

Finds the nodes that cannot be reached from the initial state and, on
request, inserts edges until every node is reachable. Each repair pass
bridges one orphan deterministically and densifies the remaining orphans
at random, so bridging one can pull others in transitively.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from netgraph.models import ActionFactory, NodeObject
from netgraph.randomness import SupplierOfRandomness

if TYPE_CHECKING:
    from netgraph.graph import NetGraph

logger = logging.getLogger(__name__)


class ReachabilityEngine:
    """Computes and repairs reachability from a graph's initial state.

    Usage:
        engine = ReachabilityEngine(graph, action_factory, randomness, edge_probability=0.1)
        orphans, loops = engine.unreachable_nodes()
        remaining = engine.force_reachability(max_passes=100)
    """

    def __init__(
        self,
        graph: NetGraph,
        action_factory: ActionFactory,
        randomness: SupplierOfRandomness,
        edge_probability: float,
        log: logging.Logger | None = None,
    ) -> None:
        if not 0.0 <= edge_probability <= 1.0:
            raise ValueError(f"edge_probability must be within [0, 1], got {edge_probability}")
        self._graph = graph
        self._create_action = action_factory
        self._randomness = randomness
        self._edge_probability = edge_probability
        self._log = log or logger

    def unreachable_nodes(self) -> tuple[set[NodeObject], int]:
        """Return the nodes not reachable from the initial state and the loop count.

        The loop count is the number of times the traversal popped a node it
        had already visited, not the number of distinct cycles.
        """
        sm = self._graph.sm
        init_state = self._graph.init_state

        visited: set[NodeObject] = set()
        loops = 0
        # top of the stack is the head of the work list
        stack = list(reversed(list(sm.successors(init_state))))
        while stack:
            node = stack.pop()
            if node in visited:
                loops += 1
                continue
            visited.add(node)
            fresh = [n for n in sm.successors(node) if n not in visited]
            stack.extend(reversed(fresh))

        self._log.info("DFS: reachable %d nodes with %d loops in the graph", len(visited), loops)
        all_nodes = set(sm.nodes())
        self._log.info(
            "The reachability ratio is %4.2f or there are %d reachable nodes out of total %d nodes in the graph",
            len(visited) * 100 / len(all_nodes), len(visited), len(all_nodes),
        )
        return all_nodes - visited - {init_state}, loops

    def force_reachability(self, max_passes: int | None = None) -> set[NodeObject]:
        """Insert edges until every node is reachable from the initial state.

        Returns an empty set on success or when there is nothing reachable to
        anchor the repair to. If ``max_passes`` is reached first, the orphans
        still left are returned.
        """
        sm = self._graph.sm
        passes = 0
        while True:
            orphans, _ = self.unreachable_nodes()
            self._log.info("Force reachability: there are %d orphan nodes in the graph", len(orphans))
            if not orphans:
                return set()
            if max_passes is not None and passes >= max_passes:
                self._log.error(
                    "Reachability repair stopped after %d passes with %d orphan nodes left",
                    passes, len(orphans),
                )
                return orphans

            # low out-degree first, then high in-degree
            reachable = sorted(
                (n for n in sm.nodes() if n not in orphans),
                key=lambda n: (sm.out_degree(n), -sm.in_degree(n)),
            )
            if not reachable:
                self._log.error("There are no reachable nodes in the graph from the init node")
                return set()

            orphan_list = [n for n in sm.nodes() if n in orphans]
            rn = reachable[0]
            unr = min(orphan_list, key=sm.in_degree)
            self._insert(rn, unr)

            probs = self._randomness.rand_probs(len(orphan_list) * len(orphan_list))
            for node in orphan_list:
                for orph in orphan_list:
                    if node == orph:
                        continue
                    p = next(probs, None)
                    if p is None or p >= self._edge_probability:
                        continue
                    if sm.edge_value(node, orph) is None:
                        self._insert(node, orph)
                    elif sm.edge_value(orph, node) is None:
                        self._insert(orph, node)
            passes += 1

    def _insert(self, u: NodeObject, v: NodeObject) -> None:
        self._graph.sm.put_edge_value(u, v, self._create_action(u, v))
        self._log.debug("Repair edge %d -> %d", u.id, v.id)
