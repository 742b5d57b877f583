"""Distance estimates from the initial state.

Relaxes edges depth-first: whenever a successor's distance improves, the walk
descends into it before relaxing the next sibling. Nodes are not ordered by
a priority frontier, so a node explored early may keep a distance that a
later-discovered cheaper path would have improved on had it been relaxed
first. The result is an upper bound on the true shortest distance, exact on
trees and on graphs whose successor order matches cost order.

Costs must be non-negative; a negative cycle reachable from the initial
state keeps improving forever.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from typing import TYPE_CHECKING

from netgraph.models import NodeObject

if TYPE_CHECKING:
    from netgraph.store import GraphStore

logger = logging.getLogger(__name__)

NO_EDGE_COST = math.nan


def edge_cost(sm: GraphStore, u: NodeObject, v: NodeObject) -> float:
    """Cost of ``u -> v``, or NaN when there is no edge value."""
    if not sm.has_edge(u, v):
        return NO_EDGE_COST
    action = sm.edge_value(u, v)
    if action is None:
        return NO_EDGE_COST
    return action.cost


def compute_distances(sm: GraphStore, init_state: NodeObject) -> dict[NodeObject, float]:
    distance = {node: math.inf for node in sm.nodes()}
    distance[init_state] = 0.0

    def relax(u: NodeObject, v: NodeObject) -> bool:
        cost = edge_cost(sm, u, v)
        if math.isnan(cost):
            return False
        candidate = distance[u] + cost
        if distance[v] > candidate:
            distance[v] = candidate
            return True
        return False

    def pending(node: NodeObject) -> Iterator[NodeObject]:
        return iter(list(sm.successors(node)))

    # explicit call stack: (node being explored, its not-yet-relaxed successors)
    stack = [(init_state, pending(init_state))]
    while stack:
        node, successors = stack[-1]
        nxt = next(successors, None)
        if nxt is None:
            stack.pop()
        elif relax(node, nxt):
            stack.append((nxt, pending(nxt)))

    reached = sum(1 for d in distance.values() if d != math.inf)
    logger.debug("Distances computed: %d of %d nodes reached", reached, len(distance))
    return distance
