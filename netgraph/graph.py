"""NetGraph — a directed value graph with a designated initial state."""

from __future__ import annotations

import logging
import math

import numpy as np

from netgraph.config import get_settings
from netgraph.distances import compute_distances
from netgraph.models import Action, ActionFactory, NodeObject, RandomActionFactory
from netgraph.randomness import SupplierOfRandomness
from netgraph.reachability import ReachabilityEngine
from netgraph.store import GraphStore

logger = logging.getLogger(__name__)

NO_EDGE = math.inf


class NetGraph:
    """A graph container paired with the node all traversals start from.

    Usage:
        graph = NetGraph(DiGraphStore.from_components(nodes, actions), nodes[0])
        orphans, loops = graph.unreachable_nodes()
        graph.force_reachability()
        matrix = graph.adjacency_matrix()

    Randomness and the action factory default to instances configured from
    ``get_settings()``.
    """

    def __init__(
        self,
        sm: GraphStore,
        init_state: NodeObject,
        *,
        randomness: SupplierOfRandomness | None = None,
        action_factory: ActionFactory | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        if not sm.has_node(init_state):
            raise ValueError(f"Initial state {init_state.id} is not a node of the graph")
        self._sm = sm
        self._init_state = init_state
        self._log = log or logger
        if randomness is None:
            randomness = SupplierOfRandomness(get_settings().seed)
        self._randomness = randomness
        if action_factory is None:
            action_factory = RandomActionFactory(randomness, max_cost=get_settings().max_action_cost)
        self._create_action = action_factory

    @property
    def sm(self) -> GraphStore:
        return self._sm

    @property
    def init_state(self) -> NodeObject:
        return self._init_state

    def copy(self) -> NetGraph:
        """Duplicate the container; the initial state and collaborators are shared."""
        return NetGraph(
            self._sm.copy(),
            self._init_state,
            randomness=self._randomness,
            action_factory=self._create_action,
            log=self._log,
        )

    # ------------------------------------------------------------------ #
    # Counts and degrees
    # ------------------------------------------------------------------ #
    def total_nodes(self) -> int:
        return self._sm.number_of_nodes()

    def total_edges(self) -> int:
        return self._sm.number_of_edges()

    def degrees(self) -> list[tuple[int, int]]:
        """(in-degree, out-degree) for every node."""
        return [(self._sm.in_degree(n), self._sm.out_degree(n)) for n in self._sm.nodes()]

    def max_out_degree(self) -> int:
        out_degrees = [self._sm.out_degree(n) for n in self._sm.nodes()]
        if not out_degrees:
            self._log.error("Max out-degree requested for a graph without nodes")
            raise ValueError("max_out_degree() of a graph without nodes")
        return max(out_degrees)

    def random_successor(self, from_node: NodeObject) -> tuple[NodeObject, Action] | None:
        """Pick one successor of ``from_node`` uniformly, with its edge value."""
        successors = list(self._sm.successors(from_node))
        if not successors:
            return None
        chosen = successors[self._randomness.on_demand(len(successors))]
        action = self._sm.edge_value(from_node, chosen)
        if action is None:
            raise ValueError(f"Edge {from_node.id} -> {chosen.id} has no value")
        return chosen, action

    # ------------------------------------------------------------------ #
    # Algorithms
    # ------------------------------------------------------------------ #
    def reachability(self, edge_probability: float | None = None) -> ReachabilityEngine:
        if edge_probability is None:
            edge_probability = get_settings().edge_probability
        return ReachabilityEngine(
            self, self._create_action, self._randomness, edge_probability, log=self._log,
        )

    def unreachable_nodes(self) -> tuple[set[NodeObject], int]:
        return self.reachability().unreachable_nodes()

    def force_reachability(
        self,
        edge_probability: float | None = None,
        max_passes: int | None = None,
    ) -> set[NodeObject]:
        if max_passes is None:
            max_passes = get_settings().max_repair_passes
        return self.reachability(edge_probability).force_reachability(max_passes=max_passes)

    def distances(self) -> dict[NodeObject, float]:
        return compute_distances(self._sm, self._init_state)

    # ------------------------------------------------------------------ #
    # Matrix
    # ------------------------------------------------------------------ #
    def node_order(self) -> list[NodeObject]:
        """Node enumeration used by ``adjacency_matrix`` for the current graph."""
        return list(self._sm.nodes())

    def adjacency_matrix(self) -> np.ndarray:
        """Dense cost matrix; ``inf`` marks a missing edge."""
        nodes = self.node_order()
        matrix = np.full((len(nodes), len(nodes)), NO_EDGE, dtype=np.float64)
        for i, u in enumerate(nodes):
            for j, v in enumerate(nodes):
                if self._sm.has_edge(u, v):
                    action = self._sm.edge_value(u, v)
                    if action is not None:
                        matrix[i, j] = action.cost
        return matrix

    # ------------------------------------------------------------------ #
    # Persistence
    # ------------------------------------------------------------------ #
    @classmethod
    def load(cls, file_name: str, directory: str | None = None) -> NetGraph | None:
        from netgraph.persistence import load_graph

        return load_graph(file_name, directory)

    def __repr__(self) -> str:
        return (
            f"NetGraph(nodes={self.total_nodes()}, edges={self.total_edges()}, "
            f"init_state={self._init_state.id})"
        )
