"""Graph component models — nodes and the actions attached to edges.

A persisted snapshot is a flat list of these components; the graph
container keys nodes by ``NodeObject`` value and stores one ``Action`` per
ordered node pair.
"""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict

from netgraph.randomness import SupplierOfRandomness


class NodeObject(BaseModel):
    """A vertex of the generated graph.

    Frozen so it hashes by value and can be used as a container key.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    children: int = 0
    props: int = 0
    current_depth: int = 1
    prop_value_range: int = 0
    max_depth: int = 1
    max_branching_factor: int = 1
    max_properties: int = 0
    stored_value: float = 0.0


class Action(BaseModel):
    """A directed edge value carrying a traversal cost."""

    action_type: int = 0
    from_node: NodeObject
    to_node: NodeObject
    from_id: int = 0
    to_id: int = 0
    result_value: int | None = None
    cost: float


GraphComponent = NodeObject | Action


class ActionFactory(Protocol):
    """Creates the value for a newly inserted edge."""

    def __call__(self, from_node: NodeObject, to_node: NodeObject) -> Action: ...


class RandomActionFactory:
    """Default action factory: cost drawn uniformly from ``[0, max_cost)``.

    Usage:
        factory = RandomActionFactory(SupplierOfRandomness(seed=7))
        action = factory(node_a, node_b)
    """

    def __init__(
        self,
        randomness: SupplierOfRandomness,
        max_cost: float = 1.0,
        action_types: int = 1,
    ) -> None:
        self._randomness = randomness
        self._max_cost = max_cost
        self._action_types = action_types

    def __call__(self, from_node: NodeObject, to_node: NodeObject) -> Action:
        cost = next(iter(self._randomness.rand_probs(1))) * self._max_cost
        return Action(
            action_type=self._randomness.on_demand(self._action_types),
            from_node=from_node,
            to_node=to_node,
            from_id=from_node.id,
            to_id=to_node.id,
            cost=cost,
        )
