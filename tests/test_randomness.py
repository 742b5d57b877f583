"""Tests for SupplierOfRandomness and the default action factory."""

import itertools
import tracemalloc

import pytest

from netgraph.models import NodeObject, RandomActionFactory
from netgraph.randomness import SupplierOfRandomness


def test_probabilities_in_unit_interval():
    probs = list(SupplierOfRandomness(seed=1).rand_probs(100))
    assert len(probs) == 100
    assert all(0.0 <= p < 1.0 for p in probs)


def test_seeded_supplier_is_reproducible():
    a = list(SupplierOfRandomness(seed=9).rand_probs(5))
    b = list(SupplierOfRandomness(seed=9).rand_probs(5))
    assert a == b


def test_on_demand_range():
    rnd = SupplierOfRandomness(seed=2)
    assert {rnd.on_demand(3) for _ in range(200)} == {0, 1, 2}


def test_invalid_arguments():
    rnd = SupplierOfRandomness()
    with pytest.raises(ValueError):
        rnd.on_demand(0)
    with pytest.raises(ValueError):
        rnd.rand_probs(-1)


def test_random_action_factory():
    a, b = NodeObject(id=1), NodeObject(id=2)
    action = RandomActionFactory(SupplierOfRandomness(seed=4), max_cost=10.0)(a, b)

    assert action.from_node == a
    assert action.to_node == b
    assert (action.from_id, action.to_id) == (1, 2)
    assert 0.0 <= action.cost < 10.0


def test_rand_probs_is_lazy():
    rnd = SupplierOfRandomness(seed=6)
    tracemalloc.start()
    try:
        probs = rnd.rand_probs(10**9)
        head = list(itertools.islice(probs, 10))
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()

    assert len(head) == 10
    assert peak < 1_000_000


def test_rand_probs_spans_chunks():
    probs = list(SupplierOfRandomness(seed=8).rand_probs(10_000))
    assert len(probs) == 10_000
    assert len(set(probs)) > 9_000


def test_rand_probs_zero():
    assert list(SupplierOfRandomness().rand_probs(0)) == []
