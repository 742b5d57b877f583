"""Loading of persisted NetGraph snapshots.

A snapshot is a pickled flat list of graph components (``NodeObject`` and
``Action`` records) written by the graph generator. Loading partitions it
by record type and hands both lists to an assembler.
"""

from __future__ import annotations

import logging
import pickle
from collections.abc import Callable
from typing import Any

from netgraph.builder import GraphBuilder
from netgraph.config import get_settings
from netgraph.graph import NetGraph
from netgraph.models import Action, GraphComponent, NodeObject

logger = logging.getLogger(__name__)

Assembler = Callable[[list[NodeObject], list[Action]], "NetGraph | None"]


def partition_components(
    components: list[GraphComponent | Any],
) -> tuple[list[NodeObject], list[Action]]:
    """Split snapshot records into nodes and actions, keeping their order."""
    nodes = [c for c in components if isinstance(c, NodeObject)]
    edges = [c for c in components if isinstance(c, Action)]
    skipped = len(components) - len(nodes) - len(edges)
    if skipped:
        logger.warning("Ignoring %d snapshot record(s) of unknown type", skipped)
    return nodes, edges


def load_graph(
    file_name: str,
    directory: str | None = None,
    assembler: Assembler = GraphBuilder.from_components,
) -> NetGraph | None:
    """Load the graph stored at ``directory + file_name``.

    ``directory`` defaults to the configured output directory and is joined
    by plain concatenation, so it should end with a separator. Returns None
    when the file cannot be read, does not hold a component list, or cannot
    be assembled into a graph.
    """
    if directory is None:
        directory = get_settings().output_directory
    path = f"{directory}{file_name}"
    logger.info("Loading the NetGraph from %s", path)

    try:
        with open(path, "rb") as fh:
            payload = fh.read()
        components = pickle.loads(payload)
    except Exception as e:
        logger.error("Failed to read graph snapshot %s: %s", path, e, exc_info=True)
        return None

    if not isinstance(components, (list, tuple)):
        logger.error(
            "Graph snapshot %s holds %s, expected a list of components",
            path, type(components).__name__,
        )
        return None

    nodes, edges = partition_components(list(components))
    try:
        graph = assembler(nodes, edges)
    except Exception as e:
        logger.error("Failed to assemble graph from %s: %s", path, e, exc_info=True)
        return None

    if graph is None:
        logger.error("No graph could be assembled from %s", path)
    else:
        logger.info("Loaded %r from %s", graph, path)
    return graph
