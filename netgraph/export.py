"""Graph export — adjacency-matrix CSV and DOT formats.

Provides text renderings of a NetGraph:
- CSV: dense cost matrix, ``-`` for missing edges
- DOT: for Graphviz visualization
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from netgraph.graph import NetGraph

logger = logging.getLogger(__name__)

NO_EDGE_CELL = "-"


def to_csv(matrix: Sequence[Sequence[float]]) -> str:
    """Render a cost matrix as comma-delimited rows.

    Every row starts on a new line; every cell is followed by a comma.
    Costs use three decimals and ``+inf`` is written as ``-``.
    """
    parts: list[str] = []
    for row in matrix:
        parts.append("\n")
        for cell in row:
            if cell == math.inf:
                parts.append(f"{NO_EDGE_CELL},")
            else:
                parts.append(f"{cell:.3f},")
    return "".join(parts)


def export_csv(graph: NetGraph) -> str:
    """Export the graph's adjacency matrix as CSV text."""
    return to_csv(graph.adjacency_matrix())


def export_dot(graph: NetGraph) -> str:
    """Export graph as DOT format for Graphviz.

    Nodes are labeled with their id; the initial state is highlighted.
    Edges are labeled with their cost.
    """
    lines = ["digraph netgraph {"]
    lines.append('  node [shape=circle, style=filled, fillcolor=lightblue];')
    lines.append('')

    for node in graph.sm.nodes():
        color = "#4CAF50" if node == graph.init_state else "lightblue"
        lines.append(f'  n{node.id} [label="{node.id}", fillcolor="{color}"];')

    lines.append('')
    for source, target, action in graph.sm.edges():
        label = "" if action is None else f"{action.cost:.3f}"
        lines.append(f'  n{source.id} -> n{target.id} [label="{label}"];')

    lines.append('}')
    return "\n".join(lines)
