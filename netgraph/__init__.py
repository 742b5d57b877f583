"""NetGraph core — reachability repair, distances, matrix export, and snapshot loading."""

__version__ = "0.1.0"

from netgraph.builder import GraphBuilder  # noqa: F401
from netgraph.config import NetGraphSettings, configure_logging, get_settings  # noqa: F401
from netgraph.differ import GraphDiff, GraphDiffer  # noqa: F401
from netgraph.export import export_csv, export_dot, to_csv  # noqa: F401
from netgraph.graph import NetGraph  # noqa: F401
from netgraph.models import Action, NodeObject, RandomActionFactory  # noqa: F401
from netgraph.persistence import load_graph  # noqa: F401
from netgraph.randomness import SupplierOfRandomness  # noqa: F401
from netgraph.store import DiGraphStore, GraphStore  # noqa: F401
