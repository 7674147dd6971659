"""adjgraph: an undirected graph with a dense adjacency matrix and JSON persistence."""

__version__ = "0.1.0"

from adjgraph.core import Graph, RandomGraphGenerator, dumps, generate_graph, load, loads, save
from adjgraph.exceptions import GraphDecodeError, GraphError, GraphIOError
from adjgraph.models import Edge, IntIdentifier, Node, TextIdentifier, edge_id, node_id

__all__ = [
    "__version__",
    "Graph",
    "RandomGraphGenerator",
    "generate_graph",
    "dumps",
    "loads",
    "save",
    "load",
    "GraphError",
    "GraphIOError",
    "GraphDecodeError",
    "IntIdentifier",
    "TextIdentifier",
    "Node",
    "Edge",
    "node_id",
    "edge_id",
]
