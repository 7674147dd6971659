"""Graph aggregate, random generation and JSON persistence."""

from adjgraph.core.generator import RandomGraphGenerator, generate_graph
from adjgraph.core.graph import Graph
from adjgraph.core.persistence import dumps, load, loads, save

__all__ = [
    "Graph",
    "RandomGraphGenerator",
    "generate_graph",
    "dumps",
    "loads",
    "save",
    "load",
]
