import pytest
import structlog

from adjgraph.core.generator import RandomGraphGenerator
from adjgraph.core.graph import Graph
from adjgraph.models.graph import AdjacencyEntry, Edge, Node, edge_id, node_id


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any logging configuration a test (e.g. the CLI) installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def generator():
    return RandomGraphGenerator(seed=1234)


@pytest.fixture
def sample_graph():
    """A small graph mixing integer and text identifiers, with a synced matrix."""
    graph = Graph()
    graph.add_nodes_from([node_id(1), node_id("1"), node_id("hub")])
    graph.put_node(
        Node(
            identifier=node_id(7),
            adjacency=[AdjacencyEntry(neighbor=node_id("hub"), edge=edge_id("e-hub"))],
        )
    )
    graph.add_edges_from(
        [
            Edge.between(1, "hub"),
            Edge.between("hub", 7),
            Edge.between(7, 1),
            Edge.between("1", "1"),
        ]
    )
    graph.materialize_matrix()
    return graph
