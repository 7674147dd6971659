"""The :class:`Graph` aggregate: node table, edge list and adjacency matrix.

Insertion updates the node table and the edge list only.  The adjacency
matrix is written by the random generator or by an explicit call to
:meth:`Graph.materialize_matrix`; it is never resized as a side effect of
adding nodes or edges.
"""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, TextIO, Union

import numpy as np
import structlog

from adjgraph.models.graph import Edge, IntIdentifier, Node, TextIdentifier

logger = structlog.get_logger(__name__)

# Entries are 0 (absent) or 1 (present).
MATRIX_DTYPE = np.uint8

Identifier = Union[IntIdentifier, TextIdentifier]

# Closed set of things ``add_node`` accepts: a bare identifier ("ensure
# exists") or a full node ("set/replace").
NodeLike = Union[IntIdentifier, TextIdentifier, Node]


def empty_matrix(n: int = 0) -> np.ndarray:
    """Return an ``n x n`` matrix of zeros."""
    return np.zeros((n, n), dtype=MATRIX_DTYPE)


class Graph:
    """An undirected graph with a dense adjacency matrix.

    Usage::

        graph = Graph()
        graph.add_nodes_from([node_id(1), node_id(2)])
        graph.add_edges_from([Edge.between(1, 2)])
        graph.materialize_matrix()

    Every ``Graph`` is an independently owned value; concurrent mutation is
    not supported.

    Attributes:
        adjacency_matrix: Square ``uint8`` array, ``[i][j] == 1`` when the
            nodes at positions *i* and *j* are connected.
        nodes: Node table keyed by identifier, in insertion order.
        edges: Edges in insertion order.
    """

    def __init__(
        self,
        adjacency_matrix: Optional[np.ndarray] = None,
        nodes: Optional[dict[Identifier, Node]] = None,
        edges: Optional[list[Edge]] = None,
    ) -> None:
        if adjacency_matrix is None:
            adjacency_matrix = empty_matrix()
        matrix = np.asarray(adjacency_matrix, dtype=MATRIX_DTYPE)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError(f"Adjacency matrix must be square, got shape {matrix.shape}")
        self.adjacency_matrix: np.ndarray = matrix
        self.nodes: dict[Identifier, Node] = dict(nodes) if nodes else {}
        for key, node in self.nodes.items():
            if key != node.identifier:
                raise ValueError(f"Node table key {key!r} does not match node identifier {node.identifier!r}")
        self.edges: list[Edge] = list(edges) if edges else []

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def ensure_node(self, identifier: Identifier) -> Node:
        """Insert a fresh node for *identifier* unless one already exists.

        An existing node, including its adjacency data, is left untouched,
        so repeated calls are idempotent.

        Returns:
            The node stored under *identifier*.
        """
        node = self.nodes.get(identifier)
        if node is None:
            node = Node(identifier=identifier)
            self.nodes[identifier] = node
        return node

    def put_node(self, node: Node) -> None:
        """Store *node*, replacing any node with the same identifier."""
        self.nodes[node.identifier] = node

    def add_node(self, item: NodeLike) -> None:
        """Insert an identifier (ensure exists) or a node (set/replace).

        Raises:
            TypeError: If *item* is neither an identifier nor a :class:`Node`.
        """
        if isinstance(item, Node):
            self.put_node(item)
        elif isinstance(item, (IntIdentifier, TextIdentifier)):
            self.ensure_node(item)
        else:
            raise TypeError(f"Cannot add {type(item).__name__} to a graph; expected an identifier or Node")

    def add_nodes_from(self, items: Iterable[NodeLike]) -> None:
        """Apply :meth:`add_node` to each item in order."""
        for item in items:
            self.add_node(item)

    def add_edges_from(self, edges: Iterable[Edge]) -> None:
        """Append *edges* and make sure every endpoint has a node entry.

        All edges are appended first; their endpoints then go through the
        identifier-only insertion path, so existing nodes keep their data.
        """
        added = list(edges)
        self.edges.extend(added)
        for edge in added:
            self.ensure_node(edge.source)
            self.ensure_node(edge.target)

    def materialize_matrix(self) -> np.ndarray:
        """Rebuild :attr:`adjacency_matrix` from the node table and edge list.

        Row/column *i* corresponds to the *i*-th node in node-table order.
        Each edge sets both ``[i][j]`` and ``[j][i]``.

        Returns:
            The new matrix (also stored on the graph).

        Raises:
            ValueError: If an edge endpoint has no node entry, which only
                happens when the graph was built without
                :meth:`add_edges_from`.
        """
        index = {identifier: position for position, identifier in enumerate(self.nodes)}
        matrix = empty_matrix(len(index))
        for edge in self.edges:
            missing = [end for end in edge.endpoints if end not in index]
            if missing:
                raise ValueError(f"Edge endpoint {missing[0].key!r} has no node entry")
            i = index[edge.source]
            j = index[edge.target]
            matrix[i, j] = 1
            matrix[j, i] = 1
        self.adjacency_matrix = matrix
        logger.debug("matrix_materialized", nodes=len(index), edges=len(self.edges))
        return matrix

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def get_node(self, identifier: Identifier) -> Optional[Node]:
        return self.nodes.get(identifier)

    def node_ids(self) -> list[Identifier]:
        """Return node identifiers in node-table order."""
        return list(self.nodes)

    def same_as(self, other: Graph) -> bool:
        """Compare matrix contents, node-table keys and edge list order."""
        return (
            self.adjacency_matrix.shape == other.adjacency_matrix.shape
            and bool(np.array_equal(self.adjacency_matrix, other.adjacency_matrix))
            and set(self.nodes) == set(other.nodes)
            and self.edges == other.edges
        )

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes.values())

    def __repr__(self) -> str:
        n = self.adjacency_matrix.shape[0]
        return f"Graph(matrix={n}x{n}, nodes={self.node_count}, edges={self.edge_count})"

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Return the human-readable rendering of the adjacency matrix."""
        with np.printoptions(threshold=sys.maxsize, linewidth=sys.maxsize):
            return str(self.adjacency_matrix)

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write :meth:`render` to *file* (``stdout`` by default)."""
        print(self.render(), file=file or sys.stdout)
