"""JSON persistence for :class:`~adjgraph.core.graph.Graph`.

The persisted document has three fields::

    {
        "adjacency_matrix": [[0, 1], [1, 0]],
        "nodes": {"int:1": {"identifier": {"kind": "int", "value": 1}, "adjacency": []}},
        "edges": [{"source": {...}, "target": {...}}]
    }

Node-table keys use the identifier's tagged key form (``"int:1"``,
``"text:a"``) so integer and text identifiers never collide.

:func:`save` and :func:`load` accept either a filesystem path or an open
file object.  Failures to open, read or write surface as
:class:`~adjgraph.exceptions.GraphIOError`; content that is not a valid
graph document surfaces as :class:`~adjgraph.exceptions.GraphDecodeError`.
"""

from __future__ import annotations

import os
import pathlib
from typing import IO, Annotated, Optional, Union

import numpy as np
import structlog
from pydantic import BaseModel, Field, StrictInt, ValidationError, field_validator, model_validator

from adjgraph.core.graph import Graph
from adjgraph.exceptions import GraphDecodeError, GraphIOError
from adjgraph.models.graph import Edge, Node, parse_key

logger = structlog.get_logger(__name__)

PathLike = Union[str, os.PathLike]
Sink = Union[PathLike, IO[str], IO[bytes]]
Source = Union[PathLike, IO[str], IO[bytes]]

MatrixEntry = Annotated[StrictInt, Field(ge=0, le=255)]


class GraphDocument(BaseModel):
    """Wire schema for a persisted graph.

    Attributes:
        adjacency_matrix: Square matrix as a list of rows.
        nodes: Node records keyed by their identifier's tagged key.
        edges: Edge records in insertion order.
    """

    adjacency_matrix: list[list[MatrixEntry]] = Field(default_factory=list, description="Square 0/1 matrix.")
    nodes: dict[str, Node] = Field(default_factory=dict, description="Node table keyed by tagged identifier.")
    edges: list[Edge] = Field(default_factory=list, description="Edges in insertion order.")

    @field_validator("adjacency_matrix")
    @classmethod
    def _check_square(cls, rows: list[list[int]]) -> list[list[int]]:
        size = len(rows)
        for position, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f"Matrix row {position} has {len(row)} entries, expected {size}")
        return rows

    @model_validator(mode="after")
    def _check_node_keys(self) -> GraphDocument:
        for key, node in self.nodes.items():
            if parse_key(key) != node.identifier:
                raise ValueError(f"Node key {key!r} does not match identifier {node.identifier.key!r}")
        return self

    @classmethod
    def from_graph(cls, graph: Graph) -> GraphDocument:
        return cls(
            adjacency_matrix=graph.adjacency_matrix.tolist(),
            nodes={identifier.key: node for identifier, node in graph.nodes.items()},
            edges=list(graph.edges),
        )

    def to_graph(self) -> Graph:
        size = len(self.adjacency_matrix)
        matrix = np.array(self.adjacency_matrix, dtype=np.uint8).reshape(size, size)
        nodes = {node.identifier: node for node in self.nodes.values()}
        return Graph(adjacency_matrix=matrix, nodes=nodes, edges=self.edges)


# ------------------------------------------------------------------
# String form
# ------------------------------------------------------------------


def dumps(graph: Graph, indent: Optional[int] = None) -> str:
    """Serialize *graph* to a JSON string."""
    return GraphDocument.from_graph(graph).model_dump_json(indent=indent)


def loads(text: str | bytes) -> Graph:
    """Deserialize a JSON string produced by :func:`dumps`.

    Raises:
        GraphDecodeError: If *text* is not valid JSON or not a graph document.
    """
    try:
        document = GraphDocument.model_validate_json(text)
    except ValidationError as exc:
        logger.warning("graph_decode_failed", errors=exc.error_count())
        raise GraphDecodeError(f"Invalid graph document: {exc}") from exc
    return document.to_graph()


# ------------------------------------------------------------------
# Sink / source
# ------------------------------------------------------------------


def save(graph: Graph, sink: Sink, indent: Optional[int] = None) -> None:
    """Write *graph* as JSON to a path or an open file object.

    Raises:
        GraphIOError: If the sink cannot be opened or written.
    """
    payload = dumps(graph, indent=indent)
    try:
        if isinstance(sink, (str, os.PathLike)):
            pathlib.Path(sink).write_text(payload, encoding="utf-8")
        else:
            _write_stream(sink, payload)
    except (OSError, ValueError) as exc:
        # Closed streams raise ValueError rather than OSError.
        logger.error("graph_save_failed", sink=_describe(sink), error=str(exc))
        raise GraphIOError(f"Could not write graph to {_describe(sink)}: {exc}") from exc

    logger.info(
        "graph_saved",
        sink=_describe(sink),
        nodes=graph.node_count,
        edges=graph.edge_count,
        bytes=len(payload),
    )


def load(source: Source) -> Graph:
    """Read a graph from a path or an open file object.

    Raises:
        GraphIOError: If the source cannot be opened or read.
        GraphDecodeError: If the content is not a valid graph document.
    """
    try:
        if isinstance(source, (str, os.PathLike)):
            raw: str | bytes = pathlib.Path(source).read_bytes()
        else:
            raw = source.read()
    except UnicodeDecodeError as exc:
        # Text-mode sources decode while reading.
        logger.warning("graph_decode_failed", source=_describe(source), error=str(exc))
        raise GraphDecodeError(f"Graph content is not UTF-8: {exc}") from exc
    except (OSError, ValueError) as exc:
        logger.error("graph_load_failed", source=_describe(source), error=str(exc))
        raise GraphIOError(f"Could not read graph from {_describe(source)}: {exc}") from exc

    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.warning("graph_decode_failed", source=_describe(source), error=str(exc))
            raise GraphDecodeError(f"Graph content is not UTF-8: {exc}") from exc

    graph = loads(raw)
    logger.info(
        "graph_loaded",
        source=_describe(source),
        nodes=graph.node_count,
        edges=graph.edge_count,
    )
    return graph


def _write_stream(stream: IO, payload: str) -> None:
    """Write *payload* to a text or binary stream."""
    try:
        stream.write(payload)
    except TypeError:
        # Binary streams reject ``str``.
        stream.write(payload.encode("utf-8"))


def _describe(target: object) -> str:
    if isinstance(target, (str, os.PathLike)):
        return os.fspath(target)
    name = getattr(target, "name", None)
    return str(name) if name is not None else type(target).__name__
