"""Pydantic v2 value models for the adjgraph data model."""

from adjgraph.models.graph import (
    AdjacencyEntry,
    Edge,
    EdgeIdentifier,
    IntIdentifier,
    Node,
    NodeIdentifier,
    TextIdentifier,
    edge_id,
    node_id,
    parse_key,
)

__all__ = [
    "IntIdentifier",
    "TextIdentifier",
    "NodeIdentifier",
    "EdgeIdentifier",
    "AdjacencyEntry",
    "Node",
    "Edge",
    "node_id",
    "edge_id",
    "parse_key",
]
