"""Value models for node/edge identifiers, nodes and edges.

These Pydantic v2 models define the strict JSON schema used when a
:class:`~adjgraph.core.graph.Graph` is persisted.  Identifiers are frozen
so they can be used as node-table keys.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class IntIdentifier(BaseModel):
    """An identifier made of a non-negative whole number."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["int"] = "int"
    value: Annotated[StrictInt, Field(ge=0)] = Field(..., description="Non-negative integer label.")

    @property
    def key(self) -> str:
        return f"int:{self.value}"

    def __str__(self) -> str:
        return str(self.value)


class TextIdentifier(BaseModel):
    """An identifier made of a text label."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    value: StrictStr = Field(..., description="Text label.")

    @property
    def key(self) -> str:
        return f"text:{self.value}"

    def __str__(self) -> str:
        return self.value


# ``IntIdentifier(value=1) != TextIdentifier(value="1")``: pydantic equality
# compares the model class as well as the field values.
NodeIdentifier = Annotated[Union[IntIdentifier, TextIdentifier], Field(discriminator="kind")]
EdgeIdentifier = Annotated[Union[IntIdentifier, TextIdentifier], Field(discriminator="kind")]


def node_id(value: int | str | IntIdentifier | TextIdentifier) -> IntIdentifier | TextIdentifier:
    """Build the identifier variant matching a plain ``int`` or ``str``.

    Existing identifiers are returned unchanged.

    Raises:
        TypeError: For anything that is not an ``int``, ``str`` or identifier.
        pydantic.ValidationError: For negative integers.
    """
    if isinstance(value, (IntIdentifier, TextIdentifier)):
        return value
    # bool is an int subclass but never a valid label.
    if isinstance(value, bool):
        raise TypeError("bool is not a valid identifier")
    if isinstance(value, int):
        return IntIdentifier(value=value)
    if isinstance(value, str):
        return TextIdentifier(value=value)
    raise TypeError(f"Cannot build an identifier from {type(value).__name__}")


# Edge identifiers share the same two variants.
edge_id = node_id


def parse_key(key: str) -> IntIdentifier | TextIdentifier:
    """Reverse :attr:`IntIdentifier.key` / :attr:`TextIdentifier.key`.

    Raises:
        ValueError: If *key* does not carry a known variant tag.
    """
    kind, sep, raw = key.partition(":")
    if not sep:
        raise ValueError(f"Identifier key has no variant tag: {key!r}")
    if kind == "int":
        if not raw.isdigit():
            raise ValueError(f"Integer identifier key is not a whole number: {key!r}")
        return IntIdentifier(value=int(raw))
    if kind == "text":
        return TextIdentifier(value=raw)
    raise ValueError(f"Unknown identifier variant {kind!r} in key {key!r}")


class AdjacencyEntry(BaseModel):
    """One neighbour reference stored on a node.

    Attributes:
        neighbor: Identifier of the node on the other end.
        edge: Identifier of the connecting edge.
    """

    neighbor: NodeIdentifier = Field(..., description="Adjacent node.")
    edge: EdgeIdentifier = Field(..., description="Connecting edge.")


class Node(BaseModel):
    """A node's full state.

    A node's identity is entirely its ``identifier``; two ``Node`` values
    with the same identifier are the same logical node.

    Attributes:
        identifier: The unique node identifier.
        adjacency: Ordered neighbour/edge references (may be empty).
    """

    identifier: NodeIdentifier = Field(..., description="Unique node identifier.")
    adjacency: list[AdjacencyEntry] = Field(default_factory=list, description="Neighbour references.")

    @classmethod
    def from_value(cls, value: int | str | IntIdentifier | TextIdentifier) -> Node:
        """Create a node with no adjacency data from a plain label."""
        return cls(identifier=node_id(value))

    def add_edge_to(self, target: Node, edge: int | str | IntIdentifier | TextIdentifier) -> None:
        """Record an undirected connection on both this node and *target*.

        A self-connection is recorded once.
        """
        ident = edge_id(edge)
        self.adjacency.append(AdjacencyEntry(neighbor=target.identifier, edge=ident))
        if target is not self and target.identifier != self.identifier:
            target.adjacency.append(AdjacencyEntry(neighbor=self.identifier, edge=ident))

    @property
    def neighbors(self) -> list[IntIdentifier | TextIdentifier]:
        return [entry.neighbor for entry in self.adjacency]


class Edge(BaseModel):
    """An undirected connection between two nodes.

    The pair is stored in the orientation it was created with; use
    :meth:`connects` for orientation-free comparison.

    Attributes:
        source: Identifier of the first endpoint.
        target: Identifier of the second endpoint.
    """

    source: NodeIdentifier = Field(..., description="First endpoint.")
    target: NodeIdentifier = Field(..., description="Second endpoint.")

    @classmethod
    def between(
        cls,
        source: Node | int | str | IntIdentifier | TextIdentifier,
        target: Node | int | str | IntIdentifier | TextIdentifier,
    ) -> Edge:
        """Build an edge from nodes, identifiers or plain labels."""
        return cls(source=_as_identifier(source), target=_as_identifier(target))

    @property
    def endpoints(self) -> tuple[IntIdentifier | TextIdentifier, IntIdentifier | TextIdentifier]:
        return self.source, self.target

    def connects(
        self,
        a: Node | int | str | IntIdentifier | TextIdentifier,
        b: Node | int | str | IntIdentifier | TextIdentifier,
    ) -> bool:
        """Return ``True`` if this edge joins *a* and *b* in either orientation."""
        pair = {_as_identifier(a), _as_identifier(b)}
        return {self.source, self.target} == pair


def _as_identifier(
    item: Node | int | str | IntIdentifier | TextIdentifier,
) -> IntIdentifier | TextIdentifier:
    if isinstance(item, Node):
        return item.identifier
    return node_id(item)
