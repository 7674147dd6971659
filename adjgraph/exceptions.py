"""Exception hierarchy for graph persistence failures."""

from __future__ import annotations


class GraphError(Exception):
    """Base class for every error raised by adjgraph."""


class GraphIOError(GraphError):
    """The byte sink or source could not be opened, written or read."""


class GraphDecodeError(GraphError):
    """Persisted content is not valid JSON or does not describe a graph."""
