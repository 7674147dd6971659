"""Random graph generation.

Each row draws its own neighbour count uniformly from ``[0, n)`` and then
samples that many distinct targets from the whole index range, so the result
is not a fixed-density Erdos-Renyi model.  Self-loops are possible.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import structlog

from adjgraph.core.graph import Graph, empty_matrix

logger = structlog.get_logger(__name__)


class RandomGraphGenerator:
    """Builds graphs with a random symmetric 0/1 adjacency matrix.

    The random source is injected so generation is reproducible::

        generator = RandomGraphGenerator(seed=7)
        graph = generator.generate(10)

    Args:
        rng: A ``numpy.random.Generator`` to draw from.
        seed: Used to build a fresh generator when *rng* is not given.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def generate(self, n: int) -> Graph:
        """Return a graph whose ``n x n`` matrix is random and symmetric.

        Only the matrix is populated; the node table and edge list stay
        empty.

        Raises:
            ValueError: If *n* is negative.
        """
        if n < 0:
            raise ValueError(f"Node count must be non-negative, got {n}")

        matrix = empty_matrix(n)
        for i in range(n):
            k = int(self.rng.integers(0, n))
            targets = self.rng.choice(n, size=k, replace=False)
            matrix[i, targets] = 1
            matrix[targets, i] = 1

        logger.info("graph_generated", nodes=n, links=int(np.count_nonzero(np.triu(matrix))))
        return Graph(adjacency_matrix=matrix)


def generate_graph(
    n: int,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> Graph:
    """Convenience wrapper around :meth:`RandomGraphGenerator.generate`."""
    return RandomGraphGenerator(rng=rng, seed=seed).generate(n)
