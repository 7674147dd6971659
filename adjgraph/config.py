"""Application-wide configuration and settings.

Uses ``pydantic-settings`` so values can be overridden via environment
variables prefixed with ``ADJGRAPH_``.
"""

from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Global settings for the adjgraph entry point.

    Attributes:
        app_name: Display name of the application.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        node_count: Number of nodes the entry point generates.
        graph_path: File the generated graph is saved to and reloaded from.
        seed: Seed for the random generator; ``None`` draws fresh entropy.
        json_indent: Indentation of the persisted JSON; ``None`` is compact.
    """

    app_name: str = "adjgraph"
    log_level: str = "INFO"

    node_count: int = 100
    graph_path: str = "graph.json"
    seed: Optional[int] = None
    json_indent: Optional[int] = None

    model_config = {"env_prefix": "ADJGRAPH_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
