import io

import pytest
import structlog

from adjgraph.core.graph import Graph
from adjgraph.core.persistence import dumps, loads
from adjgraph.exceptions import GraphDecodeError
from adjgraph.logging import setup_logging


def test_events_go_to_configured_stream():
    stream = io.StringIO()
    setup_logging("DEBUG", stream=stream)

    structlog.get_logger("test").info("hello_event", answer=42)

    output = stream.getvalue()
    assert "hello_event" in output
    assert "answer=42" in output


def test_level_filters_lower_events():
    stream = io.StringIO()
    setup_logging("WARNING", stream=stream)

    structlog.get_logger("test").info("quiet_event")
    structlog.get_logger("test").warning("loud_event")

    output = stream.getvalue()
    assert "quiet_event" not in output
    assert "loud_event" in output


def test_decode_failure_is_logged():
    stream = io.StringIO()
    setup_logging("INFO", stream=stream)

    with pytest.raises(GraphDecodeError):
        loads("{")

    assert "graph_decode_failed" in stream.getvalue()
    # Successful calls still work after configuration.
    assert loads(dumps(Graph())).node_count == 0
