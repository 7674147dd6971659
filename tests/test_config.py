from adjgraph.config import Settings


def test_defaults(monkeypatch):
    for name in (
        "ADJGRAPH_NODE_COUNT", "ADJGRAPH_GRAPH_PATH", "ADJGRAPH_SEED", "ADJGRAPH_LOG_LEVEL", "ADJGRAPH_JSON_INDENT"
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir("/")

    config = Settings()

    assert config.node_count == 100
    assert config.graph_path == "graph.json"
    assert config.seed is None
    assert config.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ADJGRAPH_NODE_COUNT", "12")
    monkeypatch.setenv("ADJGRAPH_GRAPH_PATH", "out/g.json")
    monkeypatch.setenv("ADJGRAPH_SEED", "7")
    monkeypatch.setenv("ADJGRAPH_JSON_INDENT", "2")

    config = Settings()

    assert config.node_count == 12
    assert config.graph_path == "out/g.json"
    assert config.seed == 7
    assert config.json_indent == 2
