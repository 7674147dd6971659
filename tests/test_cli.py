import json

import numpy as np

from adjgraph.cli import build_parser, main
from adjgraph.core.generator import generate_graph
from adjgraph.core.persistence import load


def test_round_trip_flow_writes_graph(tmp_path):
    output = tmp_path / "graph.json"

    code = main(["--nodes", "8", "--output", str(output), "--seed", "11", "--quiet"])

    assert code == 0
    document = json.loads(output.read_text())
    assert len(document["adjacency_matrix"]) == 8
    assert np.array_equal(load(output).adjacency_matrix, generate_graph(8, seed=11).adjacency_matrix)


def test_matrix_is_printed_to_stdout(tmp_path, capsys):
    code = main(["-n", "3", "-o", str(tmp_path / "g.json"), "--seed", "2"])

    assert code == 0
    out = capsys.readouterr().out
    assert out.startswith("[[")
    assert out.count("\n") == 3


def test_quiet_suppresses_matrix(tmp_path, capsys):
    main(["-n", "3", "-o", str(tmp_path / "g.json"), "-q"])
    assert capsys.readouterr().out == ""


def test_unwritable_output_returns_failure(tmp_path):
    code = main(["-n", "4", "-o", str(tmp_path / "missing" / "g.json"), "-q"])
    assert code == 1


def test_zero_nodes(tmp_path):
    assert main(["-n", "0", "-o", str(tmp_path / "g.json"), "-q"]) == 0


def test_parser_defaults_come_from_settings():
    from adjgraph.config import settings

    args = build_parser().parse_args([])
    assert args.nodes == settings.node_count
    assert args.output == settings.graph_path
    assert args.seed == settings.seed
