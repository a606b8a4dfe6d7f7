import io
import logging

from mstgraph import cli

SAMPLE = """4
0 1 1.0
1 2 2.0
2 3 1.0
0 3 5.0
"""


def test_cli_prints_edges_and_parent_array(tmp_path, capsys):
    graph_file = tmp_path / "graph.txt"
    graph_file.write_text(SAMPLE, encoding="utf-8")

    assert cli.main([str(graph_file)]) == cli.EXIT_OK

    out = capsys.readouterr().out
    assert "0 --(05)--> 3\tREJECTED" in out
    assert "2 --(01)--> 3\tSELECTED" in out
    assert out.rstrip().splitlines()[-4:] == [
        "parent[0] = -1",
        "parent[1] = 0",
        "parent[2] = 1",
        "parent[3] = 2",
    ]


def test_cli_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0 1 3.0\n"))
    assert cli.main(["--heap-sizing", "quadratic"]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "0 --(03)--> 1\tSELECTED" in out
    assert "parent[1] = 0" in out


def test_cli_verbose_traces_algorithms(tmp_path, capsys):
    graph_file = tmp_path / "graph.txt"
    graph_file.write_text(SAMPLE, encoding="utf-8")
    assert cli.main([str(graph_file), "-v"]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "Entering kruskal" in out
    assert "Entering BFS" in out


def test_cli_malformed_input_exits_with_failure(tmp_path, capsys):
    graph_file = tmp_path / "graph.txt"
    graph_file.write_text("3\n0 1\n", encoding="utf-8")
    assert cli.main([str(graph_file)]) == cli.EXIT_FAILURE
    captured = capsys.readouterr()
    assert "InputFormatError" in captured.err
    assert "line 2" in captured.err
    assert "parent[" not in captured.out


def test_cli_missing_file(tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.txt")]) == cli.EXIT_FAILURE
    assert "cannot read" in capsys.readouterr().err


def test_cli_bad_config_file(tmp_path, capsys):
    config = tmp_path / "bad.yaml"
    config.write_text("heap_sizing: enormous\n", encoding="utf-8")
    assert cli.main(["--config", str(config)]) == cli.EXIT_FAILURE
    assert "heap_sizing" in capsys.readouterr().err


def test_cli_unknown_log_level(tmp_path, capsys):
    graph_file = tmp_path / "graph.txt"
    graph_file.write_text(SAMPLE, encoding="utf-8")
    assert cli.main([str(graph_file), "--log-level", "LOUDEST"]) == cli.EXIT_FAILURE
    captured = capsys.readouterr()
    assert "log_level" in captured.err
    assert captured.out == ""


def test_cli_defaults_to_warning_level(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("MSTGRAPH_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MSTGRAPH_VERBOSE", raising=False)
    graph_file = tmp_path / "graph.txt"
    graph_file.write_text(SAMPLE, encoding="utf-8")
    assert cli.main([str(graph_file)]) == cli.EXIT_OK
    assert logging.getLogger().level == logging.WARNING
