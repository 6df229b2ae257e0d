import pytest

from graphwalk.cli import main
from graphwalk.components import count_scc
from graphwalk.graph import Graph
from graphwalk.traversal import bfs, dfs


def _write(tmp_path, edges):
    path = tmp_path / "edges.txt"
    path.write_text("\n".join(" ".join(map(str, e)) for e in edges) + "\n", encoding="utf-8")
    return str(path)


WEIGHTED = [
    (0, 3, 3), (0, 5, 4), (0, 2, 16), (3, 5, 1), (2, 5, 16),
    (5, 4, 16), (5, 6, 16), (4, 1, 16), (6, 1, 16),
]
SCC_EDGES = [(1, 0), (0, 3), (3, 2), (2, 1), (2, 4), (4, 5), (5, 6), (6, 4), (6, 7)]
BRIDGE_EDGES = [(0, 1), (0, 2), (2, 3), (1, 2), (3, 4)]


def _graph(edges, directed):
    g = Graph()
    for e in edges:
        g.add_edge(*e, directed=directed)
    return g


def test_bfs_output(tmp_path, capsys):
    assert main(["bfs", _write(tmp_path, WEIGHTED), "--directed"]) == 0
    expected = bfs(_graph(WEIGHTED, True), 0)
    out = capsys.readouterr().out
    assert out.startswith("BFS: ")
    assert [int(x) for x in out[len("BFS: "):].strip().rstrip(",").split(",")] == expected


def test_dfs_output(tmp_path, capsys):
    main(["dfs", _write(tmp_path, WEIGHTED), "--directed", "-n", "7"])
    out = capsys.readouterr().out
    assert out.startswith("DFS:")
    nodes = [int(x) for x in out[len("DFS:"):].strip().rstrip(",").split(",")]
    assert nodes == dfs(_graph(WEIGHTED, True), 7)


def test_adjacency_weighted(tmp_path, capsys):
    main(["adjacency", _write(tmp_path, WEIGHTED), "--directed", "--weighted", "-n", "7"])
    out = capsys.readouterr().out
    assert out == _graph(WEIGHTED, True).format_adjacency(7, weighted=True)


def test_cycle_found(tmp_path, capsys):
    main(["cycle", _write(tmp_path, [(0, 1), (0, 2), (1, 3), (2, 3)])])
    assert capsys.readouterr().out == "CYCLE FOUND\n"


def test_cycle_not_found(tmp_path, capsys):
    main(["cycle", _write(tmp_path, [(0, 1), (1, 2), (2, 3)])])
    assert capsys.readouterr().out == "CYCLE NOT FOUND\n"


def test_scc_output(tmp_path, capsys):
    main(["scc", _write(tmp_path, SCC_EDGES), "--directed", "-n", "7"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == f"SCC COUNT:{count_scc(_graph(SCC_EDGES, True), 7)}"
    assert all(line.startswith("SCC:") for line in lines[:-1])
    assert lines[0] == "SCC:0-1-2-3-"


def test_bridges_output(tmp_path, capsys):
    main(["bridges", _write(tmp_path, BRIDGE_EDGES)])
    assert capsys.readouterr().out == "bridge exists\n4-3\nbridge exists\n3-2\n"


def test_comments_and_blank_lines_ignored(tmp_path, capsys):
    path = tmp_path / "edges.txt"
    path.write_text("# header\n\n0 1\n1 2  # trailing\n", encoding="utf-8")
    main(["bfs", str(path)])
    assert capsys.readouterr().out == "BFS: 0,1,2,\n"


def test_reads_stdin(monkeypatch, capsys):
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO("0 1\n1 2\n2 0\n"))
    main(["cycle", "-"])
    assert capsys.readouterr().out == "CYCLE FOUND\n"


def test_bad_line_is_rejected(tmp_path):
    path = tmp_path / "edges.txt"
    path.write_text("0 1 2 3\n", encoding="utf-8")
    with pytest.raises(SystemExit) as info:
        main(["bfs", str(path)])
    assert info.value.code == 2


def test_non_integer_is_rejected(tmp_path):
    path = tmp_path / "edges.txt"
    path.write_text("a b\n", encoding="utf-8")
    with pytest.raises(SystemExit) as info:
        main(["dfs", str(path)])
    assert info.value.code == 2


def test_missing_file_is_rejected(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["bfs", str(tmp_path / "absent.txt")])
    assert info.value.code == 2


def test_command_is_required():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2