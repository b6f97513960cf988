import io

import pytest

from instafest.cli import Problem, answer, main, parse_input
from instafest.queries import ComponentQuery, CycleQuery, MaxHypeQuery, OrderQuery

HYPE = [1, 2, 3]
SAMPLE = "3 3\n1 2 3\n1 2\n2 3\n3 1\n4\n1\n2\n3\n4\n"
DAG = "4 3\n5 1 10 2\n1 2\n1 3\n3 4\n4\n4\n3\n2\n1\n"


def test_parse_input_reads_graph_and_queries():
    problem = parse_input(SAMPLE)
    assert isinstance(problem, Problem)
    assert problem.graph.vertex_count == len(HYPE)
    assert problem.graph.hype == tuple(HYPE)
    assert problem.graph.adjacency[3] == (1,)
    assert problem.queries == (1, 2, 3, 4)


def test_answer_on_cycle_sample():
    assert answer(SAMPLE) == f"YES\n1 3\nNO\n{sum(HYPE)}\n"


def test_answer_matches_queries_on_dag():
    graph = parse_input(DAG).graph
    expected = [
        MaxHypeQuery().run(graph),
        OrderQuery().run(graph),
        ComponentQuery().run(graph),
        CycleQuery().run(graph),
    ]
    assert answer(DAG) == "".join(f"{line}\n" for line in expected)


def test_unknown_query_types_are_skipped():
    text = "2 1\n1 1\n1 2\n3\n7\n1\n0\n"
    assert answer(text) == "NO\n"


@pytest.mark.parametrize(
    "text",
    ["", "3 3\n1 2 3\n1 2\n", "2 0\n1\n", "2 0\n1 2\n"],
)
def test_truncated_input_raises(text):
    with pytest.raises(ValueError):
        parse_input(text)


def test_non_integer_token_raises():
    with pytest.raises(ValueError):
        parse_input("2 0\n1 x\n0\n")


def test_edge_outside_graph_raises():
    with pytest.raises(ValueError):
        parse_input("2 1\n1 1\n1 3\n0\n")


def test_main_writes_answers(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE))
    assert main([]) == 0
    assert capsys.readouterr().out == answer(SAMPLE)


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3"))
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "instafest:" in captured.err