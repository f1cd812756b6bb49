"""
Unit tests for the text rendering of graphs.
"""

from graph_model import NO_EDGE, Graph
from sample_graphs import CAMPUS_VERTICES, campus_graph
from text_view import (format_adjacency_list, format_adjacency_matrix,
                       format_traversal, format_weight)


def small_graph():
    g = Graph(["A", "B"], directed=True)
    g.add_edge("A", "B", 1.5)
    return g


def test_format_weight():
    assert format_weight(NO_EDGE) == "INF"
    assert format_weight(3.0) == "3"
    assert format_weight(2.5) == "2.5"


def test_adjacency_list():
    assert format_adjacency_list(small_graph()).splitlines() == [
        "A               -> B(1.5)",
        "B               -> [No Neighbors]",
    ]


def test_adjacency_list_keeps_duplicates_in_order():
    g = Graph(["A", "B", "C"], directed=False)
    g.add_edge("A", "C", 2)
    g.add_edge("A", "B", 1)
    g.add_edge("A", "C", 4)
    first = format_adjacency_list(g).splitlines()[0]
    assert first.endswith("-> C(2), B(1), C(4)")


def test_adjacency_matrix():
    assert format_adjacency_matrix(small_graph()).splitlines() == [
        " " * 15 + "A       B",
        "A              INF     1.5",
        "B              INF     INF",
    ]


def test_adjacency_matrix_truncates_long_names():
    g = campus_graph()
    lines = format_adjacency_matrix(g).splitlines()
    assert len(lines) == len(CAMPUS_VERTICES) + 1
    assert "Studen  " in lines[0]
    assert "Student Parking" not in lines[0]
    assert lines[1].startswith("Gate")
    # Gate has no self-loop
    assert lines[1].split()[1] == "INF"


def test_empty_graph_renders_empty():
    g = Graph([])
    assert format_adjacency_list(g) == ""
    assert format_adjacency_matrix(g) == ""


def test_format_traversal():
    assert format_traversal(["A", "B", "D", "C"]) == "A -> B -> D -> C"
    assert format_traversal([]) == ""


def test_adjacency_matrix_long_row_label_keeps_gap():
    g = Graph(["Very Long Vertex Name X", "B"], directed=True)
    g.add_edge("Very Long Vertex Name X", "B", 1)
    row = format_adjacency_matrix(g).splitlines()[1]
    assert row == "Very Long Vert INF     1.0"
    assert row.split()[-2:] == ["INF", "1.0"]
