# text_view.py
from typing import Iterable, List

from graph_model import NO_EDGE, Graph

INF_MARKER = "INF"
NAME_WIDTH = 15
CELL_WIDTH = 8


def format_weight(value: float) -> str:
    if value == NO_EDGE:
        return INF_MARKER
    return f"{value:g}"


def format_adjacency_list(graph: Graph) -> str:
    lines: List[str] = []
    for name in graph.vertex_names():
        edges = graph.neighbors(name)
        if edges:
            body = ", ".join(f"{graph.vertex_name(e.destination)}({format_weight(e.weight)})"
                             for e in edges)
        else:
            body = "[No Neighbors]"
        lines.append(f"{name:<{NAME_WIDTH}} -> {body}")
    return "\n".join(lines)


def format_adjacency_matrix(graph: Graph) -> str:
    names = graph.vertex_names()
    matrix = graph.adjacency_matrix()
    # leave at least one space between header columns
    short = CELL_WIDTH - 2

    header = " " * NAME_WIDTH + "".join(f"{n[:short]:<{CELL_WIDTH}}" for n in names)
    lines = [header.rstrip()]
    for name, row in zip(names, matrix):
        cells = "".join(
            f"{INF_MARKER:<{CELL_WIDTH}}" if w == NO_EDGE else f"{w:<{CELL_WIDTH}.1f}"
            for w in row
        )
        label = name[:NAME_WIDTH - 1]
        lines.append(f"{label:<{NAME_WIDTH}}{cells}".rstrip())
    return "\n".join(lines)


def format_traversal(order: Iterable[str]) -> str:
    return " -> ".join(order)
