# traversal.py
import logging
from collections import deque
from typing import TYPE_CHECKING, Deque, List, Tuple

if TYPE_CHECKING:
    from graph_model import Graph

logger = logging.getLogger(__name__)


def bfs(graph: "Graph", start: str) -> List[str]:
    """Breadth-first order of the vertices reachable from start.

    Neighbors are taken in adjacency-list order. An unknown start vertex
    gives an empty list.
    """
    if not graph.has_vertex(start):
        logger.debug("BFS: unknown start vertex %r", start)
        return []

    s = graph.vertex_index(start)
    visited = [False] * graph.num_vertices
    visited[s] = True
    queue: Deque[int] = deque([s])
    order: List[str] = []

    while queue:
        u = queue.popleft()
        order.append(graph.vertex_name(u))
        for edge in graph.edges_at(u):
            v = edge.destination
            if not visited[v]:
                visited[v] = True
                queue.append(v)

    logger.debug("BFS from %s: %s", start, order)
    return order


def dfs(graph: "Graph", start: str) -> List[str]:
    """Depth-first (pre-order) order of the vertices reachable from start.

    Iterative: each stack frame is (vertex index, position of the next
    neighbor to look at), which gives the same order as the recursive
    version without touching the interpreter's recursion limit.
    """
    if not graph.has_vertex(start):
        logger.debug("DFS: unknown start vertex %r", start)
        return []

    s = graph.vertex_index(start)
    visited = [False] * graph.num_vertices
    visited[s] = True
    order: List[str] = [start]
    stack: List[Tuple[int, int]] = [(s, 0)]

    while stack:
        u, cursor = stack[-1]
        edges = graph.edges_at(u)
        while cursor < len(edges) and visited[edges[cursor].destination]:
            cursor += 1
        if cursor == len(edges):
            stack.pop()
            continue
        stack[-1] = (u, cursor + 1)
        v = edges[cursor].destination
        visited[v] = True
        order.append(graph.vertex_name(v))
        stack.append((v, 0))

    logger.debug("DFS from %s: %s", start, order)
    return order
