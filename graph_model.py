# graph_model.py
import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Dict, List, Sequence, Tuple

from graph_errors import InvalidArgumentError, VertexNotFoundError
import traversal

logger = logging.getLogger(__name__)

# matrix cell value for "no edge"
NO_EDGE = math.inf


@dataclass(frozen=True)
class Vertex:
    index: int
    name: str


@dataclass(frozen=True)
class Edge:
    destination: int
    weight: float


class Graph:
    """Graph over a fixed set of named vertices.

    Edges are kept twice: as an adjacency list (index -> edges in insertion
    order, duplicates allowed) and as an n x n weight matrix holding NO_EDGE
    where there is no edge. Every mutation updates both.
    """

    def __init__(self, vertex_names: Sequence[str], directed: bool = False):
        self._directed = bool(directed)
        self._name_to_index: Dict[str, int] = {}
        self._index_to_name: Dict[int, str] = {}

        for i, name in enumerate(vertex_names):
            if name in self._name_to_index:
                raise InvalidArgumentError(f"Duplicate vertex name: {name!r}")
            self._name_to_index[name] = i
            self._index_to_name[i] = name

        n = len(self._index_to_name)
        self._num_vertices = n
        self._adj: Dict[int, List[Edge]] = {i: [] for i in range(n)}
        self._matrix: List[List[float]] = [[NO_EDGE] * n for _ in range(n)]

        logger.debug("Created %s graph with %d vertices",
                     "directed" if self._directed else "undirected", n)

    def __repr__(self):
        kind = "directed" if self._directed else "undirected"
        return f"Graph(N={self._num_vertices}, {kind})"

    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    @property
    def directed(self) -> bool:
        return self._directed

    def add_edge(self, source: str, destination: str, weight: float):
        u = self.vertex_index(source)
        v = self.vertex_index(destination)
        if isinstance(weight, bool) or not isinstance(weight, Real):
            raise InvalidArgumentError(f"Weight must be a number, got {weight!r}")
        try:
            w = float(weight)
        except OverflowError:
            w = math.inf
        if not math.isfinite(w):
            raise InvalidArgumentError(f"Weight must be finite, got {weight!r}")

        self._adj[u].append(Edge(v, w))
        self._matrix[u][v] = w
        # an undirected self-loop is recorded once
        if not self._directed and u != v:
            self._adj[v].append(Edge(u, w))
            self._matrix[v][u] = w

        logger.debug("Added edge %s -> %s (w=%g)", source, destination, w)

    def bfs(self, start: str) -> List[str]:
        return traversal.bfs(self, start)

    def dfs(self, start: str) -> List[str]:
        return traversal.dfs(self, start)

    # ---------- Read accessors ----------
    def has_vertex(self, name: str) -> bool:
        return name in self._name_to_index

    def vertex_index(self, name: str) -> int:
        try:
            return self._name_to_index[name]
        except KeyError:
            raise VertexNotFoundError(name) from None

    def vertex_name(self, index: int) -> str:
        self._check_index(index)
        return self._index_to_name[index]

    def vertex_names(self) -> List[str]:
        return [self._index_to_name[i] for i in range(self._num_vertices)]

    def vertices(self) -> List[Vertex]:
        return [Vertex(index=i, name=self._index_to_name[i])
                for i in range(self._num_vertices)]

    def neighbors(self, name: str) -> List[Edge]:
        return list(self._adj[self.vertex_index(name)])

    def adjacency_matrix(self) -> List[List[float]]:
        return [list(row) for row in self._matrix]

    def weight(self, source: str, destination: str) -> float:
        return self._matrix[self.vertex_index(source)][self.vertex_index(destination)]

    def has_edge(self, source: str, destination: str) -> bool:
        return self.weight(source, destination) != NO_EDGE

    def edges_at(self, index: int) -> Tuple[Edge, ...]:
        self._check_index(index)
        return tuple(self._adj[index])

    def _check_index(self, index: int):
        # bool is an int subclass, but True is not a vertex index
        if (isinstance(index, bool) or not isinstance(index, int)
                or not 0 <= index < self._num_vertices):
            raise VertexNotFoundError(index)
