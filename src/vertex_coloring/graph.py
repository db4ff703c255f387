"""Minimal undirected graph model used by generators, algorithms and the validator.

The graph is a thin layer over :class:`networkx.Graph` that adds the two rules
coloring code relies on: edges may only join vertices that already exist, and
a graph handed to an algorithm can be frozen so it stays unchanged.
"""

from dataclasses import dataclass
from typing import Hashable, Iterable, Iterator, List, Set, Tuple

import networkx as nx

from .exceptions import FrozenGraphError, InvalidEdgeError


@dataclass(frozen=True, eq=False)
class Edge:
    """Unordered vertex pair. ``Edge(1, 2) == Edge(2, 1)``."""

    source: Hashable
    target: Hashable

    def endpoints(self) -> Tuple[Hashable, Hashable]:
        return self.source, self.target

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return frozenset((self.source, self.target)) == frozenset((other.source, other.target))

    def __hash__(self) -> int:
        return hash(frozenset((self.source, self.target)))

    def __repr__(self) -> str:
        return f"Edge({self.source!r}, {self.target!r})"


class Graph:
    """Simple undirected graph with set semantics on vertices and edges."""

    def __init__(self) -> None:
        self._g = nx.Graph()
        self._frozen = False

    @classmethod
    def from_edges(
        cls,
        vertices: Iterable[Hashable],
        edges: Iterable[Tuple[Hashable, Hashable]],
    ) -> "Graph":
        """Build a graph from a vertex list and an edge list in one call."""
        graph = cls()
        for v in vertices:
            graph.add_vertex(v)
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    @classmethod
    def from_networkx(cls, G: nx.Graph) -> "Graph":
        """Copy the vertices and edges of a networkx graph."""
        if G.is_directed() or G.is_multigraph():
            raise ValueError("Only simple undirected networkx graphs can be converted")
        return cls.from_edges(G.nodes(), G.edges())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, v: Hashable) -> None:
        self._check_mutable()
        self._g.add_node(v)

    def add_edge(self, u: Hashable, v: Hashable) -> Edge:
        """Add the undirected edge ``u-v``.

        Both endpoints must already be vertices. Adding an edge that is
        already present changes nothing.

        Raises:
            InvalidEdgeError: if ``u`` or ``v`` is not a vertex.
            FrozenGraphError: if the graph is frozen.
        """
        self._check_mutable()
        missing = [x for x in (u, v) if x not in self._g]
        if missing:
            raise InvalidEdgeError(u, v, missing)
        self._g.add_edge(u, v)
        return Edge(u, v)

    def freeze(self) -> "Graph":
        """Make the graph immutable and return it."""
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise FrozenGraphError("Graph is frozen and cannot be modified")

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def vertex_set(self) -> Set[Hashable]:
        return set(self._g.nodes())

    def edge_set(self) -> Set[Edge]:
        return {Edge(u, v) for u, v in self._g.edges()}

    def edge_endpoints(self, e: Edge) -> Tuple[Hashable, Hashable]:
        return e.source, e.target

    def vertices(self) -> List[Hashable]:
        """Vertices in insertion order."""
        return list(self._g.nodes())

    def neighbors(self, v: Hashable) -> List[Hashable]:
        return list(self._g.neighbors(v))

    def degree(self, v: Hashable) -> int:
        return self._g.degree(v)

    def has_edge(self, u: Hashable, v: Hashable) -> bool:
        return self._g.has_edge(u, v)

    def number_of_vertices(self) -> int:
        return self._g.number_of_nodes()

    def number_of_edges(self) -> int:
        return self._g.number_of_edges()

    def to_networkx(self) -> nx.Graph:
        """Read-only networkx view of this graph."""
        return self._g.copy(as_view=True)

    def __len__(self) -> int:
        return self._g.number_of_nodes()

    def __contains__(self, v: object) -> bool:
        return v in self._g

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._g.nodes())

    def __repr__(self) -> str:
        state = ", frozen" if self._frozen else ""
        return f"Graph({self.number_of_vertices()} vertices, {self.number_of_edges()} edges{state})"
