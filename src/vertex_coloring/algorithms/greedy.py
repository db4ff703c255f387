"""Sequential first-fit coloring under fixed, degree-based and random vertex orders."""

from typing import Dict, Hashable, Iterable, List, Optional

from ..generators import SeedLike, as_rng
from ..graph import Graph
from .base import Coloring, ColoringAlgorithm


def first_fit(graph: Graph, order: Iterable[Hashable]) -> Dict[Hashable, int]:
    """Give each vertex in *order* the smallest color unused by its colored neighbors."""
    colors: Dict[Hashable, int] = {}
    for v in order:
        used = {colors[u] for u in graph.neighbors(v) if u in colors}
        c = 0
        while c in used:
            c += 1
        colors[v] = c
    return colors


class GreedyColoring(ColoringAlgorithm):
    """First-fit in a given vertex order (default: insertion order)."""

    def __init__(self, graph: Graph, order: Optional[Iterable[Hashable]] = None) -> None:
        super().__init__(graph)
        if order is None:
            self.order = graph.vertices()
        else:
            self.order = list(order)
            if len(self.order) != len(graph) or set(self.order) != graph.vertex_set():
                raise ValueError("order must list every vertex of the graph exactly once")

    def _compute(self) -> Coloring:
        return Coloring(first_fit(self.graph, self.order))


class LargestDegreeFirstColoring(ColoringAlgorithm):
    """Welsh-Powell: first-fit over vertices sorted by non-increasing degree."""

    def _compute(self) -> Coloring:
        # sorted() is stable, so equal degrees keep insertion order
        order = sorted(self.graph.vertices(), key=self.graph.degree, reverse=True)
        return Coloring(first_fit(self.graph, order))


class RandomGreedyColoring(ColoringAlgorithm):
    """First-fit over a random permutation drawn from the caller's random source."""

    def __init__(self, graph: Graph, rng: SeedLike = None) -> None:
        super().__init__(graph)
        self.rng = as_rng(rng)

    def _compute(self) -> Coloring:
        vertices: List[Hashable] = self.graph.vertices()
        order = [vertices[i] for i in self.rng.permutation(len(vertices))]
        return Coloring(first_fit(self.graph, order))
