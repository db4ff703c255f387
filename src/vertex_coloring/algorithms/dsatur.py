"""DSatur (saturation degree) coloring heuristic."""

from typing import Dict, Hashable, Set

from .base import Coloring, ColoringAlgorithm


class SaturationDegreeColoring(ColoringAlgorithm):
    """Brelaz's DSatur heuristic.

    Repeatedly colors the uncolored vertex with the most distinct colors
    among its neighbors (its saturation) using the smallest free color.
    Ties go to the vertex with more uncolored neighbors, then to the vertex
    inserted first.
    """

    def _compute(self) -> Coloring:
        vertices = self.graph.vertices()
        position = {v: i for i, v in enumerate(vertices)}
        saturation: Dict[Hashable, Set[int]] = {v: set() for v in vertices}
        uncolored_degree = {
            v: sum(1 for u in self.graph.neighbors(v) if u != v) for v in vertices
        }
        uncolored = set(vertices)
        colors: Dict[Hashable, int] = {}

        while uncolored:
            v = max(
                uncolored,
                key=lambda u: (len(saturation[u]), uncolored_degree[u], -position[u]),
            )
            c = 0
            while c in saturation[v]:
                c += 1
            colors[v] = c
            uncolored.discard(v)
            for u in self.graph.neighbors(v):
                if u in uncolored:
                    saturation[u].add(c)
                    uncolored_degree[u] -= 1

        return Coloring(colors)
