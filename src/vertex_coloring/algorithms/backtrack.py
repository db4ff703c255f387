"""Exact coloring by branch and bound with DSatur vertex selection.

The search starts from the DSatur coloring as upper bound and a maximum
clique as lower bound. At each node it branches on the uncolored vertex of
highest saturation, trying every color already in use and at most one new
color, and prunes branches that cannot beat the best coloring found so far.
Practical for graphs up to a few dozen vertices.
"""

from typing import Dict, Hashable, List

from ..graph import Graph
from .base import Coloring, ColoringAlgorithm, max_clique
from .dsatur import SaturationDegreeColoring


class BacktrackColoring(ColoringAlgorithm):
    """Optimal coloring via DSatur-ordered backtracking."""

    def __init__(self, graph: Graph, verbose: bool = False) -> None:
        super().__init__(graph)
        self.verbose = verbose
        self.nodes_explored = 0

    def _compute(self) -> Coloring:
        vertices = self.graph.vertices()
        if not vertices:
            return Coloring({})

        initial = SaturationDegreeColoring(self.graph).get_coloring()
        lower = len(max_clique(self.graph))
        if self.verbose:
            print(f"  bounds: lower={lower}  upper={initial.number_colors}")
        if initial.number_colors <= lower:
            return initial

        best = self._search(vertices, dict(initial.colors), initial.number_colors, lower)
        if self.verbose:
            print(f"  optimal={len(set(best.values()))}  nodes={self.nodes_explored}")
        return Coloring(best)

    def _search(
        self,
        vertices: List[Hashable],
        best: Dict[Hashable, int],
        best_k: int,
        lower: int,
    ) -> Dict[Hashable, int]:
        position = {v: i for i, v in enumerate(vertices)}
        neighbors = {v: [u for u in self.graph.neighbors(v) if u != v] for v in vertices}
        uncolored_degree = {v: len(neighbors[v]) for v in vertices}
        # saturation[v] maps color -> number of colored neighbors holding it
        saturation: Dict[Hashable, Dict[int, int]] = {v: {} for v in vertices}
        uncolored = set(vertices)
        colors: Dict[Hashable, int] = {}

        def assign(v: Hashable, c: int) -> None:
            colors[v] = c
            uncolored.discard(v)
            for u in neighbors[v]:
                if u in uncolored:
                    saturation[u][c] = saturation[u].get(c, 0) + 1
                    uncolored_degree[u] -= 1

        def unassign(v: Hashable, c: int) -> None:
            for u in neighbors[v]:
                if u in uncolored:
                    count = saturation[u][c] - 1
                    if count:
                        saturation[u][c] = count
                    else:
                        del saturation[u][c]
                    uncolored_degree[u] += 1
            uncolored.add(v)
            del colors[v]

        def branch(k_used: int) -> None:
            nonlocal best, best_k
            if k_used >= best_k:
                return
            if not uncolored:
                best, best_k = dict(colors), k_used
                if self.verbose:
                    print(f"  improved: {best_k} colors")
                return
            self.nodes_explored += 1
            v = max(
                uncolored,
                key=lambda u: (len(saturation[u]), uncolored_degree[u], -position[u]),
            )
            # colors >= best_k - 1 cannot lead to an improvement
            for c in range(min(k_used + 1, best_k - 1)):
                if c >= best_k - 1:
                    break
                if c in saturation[v]:
                    continue
                assign(v, c)
                branch(max(k_used, c + 1))
                unassign(v, c)
                if best_k <= lower:
                    return

        branch(0)
        return best
