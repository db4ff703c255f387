"""Coloring result type and the abstract base class for coloring algorithms."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Hashable, List, Mapping, Optional

import networkx as nx

from ..graph import Graph


@dataclass(frozen=True)
class Coloring:
    """Immutable vertex -> color assignment produced by one algorithm run."""

    colors: Mapping[Hashable, int]
    number_colors: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", MappingProxyType(dict(self.colors)))
        object.__setattr__(self, "number_colors", len(set(self.colors.values())))

    def color_classes(self) -> List[FrozenSet[Hashable]]:
        """One independent set per color value, in ascending color order."""
        classes: Dict[int, set] = {}
        for v, c in self.colors.items():
            classes.setdefault(c, set()).add(v)
        return [frozenset(classes[c]) for c in sorted(classes)]

    def __hash__(self) -> int:
        return hash(frozenset(self.colors.items()))

    def __getitem__(self, v: Hashable) -> int:
        return self.colors[v]

    def __len__(self) -> int:
        return len(self.colors)


def normalize_colors(colors: Mapping[Hashable, int]) -> Dict[Hashable, int]:
    """Relabel colors to ``0 .. k-1`` in order of first appearance."""
    remap: Dict[int, int] = {}
    for c in colors.values():
        if c not in remap:
            remap[c] = len(remap)
    return {v: remap[c] for v, c in colors.items()}


def max_clique(graph: Graph) -> List[Hashable]:
    """A maximum clique of *graph*, used as a lower bound on the color count."""
    if len(graph) == 0:
        return []
    return max(nx.find_cliques(graph.to_networkx()), key=len)


class ColoringAlgorithm(ABC):
    """Interface for vertex coloring strategies.

    An instance is bound to one graph. :meth:`get_coloring` runs the strategy
    the first time it is called and returns the same :class:`Coloring` on
    every later call.

    A conforming strategy terminates on every finite simple graph, colors
    every vertex with a value in ``[0, n)``, never gives adjacent vertices the
    same color, and therefore uses exactly n colors on K_n. It does not need
    to be optimal and does not verify its own output.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self._coloring: Optional[Coloring] = None

    def get_coloring(self) -> Coloring:
        if self._coloring is None:
            self._coloring = self._compute()
        return self._coloring

    @abstractmethod
    def _compute(self) -> Coloring:
        """Run the strategy once on ``self.graph``."""
