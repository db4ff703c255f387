"""Vertex coloring strategies implementing the ColoringAlgorithm interface."""

from .base import Coloring, ColoringAlgorithm
from .greedy import GreedyColoring, LargestDegreeFirstColoring, RandomGreedyColoring
from .dsatur import SaturationDegreeColoring
from .backtrack import BacktrackColoring
from .ilp import ILPColoring

ALGORITHMS = {
    "greedy": GreedyColoring,
    "largest_degree_first": LargestDegreeFirstColoring,
    "random_greedy": RandomGreedyColoring,
    "dsatur": SaturationDegreeColoring,
    "backtrack": BacktrackColoring,
    "ilp": ILPColoring,
}


def make_algorithm(name: str, graph, **kwargs) -> ColoringAlgorithm:
    """Instantiate the algorithm registered under *name* for *graph*."""
    try:
        cls = ALGORITHMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown coloring algorithm: {name}. Use one of {sorted(ALGORITHMS)}."
        ) from None
    return cls(graph, **kwargs)
