"""Coloring validity oracle.

:func:`assert_coloring` stops at the first broken invariant and raises
:class:`~vertex_coloring.exceptions.ColoringInvariantViolation` with the
vertex, edge and color values involved. :func:`validate_coloring` checks
everything and returns a :class:`ValidationResult` listing every problem.
"""

from dataclasses import dataclass, field
from typing import Hashable, List, Mapping, Optional, Tuple, Union

import numpy as np

from .algorithms.base import Coloring
from .exceptions import ColoringInvariantViolation
from .graph import Graph

ColoringLike = Union[Coloring, Mapping[Hashable, int]]


def _color_map(coloring: ColoringLike) -> Mapping[Hashable, int]:
    return coloring.colors if isinstance(coloring, Coloring) else coloring


def _is_color(c: object, n: int) -> bool:
    return isinstance(c, (int, np.integer)) and not isinstance(c, bool) and 0 <= c < n


@dataclass
class ValidationResult:
    """Detailed coloring validation result."""
    valid: bool
    num_colors: int
    num_vertices: int
    expected_colors: Optional[int] = None
    missing_vertices: List[Hashable] = field(default_factory=list)
    extra_vertices: List[Hashable] = field(default_factory=list)
    out_of_range: List[Tuple[Hashable, object]] = field(default_factory=list)  # (vertex, color)
    edge_violations: List[Tuple[Hashable, Hashable, int]] = field(default_factory=list)  # (u, v, color)


def validate_coloring(
    graph: Graph,
    coloring: ColoringLike,
    expected_colors: Optional[int] = None,
) -> ValidationResult:
    """Check every coloring invariant and report all violations."""
    colors = _color_map(coloring)
    n = graph.number_of_vertices()
    vertices = graph.vertex_set()

    missing = [v for v in graph if v not in colors]
    extra = [v for v in colors if v not in vertices]
    out_of_range = [(v, colors[v]) for v in graph if v in colors and not _is_color(colors[v], n)]
    edge_violations = [
        (u, v, colors[u])
        for u, v in graph.to_networkx().edges()
        if u in colors and v in colors and colors[u] == colors[v]
    ]
    num_colors = len(set(colors.values()))

    valid = (
        num_colors <= n
        and (expected_colors is None or num_colors == expected_colors)
        and not missing
        and not extra
        and not out_of_range
        and not edge_violations
    )
    return ValidationResult(
        valid=valid,
        num_colors=num_colors,
        num_vertices=n,
        expected_colors=expected_colors,
        missing_vertices=missing,
        extra_vertices=extra,
        out_of_range=out_of_range,
        edge_violations=edge_violations,
    )


def assert_coloring(
    graph: Graph,
    coloring: ColoringLike,
    expected_colors: Optional[int] = None,
) -> None:
    """Check a coloring against *graph* and raise on the first violation.

    Checks, in order:
      1. the number of distinct colors is at most n;
      2. it equals *expected_colors*, when given;
      3. every vertex has a color in ``[0, n)`` and no other key is colored;
      4. the endpoints of every edge have different colors.

    Raises:
        ColoringInvariantViolation: describing the first failed check.
    """
    colors = _color_map(coloring)
    n = graph.number_of_vertices()
    num_colors = len(set(colors.values()))

    if num_colors > n:
        raise ColoringInvariantViolation(
            "color_bound", f"{num_colors} colors used on a graph with {n} vertices"
        )
    if expected_colors is not None and num_colors != expected_colors:
        raise ColoringInvariantViolation(
            "expected_colors", f"expected {expected_colors} colors, got {num_colors}"
        )

    for v in graph:
        if v not in colors:
            raise ColoringInvariantViolation("missing_vertex", f"vertex {v!r} has no color", vertex=v)
        c = colors[v]
        if not _is_color(c, n):
            raise ColoringInvariantViolation(
                "color_range",
                f"vertex {v!r} has color {c!r}, outside [0, {n})",
                vertex=v,
                colors={v: c},
            )
    vertices = graph.vertex_set()
    for v in colors:
        if v not in vertices:
            raise ColoringInvariantViolation(
                "extra_vertex",
                f"color {colors[v]!r} assigned to {v!r}, which is not a vertex",
                vertex=v,
                colors={v: colors[v]},
            )

    for u, v in graph.to_networkx().edges():
        if colors[u] == colors[v]:
            raise ColoringInvariantViolation(
                "proper_coloring",
                f"edge ({u!r}, {v!r}) has both endpoints colored {colors[u]}",
                edge=(u, v),
                colors={u: colors[u], v: colors[v]},
            )


def verify_coloring(graph: Graph, coloring: ColoringLike) -> bool:
    """True iff *coloring* is a proper coloring of *graph* within the color bound."""
    return validate_coloring(graph, coloring).valid
