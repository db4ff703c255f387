"""Error types raised by graph construction, generation and coloring validation."""

from typing import Any, Dict, Hashable, Optional, Sequence, Tuple


class ColoringError(Exception):
    """Base class for every error raised by vertex_coloring."""


class InvalidEdgeError(ColoringError, ValueError):
    """An edge references a vertex that is not in the graph."""

    def __init__(self, u: Hashable, v: Hashable, missing: Sequence[Hashable]) -> None:
        self.u = u
        self.v = v
        self.missing = tuple(missing)
        names = ", ".join(repr(m) for m in self.missing)
        super().__init__(f"Cannot add edge ({u!r}, {v!r}): vertex not in graph: {names}")


class FrozenGraphError(ColoringError, RuntimeError):
    """Mutation attempted on a frozen graph."""


class ColoringInvariantViolation(ColoringError, AssertionError):
    """A coloring breaks one of the proper-coloring invariants.

    Attributes:
        invariant: Short name of the violated check (``"color_bound"``,
            ``"expected_colors"``, ``"missing_vertex"``, ``"extra_vertex"``,
            ``"color_range"`` or ``"proper_coloring"``).
        vertex: The offending vertex, when the check is per vertex.
        edge: The offending ``(u, v)`` pair, when the check is per edge.
        colors: Color values involved, keyed by vertex.
    """

    def __init__(
        self,
        invariant: str,
        message: str,
        vertex: Optional[Hashable] = None,
        edge: Optional[Tuple[Hashable, Hashable]] = None,
        colors: Optional[Dict[Hashable, Any]] = None,
    ) -> None:
        self.invariant = invariant
        self.vertex = vertex
        self.edge = edge
        self.colors = dict(colors) if colors else {}
        super().__init__(f"[{invariant}] {message}")


class NonDeterminismError(ColoringError):
    """Two generations with identical seed and parameters produced different graphs."""

    def __init__(self, message: str, differences: Optional[Dict[str, Any]] = None) -> None:
        self.differences = dict(differences) if differences else {}
        super().__init__(message)
