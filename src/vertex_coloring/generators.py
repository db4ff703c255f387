"""Graph generators: Gnp random graphs and complete graphs.

Random generation never touches global random state. The caller owns a
``numpy.random.Generator`` and passes it in; reusing the same seed with the
same parameters reproduces the same graph.
"""

from typing import Callable, Hashable, List, Optional, Union

import numpy as np

from .exceptions import NonDeterminismError
from .graph import Graph

SeedLike = Union[None, int, np.integer, np.random.SeedSequence, np.random.Generator]


def as_rng(seed: SeedLike = None) -> np.random.Generator:
    """Turn *seed* into a random generator.

    ``None`` gives a fresh, unseeded generator (fuzz runs only); an int or
    ``SeedSequence`` gives a seeded one; a ``Generator`` is returned as is so
    the caller keeps ownership of its state.
    """
    if seed is None:
        return np.random.default_rng()
    if isinstance(seed, np.random.Generator):
        return seed
    if isinstance(seed, (int, np.integer, np.random.SeedSequence)) and not isinstance(seed, bool):
        return np.random.default_rng(seed)
    raise TypeError(f"Cannot build a random generator from {type(seed).__name__}")


def spawn_rngs(seed: Union[int, np.random.SeedSequence], count: int) -> List[np.random.Generator]:
    """Independent generators for *count* trials, all derived from one seed.

    Each trial gets its own stream, so trials can run in any order or in
    parallel and still reproduce.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    ss = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
    return [np.random.default_rng(child) for child in ss.spawn(count)]


def _vertex_names(n: int, vertex_name: Optional[Callable[[int], Hashable]]) -> List[Hashable]:
    if n < 0:
        raise ValueError(f"Number of vertices must be non-negative, got {n}")
    if vertex_name is None:
        return list(range(n))
    names = [vertex_name(i) for i in range(n)]
    if len(set(names)) != n:
        raise ValueError("vertex_name must map 0..n-1 to distinct vertices")
    return names


def gnp_random_graph(
    n: int,
    p: float,
    rng: SeedLike = None,
    loops: bool = False,
    vertex_name: Optional[Callable[[int], Hashable]] = None,
) -> Graph:
    """Erdos-Renyi random graph G(n, p).

    Every unordered pair of distinct vertices is visited once, in
    lexicographic order of vertex index, and becomes an edge when
    ``rng.random() < p``.

    Args:
        n: Number of vertices.
        p: Edge inclusion probability in [0, 1].
        rng: Random source (see :func:`as_rng`).
        loops: Also draw a self-loop for each vertex with probability *p*.
        vertex_name: Injective map from index to vertex id; identity if None.

    Returns:
        A frozen graph. ``p == 0`` gives no edges, ``p == 1`` the complete graph.
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Edge probability must be in [0, 1], got {p}")
    names = _vertex_names(n, vertex_name)
    rng = as_rng(rng)

    graph = Graph()
    for v in names:
        graph.add_vertex(v)
    for i in range(n):
        start = i if loops else i + 1
        for j in range(start, n):
            if rng.random() < p:
                graph.add_edge(names[i], names[j])
    return graph.freeze()


def complete_graph(n: int, vertex_name: Optional[Callable[[int], Hashable]] = None) -> Graph:
    """Complete graph K_n with ``n*(n-1)/2`` edges."""
    names = _vertex_names(n, vertex_name)
    graph = Graph()
    for v in names:
        graph.add_vertex(v)
    for i in range(n):
        for j in range(i + 1, n):
            graph.add_edge(names[i], names[j])
    return graph.freeze()


def assert_reproducible(
    build: Callable[[np.random.Generator], Graph],
    seed: Union[int, np.random.SeedSequence],
) -> Graph:
    """Build a graph twice from the same seed and check both runs agree.

    Args:
        build: Function taking a random generator and returning a graph,
            e.g. ``lambda rng: gnp_random_graph(20, 0.35, rng)``.
        seed: Seed for both runs. A live generator cannot be replayed, so
            ``None`` and ``Generator`` are rejected.

    Returns:
        The graph from the first run.

    Raises:
        NonDeterminismError: if the two graphs differ.
    """
    if seed is None or isinstance(seed, np.random.Generator):
        raise ValueError("assert_reproducible needs a replayable seed, not a generator")
    first = build(as_rng(seed))
    second = build(as_rng(seed))

    differences = {}
    vertex_diff = first.vertex_set() ^ second.vertex_set()
    if vertex_diff:
        differences["vertices"] = vertex_diff
    edge_diff = first.edge_set() ^ second.edge_set()
    if edge_diff:
        differences["edges"] = edge_diff
    if differences:
        raise NonDeterminismError(
            f"Seed {seed!r} produced different graphs: "
            f"{len(vertex_diff)} differing vertices, {len(edge_diff)} differing edges",
            differences,
        )
    return first
