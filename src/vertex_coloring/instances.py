"""Fixed benchmark graphs for coloring tests.

Every builder returns a fresh frozen :class:`~vertex_coloring.graph.Graph`, so
no fixture state is shared between callers.
"""

import networkx as nx

from .graph import Graph


def sample_5() -> Graph:
    """Small 5-vertex graph. Chromatic number = 3.

    Edge 1-3 is inserted twice; the second insertion is a no-op.
    """
    g = Graph()
    for v in range(1, 6):
        g.add_vertex(v)
    g.add_edge(1, 2)
    g.add_edge(1, 3)
    g.add_edge(1, 3)
    g.add_edge(1, 4)
    g.add_edge(1, 5)
    g.add_edge(2, 3)
    g.add_edge(3, 4)
    g.add_edge(3, 5)
    return g.freeze()


# myciel3.col / myciel4.col by Michael Trick (mat.gsia.cmu.edu/COLOR/instances).
# Mycielski transformation: triangle free, increasing chromatic number.
_MYCIEL3_EDGES = [
    (1, 2), (1, 4), (1, 7), (1, 9),
    (2, 3), (2, 6), (2, 8),
    (3, 5), (3, 7), (3, 10),
    (4, 5), (4, 6), (4, 10),
    (5, 8), (5, 9),
    (6, 11), (7, 11), (8, 11), (9, 11), (10, 11),
]

_MYCIEL4_EDGES = [
    (1, 2), (1, 4), (1, 7), (1, 9), (1, 13), (1, 15), (1, 18), (1, 20),
    (2, 3), (2, 6), (2, 8), (2, 12), (2, 14), (2, 17), (2, 19),
    (3, 5), (3, 7), (3, 10), (3, 13), (3, 16), (3, 18), (3, 21),
    (4, 5), (4, 6), (4, 10), (4, 12), (4, 16), (4, 17), (4, 21),
    (5, 8), (5, 9), (5, 14), (5, 15), (5, 19), (5, 20),
    (6, 11), (6, 13), (6, 15), (6, 22),
    (7, 11), (7, 12), (7, 14), (7, 22),
    (8, 11), (8, 13), (8, 16), (8, 22),
    (9, 11), (9, 12), (9, 16), (9, 22),
    (10, 11), (10, 14), (10, 15), (10, 22),
    (11, 17), (11, 18), (11, 19), (11, 20), (11, 21),
    (12, 23), (13, 23), (14, 23), (15, 23), (16, 23), (17, 23),
    (18, 23), (19, 23), (20, 23), (21, 23), (22, 23),
]

# Sequential greedy in order 1..7 and DSatur both need 4 colors here.
_GREEDY_ADVERSARIAL_7_EDGES = [
    (1, 2), (1, 3), (1, 4),
    (2, 3), (2, 5),
    (4, 6), (4, 7),
    (5, 6), (5, 7),
    (6, 7),
]


def myciel3() -> Graph:
    """Mycielski graph on 11 vertices, 20 edges. Chromatic number = 4."""
    return Graph.from_edges(range(1, 12), _MYCIEL3_EDGES).freeze()


def myciel4() -> Graph:
    """Mycielski graph on 23 vertices, 71 edges. Chromatic number = 5."""
    return Graph.from_edges(range(1, 24), _MYCIEL4_EDGES).freeze()


def greedy_adversarial_7() -> Graph:
    """7-vertex graph on which greedy and DSatur miss the optimum. Chromatic number = 3.

    How many colors a heuristic uses on it depends on the heuristic, so it is
    not recorded here.
    """
    return Graph.from_edges(range(1, 8), _GREEDY_ADVERSARIAL_7_EDGES).freeze()


def mycielski(graph: Graph) -> Graph:
    """Mycielski transformation of *graph*.

    The result has ``2n + 1`` vertices labelled ``0 .. 2n`` and
    ``3m + n`` edges; it is triangle free when *graph* is, and its chromatic
    number is one higher.
    """
    return Graph.from_networkx(nx.mycielskian(graph.to_networkx())).freeze()


KNOWN_CHROMATIC = {
    "sample_5": 3,
    "myciel3": 4,
    "myciel4": 5,
    "greedy_adversarial_7": 3,
}

FIXED_INSTANCES = {
    "sample_5": sample_5,
    "myciel3": myciel3,
    "myciel4": myciel4,
    "greedy_adversarial_7": greedy_adversarial_7,
}
