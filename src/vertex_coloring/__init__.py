"""Graph generators, coloring algorithms and a validity oracle for proper vertex coloring."""

from .exceptions import (
    ColoringError,
    ColoringInvariantViolation,
    FrozenGraphError,
    InvalidEdgeError,
    NonDeterminismError,
)
from .graph import Edge, Graph
from .instances import (
    FIXED_INSTANCES,
    KNOWN_CHROMATIC,
    greedy_adversarial_7,
    myciel3,
    myciel4,
    mycielski,
    sample_5,
)
from .generators import as_rng, assert_reproducible, complete_graph, gnp_random_graph, spawn_rngs
from .algorithms import ALGORITHMS, Coloring, ColoringAlgorithm, make_algorithm
from .validation import ValidationResult, assert_coloring, validate_coloring, verify_coloring
