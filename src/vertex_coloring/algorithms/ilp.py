"""Exact coloring with an assignment ILP solved by HiGHS (scipy.optimize.milp).

ILP formulation, K = heuristic upper bound on the number of colors:
- x[i,k] in {0,1}: vertex i gets color k
- y[k] in {0,1}: color k is used
- Minimize: sum_k y[k]
- Subject to:
  - sum_k x[i,k] = 1          for every vertex i
  - x[i,k] + x[j,k] <= 1      for every edge (i,j) and color k
  - x[i,k] - y[k] <= 0        for every vertex i and color k
  - y[k] - y[k+1] >= 0        (colors are used in order)
  - sum_k y[k] >= |Q|         for a maximum clique Q, whose vertices are
                              fixed to colors 0 .. |Q|-1
"""

import time
from typing import Optional

import numpy as np
from scipy.optimize import milp, LinearConstraint, Bounds
from scipy.sparse import lil_matrix

from ..exceptions import ColoringError
from ..graph import Graph
from .base import Coloring, ColoringAlgorithm, max_clique, normalize_colors
from .greedy import LargestDegreeFirstColoring


class ILPColoring(ColoringAlgorithm):
    """Optimal coloring via a MILP model.

    Args:
        graph: Graph to color.
        max_colors: Number of color slots K. Defaults to the largest-degree-
            first greedy result.
        time_limit: Solver time limit in seconds. When it is hit, the best
            feasible coloring found so far is returned.
        verbose: Print bounds and solver status.
    """

    def __init__(
        self,
        graph: Graph,
        max_colors: Optional[int] = None,
        time_limit: Optional[float] = None,
        verbose: bool = False,
    ) -> None:
        super().__init__(graph)
        if max_colors is not None and max_colors < 1:
            raise ValueError(f"max_colors must be positive, got {max_colors}")
        self.max_colors = max_colors
        self.time_limit = time_limit
        self.verbose = verbose
        self.solve_seconds = 0.0

    def _compute(self) -> Coloring:
        vertices = self.graph.vertices()
        n = len(vertices)
        if n == 0:
            return Coloring({})

        clique = max_clique(self.graph)
        if self.max_colors is None:
            heuristic = LargestDegreeFirstColoring(self.graph).get_coloring()
            if heuristic.number_colors <= len(clique):
                if self.verbose:
                    print(f"  greedy meets clique bound ({len(clique)}), skipping ILP")
                return heuristic
            K = heuristic.number_colors
        else:
            K = min(self.max_colors, n)

        node_to_idx = {v: i for i, v in enumerate(vertices)}
        edges = [(node_to_idx[u], node_to_idx[v]) for u, v in self.graph.to_networkx().edges()]
        m = len(edges)

        num_x = n * K
        num_vars = num_x + K

        def x_idx(i: int, k: int) -> int:
            return i * K + k

        def y_idx(k: int) -> int:
            return num_x + k

        c = np.zeros(num_vars)
        c[num_x:] = 1.0

        lb_vars = np.zeros(num_vars)
        ub_vars = np.ones(num_vars)
        if len(clique) > K:
            raise ColoringError(
                f"max_colors={K} is below the clique lower bound {len(clique)}"
            )
        for k, v in enumerate(clique):
            lb_vars[x_idx(node_to_idx[v], k)] = 1.0

        num_constraints = n + m * K + n * K + (K - 1) + 1
        A = lil_matrix((num_constraints, num_vars))
        lb = np.full(num_constraints, -np.inf)
        ub = np.zeros(num_constraints)
        row = 0

        # Assignment
        for i in range(n):
            for k in range(K):
                A[row, x_idx(i, k)] = 1.0
            lb[row] = ub[row] = 1.0
            row += 1

        # Conflict
        for i, j in edges:
            for k in range(K):
                A[row, x_idx(i, k)] += 1.0
                A[row, x_idx(j, k)] += 1.0
                ub[row] = 1.0
                row += 1

        # Linking
        for i in range(n):
            for k in range(K):
                A[row, x_idx(i, k)] = 1.0
                A[row, y_idx(k)] = -1.0
                row += 1

        # Symmetry breaking
        for k in range(K - 1):
            A[row, y_idx(k)] = 1.0
            A[row, y_idx(k + 1)] = -1.0
            lb[row] = 0.0
            ub[row] = np.inf
            row += 1

        # Clique lower bound
        for k in range(K):
            A[row, y_idx(k)] = 1.0
        lb[row] = float(len(clique))
        ub[row] = np.inf

        options = {}
        if self.time_limit is not None:
            options["time_limit"] = float(self.time_limit)

        if self.verbose:
            print(f"  ILP: n={n} m={m} K={K} clique={len(clique)} vars={num_vars}")
        start = time.time()
        result = milp(
            c=c,
            constraints=LinearConstraint(A.tocsr(), lb, ub),
            integrality=np.ones(num_vars, dtype=int),
            bounds=Bounds(lb=lb_vars, ub=ub_vars),
            options=options if options else None,
        )
        self.solve_seconds = time.time() - start
        if self.verbose:
            print(f"  ILP status={result.status} ({result.message})  time={self.solve_seconds:.2f}s")

        if result.x is None:
            raise ColoringError(f"ILP solver found no coloring: {result.message}")

        x = result.x[:num_x].reshape(n, K)
        colors = {v: int(np.argmax(x[i])) for i, v in enumerate(vertices)}
        return Coloring(normalize_colors(colors))
