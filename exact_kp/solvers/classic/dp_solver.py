# exact_kp/solvers/classic/dp_solver.py
import bisect
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from exact_kp.problem import Problem, Solution
from exact_kp.solvers.interface import SolverInterface

logger = logging.getLogger(__name__)

# (capacity, item_count) -> best value
ValueFunction = Callable[[int, int], int]


def oracle(capacity: int, count: int, weights: Sequence[int], values: Sequence[int],
           previous: Optional[ValueFunction] = None) -> int:
    """
    Maximum value achievable with the first `count` items under `capacity`.

    Args:
        capacity (int): Remaining knapsack capacity.
        count (int): Number of leading items that may be used.
        weights (Sequence[int]): Item weights.
        values (Sequence[int]): Item values.
        previous (callable, optional): Answers the same question for `count - 1` items.
            Defaults to the plain recursion, which is exponential in `count`.

    Returns:
        int: The optimal value of the sub-problem.
    """
    if count <= 0:
        return 0
    if capacity < 0:
        raise ValueError(f"Oracle queried with negative capacity {capacity} for {count} items.")
    if previous is None:
        def previous(c, j):
            return oracle(c, j, weights, values)

    j = count - 1
    without_item = previous(capacity, count - 1)
    if weights[j] > capacity:
        return without_item
    with_item = values[j] + previous(capacity - weights[j], count - 1)
    return max(without_item, with_item)


class OracleCache:
    """
    Staircase representation of the oracle.

    Row `j` holds the ascending (capacity_threshold, value) points at which the
    best value using the first `j` items strictly increases. Every row starts
    with the (0, 0) anchor.
    """

    def __init__(self, capacity_limit: int, rows: List[List[Tuple[int, int]]],
                 weights: Sequence[int], values: Sequence[int]):
        self.capacity_limit = capacity_limit
        self.rows = rows
        self.weights = weights
        self.values = values

    @classmethod
    def build(cls, capacity_limit: int, weights: Sequence[int], values: Sequence[int]) -> "OracleCache":
        """Builds the rows for item counts 0..n, each row evaluated through the previous one."""
        cache = cls(capacity_limit, [[(0, 0)]], weights, values)

        for count in range(1, len(weights) + 1):
            row = [(0, 0)]
            for capacity in range(capacity_limit + 1):
                value = oracle(capacity, count, weights, values, previous=cache.query)
                if value > row[-1][1]:
                    row.append((capacity, value))
            cache.rows.append(row)

        logger.debug(
            f"Oracle cache built for {len(weights)} items up to capacity {capacity_limit}: "
            f"{sum(len(row) for row in cache.rows)} steps stored."
        )
        return cache

    def __len__(self) -> int:
        return len(self.rows)

    def query(self, capacity: int, count: int) -> int:
        """Value of the highest step at or below `capacity` in row `count`."""
        if count < 0:
            return 0
        if capacity < 0:
            raise ValueError(f"Cache queried with negative capacity {capacity} for {count} items.")
        if capacity > self.capacity_limit:
            raise ValueError(f"Capacity {capacity} is beyond the cached limit {self.capacity_limit}.")
        if count >= len(self.rows):
            raise IndexError(f"No cached row for {count} items; only {len(self.rows)} rows were built.")

        row = self.rows[count]
        # rightmost threshold <= capacity
        position = bisect.bisect_right(row, (capacity, float('inf'))) - 1
        return row[position][1]

    def lookup(self, capacity: int, count: int) -> int:
        """Like query, but answers the row one past the cache with a single oracle step."""
        if count == len(self.rows):
            return oracle(capacity, count, self.weights, self.values, previous=self.query)
        return self.query(capacity, count)


def dynamic_solve(problem: Problem) -> Solution:
    """
    Solves the 0/1 knapsack problem exactly with the cached oracle.

    The cache is built once for the full capacity; the chosen items are then
    recovered by walking the items from last to first and checking whether
    allowing item i raises the optimal value at the remaining capacity.
    """
    n = len(problem)
    cache = OracleCache.build(problem.capacity, problem.weights, problem.values)

    remaining = problem.capacity
    total_value = 0
    contained = []
    for i in range(n - 1, -1, -1):
        before = cache.lookup(remaining, i)
        after = cache.lookup(remaining, i + 1)
        if before < after:
            contained.append(True)
            remaining -= problem.weights[i]
            total_value += problem.values[i]
        else:
            contained.append(False)
    # built back to front
    contained.reverse()

    solution = Solution(value=total_value, contained=tuple(contained))
    solution.check(problem)
    assert solution.value == cache.lookup(problem.capacity, n)
    return solution


class DPSolver(SolverInterface):
    """
    An exact solver for the 0-1 Knapsack Problem using the staircase-cached
    dynamic programming recurrence.
    """
    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "Dynamic Programming"

    def solve_problem(self, problem: Problem) -> Solution:
        return dynamic_solve(problem)
