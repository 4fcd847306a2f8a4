# exact_kp/solvers/classic/bnb_solver.py
# -*- coding: utf-8 -*-

'''
Best-first branch and bound for the 0/1 knapsack problem.

Items are branched on in efficiency order (value-to-weight ratio, descending),
and every search node carries the fractional-relaxation bound of its
remaining items. The node with the highest bound is always expanded first, so
the search can stop as soon as that bound no longer beats the incumbent.
'''

import itertools
import logging
from dataclasses import dataclass
from fractions import Fraction
from queue import PriorityQueue
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from exact_kp.problem import Problem, Solution
from exact_kp.solvers.interface import SolverInterface

logger = logging.getLogger(__name__)

# (value, weight) of an item, in efficiency order
OrderedItem = Tuple[int, int]


def efficiency(value: int, weight: int) -> Union[Fraction, float]:
    """Exact value-to-weight ratio; zero-weight items rank first when they are worth anything."""
    if weight > 0:
        return Fraction(value, weight)
    return float('inf') if value > 0 else 0.0


def efficiency_order(problem: Problem) -> List[int]:
    """
    Item indices sorted by value-to-weight ratio, descending.
    The sort is stable, so equal ratios keep their original index order.
    """
    return sorted(
        range(len(problem)),
        key=lambda i: efficiency(problem.values[i], problem.weights[i]),
        reverse=True
    )


def fractional_bound(value: int, room: int, depth: int, items: Sequence[OrderedItem]) -> Fraction:
    """
    Upper bound for a node: greedily fill the remaining room with items[depth:],
    taking a fraction of the first item that no longer fits.
    Kept as an exact rational so large values never round below a reachable total.
    """
    bound = Fraction(value)
    for item_value, item_weight in items[depth:]:
        if item_weight <= room:
            room -= item_weight
            bound += item_value
        else:
            bound += Fraction(item_value * room, item_weight)
            break # knapsack is full
    return bound


@dataclass(frozen=True)
class SearchNode:
    """
    A partial assignment in the search tree.

    Attributes:
        value: Value of the items taken so far.
        room: Capacity left.
        bound: Fractional-relaxation bound on any completion of this node.
        decisions: Take/skip flags for the first items in efficiency order.
    """
    value: int
    room: int
    bound: Fraction
    decisions: Tuple[bool, ...] = ()

    @property
    def depth(self) -> int:
        return len(self.decisions)

    def is_terminal(self, n_items: int) -> bool:
        return self.depth >= n_items

    def take(self, items: Sequence[OrderedItem]) -> Optional["SearchNode"]:
        """Child that takes the next item, or None when it does not fit."""
        item_value, item_weight = items[self.depth]
        if item_weight > self.room:
            return None
        return self._child(items, self.value + item_value, self.room - item_weight, True)

    def skip(self, items: Sequence[OrderedItem]) -> "SearchNode":
        """Child that leaves the next item out."""
        return self._child(items, self.value, self.room, False)

    def _child(self, items, value, room, taken) -> "SearchNode":
        depth = self.depth + 1
        bound = fractional_bound(value, room, depth, items)
        return SearchNode(value=value, room=room, bound=bound, decisions=self.decisions + (taken,))


def bounding_solve(problem: Problem, node_limit: Optional[int] = None) -> Solution:
    """
    Solves the 0/1 knapsack problem exactly with best-first branch and bound.

    Args:
        problem (Problem): The instance to solve.
        node_limit (int, optional): Maximum number of nodes to expand. When the
            budget runs out the incumbent is returned with optimal=False.

    Returns:
        Solution: The optimal value and the chosen items in original order.
    """
    n = len(problem)
    order = efficiency_order(problem)
    items = [(problem.values[i], problem.weights[i]) for i in order]

    root = SearchNode(value=0, room=problem.capacity, bound=fractional_bound(0, problem.capacity, 0, items))
    incumbent = root

    # (-bound, insertion sequence, node); the sequence breaks ties first-in first-out
    frontier = PriorityQueue()
    sequence = itertools.count()
    frontier.put((-root.bound, next(sequence), root))

    expanded = 0
    optimal = True
    while not frontier.empty():
        upper_bound_neg, _, node = frontier.get()

        # nothing left in the frontier can beat the incumbent
        if -upper_bound_neg <= incumbent.value:
            break
        if node.is_terminal(n):
            continue
        if node_limit is not None and expanded >= node_limit:
            logger.warning(
                f"Node limit of {node_limit} reached with best bound {float(-upper_bound_neg):.2f}; "
                f"returning incumbent value {incumbent.value}."
            )
            optimal = False
            break
        expanded += 1

        for child in (node.take(items), node.skip(items)):
            if child is None:
                continue
            if child.value > incumbent.value:
                incumbent = child
                logger.debug(f"New incumbent {incumbent.value} at depth {incumbent.depth}")
            if child.bound > incumbent.value:
                frontier.put((-child.bound, next(sequence), child))

    logger.debug(f"Branch and bound expanded {expanded} nodes for {n} items.")

    # undecided items are skipped
    decisions = incumbent.decisions + (False,) * (n - incumbent.depth)
    contained = [False] * n
    for position, item_index in enumerate(order):
        contained[item_index] = decisions[position]

    solution = Solution(value=incumbent.value, contained=tuple(contained), optimal=optimal)
    solution.check(problem)
    return solution


class BranchAndBoundSolver(SolverInterface):
    """
    An exact solver for the 0-1 Knapsack Problem using best-first Branch and Bound.
    """
    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "Branch and Bound"
        self.node_limit = self.config.get("node_limit")

    def solve_problem(self, problem: Problem) -> Solution:
        return bounding_solve(problem, node_limit=self.node_limit)
