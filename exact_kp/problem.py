# exact_kp/problem.py
# -*- coding: utf-8 -*-

'''
Data structures shared by the exact solvers:
- Problem: the immutable value/weight/capacity instance
- Solution: the optimal value together with the per-item inclusion flags
'''

import numbers
from dataclasses import dataclass
from typing import Iterable, Tuple


class InvalidProblemError(ValueError):
    """Raised when a knapsack instance is malformed (e.g. mismatched lengths)."""


def _as_int(x, what: str) -> int:
    """Returns x as an int, rejecting bools, floats and anything else that is not integral."""
    if isinstance(x, bool) or not isinstance(x, numbers.Integral):
        raise InvalidProblemError(f"{what} must be an integer, got {x!r}.")
    return int(x)


@dataclass(frozen=True)
class Problem:
    """
    A 0/1 knapsack instance.

    Attributes:
        values: Value of each item, indexed 0..n-1.
        weights: Weight of each item, index-aligned with values.
        capacity: Maximum total weight of the selected items.
    """
    values: Tuple[int, ...]
    weights: Tuple[int, ...]
    capacity: int

    def __post_init__(self):
        # frozen dataclass, so normalise through object.__setattr__
        object.__setattr__(self, 'values', tuple(_as_int(v, f"Value {i}") for i, v in enumerate(self.values)))
        object.__setattr__(self, 'weights', tuple(_as_int(w, f"Weight {i}") for i, w in enumerate(self.weights)))
        object.__setattr__(self, 'capacity', _as_int(self.capacity, "Capacity"))

        if len(self.values) != len(self.weights):
            raise InvalidProblemError(
                f"Got {len(self.values)} values but {len(self.weights)} weights; "
                "every item needs exactly one value and one weight."
            )
        if self.capacity < 0:
            raise InvalidProblemError(f"Capacity must be non-negative, got {self.capacity}.")
        for i, (value, weight) in enumerate(zip(self.values, self.weights)):
            if value < 0 or weight < 0:
                raise InvalidProblemError(
                    f"Item {i} has value {value} and weight {weight}; both must be non-negative."
                )

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self):
        return f"Problem(n_items={len(self)}, capacity={self.capacity})"


def build_problem(values: Iterable[int], weights: Iterable[int], capacity: int) -> Problem:
    """Builds a validated Problem, raising InvalidProblemError on malformed input."""
    return Problem(values=tuple(values), weights=tuple(weights), capacity=capacity)


@dataclass(frozen=True)
class Solution:
    """
    The result of a solve call.

    Attributes:
        value: Total value of the selected items.
        contained: One flag per item, in the original item order.
        optimal: False only when a search budget cut the solve short.
    """
    value: int
    contained: Tuple[bool, ...]
    optimal: bool = True

    def __post_init__(self):
        object.__setattr__(self, 'contained', tuple(bool(flag) for flag in self.contained))

    @property
    def selected(self) -> Tuple[int, ...]:
        """Indices of the selected items."""
        return tuple(i for i, flag in enumerate(self.contained) if flag)

    def weight(self, problem: Problem) -> int:
        return sum(problem.weights[i] for i in self.selected)

    def check(self, problem: Problem) -> None:
        """Asserts that the solution is consistent with and feasible for the problem."""
        assert len(self.contained) == len(problem), \
            f"Solution has {len(self.contained)} flags for {len(problem)} items"
        assert self.value == sum(problem.values[i] for i in self.selected), \
            f"Solution value {self.value} does not match its selected items"
        assert self.weight(problem) <= problem.capacity, \
            f"Solution weight {self.weight(problem)} exceeds capacity {problem.capacity}"
