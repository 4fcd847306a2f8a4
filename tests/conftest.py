import itertools

import pytest

from exact_kp.problem import build_problem


def brute_force_value(problem):
    """Best value over every subset; only for small instances."""
    best = 0
    for flags in itertools.product((False, True), repeat=len(problem)):
        weight = sum(w for w, f in zip(problem.weights, flags) if f)
        if weight <= problem.capacity:
            best = max(best, sum(v for v, f in zip(problem.values, flags) if f))
    return best


@pytest.fixture
def scenario_one():
    return build_problem([5, 6, 3], [4, 5, 2], 9)


@pytest.fixture
def scenario_two():
    return build_problem([1, 1, 2, 3], [2, 3, 5, 1], 5)
