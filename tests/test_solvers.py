import random

import pytest

from exact_kp import bounding_solve, build_problem, dynamic_solve

from conftest import brute_force_value

SOLVERS = [dynamic_solve, bounding_solve]


def _random_problem(rng, n):
    return build_problem(
        [rng.randint(1, 40) for _ in range(n)],
        [rng.randint(1, 20) for _ in range(n)],
        rng.randint(0, 10 * n),
    )


def test_solvers_agree_on_value():
    rng = random.Random(11)
    for _ in range(30):
        problem = _random_problem(rng, rng.randint(1, 25))
        dp = dynamic_solve(problem)
        bnb = bounding_solve(problem)
        assert dp.value == bnb.value
        dp.check(problem)
        bnb.check(problem)


@pytest.mark.parametrize("solve", SOLVERS)
def test_value_never_decreases_with_capacity(solve):
    rng = random.Random(5)
    values = [rng.randint(1, 30) for _ in range(8)]
    weights = [rng.randint(1, 10) for _ in range(8)]
    previous = 0
    for capacity in range(0, 45):
        value = solve(build_problem(values, weights, capacity)).value
        assert value >= previous
        previous = value


@pytest.mark.parametrize("solve", SOLVERS)
def test_no_items(solve):
    solution = solve(build_problem([], [], 10))
    assert solution.value == 0
    assert solution.contained == ()


@pytest.mark.parametrize("solve", SOLVERS)
def test_zero_capacity_with_positive_weights(solve):
    solution = solve(build_problem([3, 4, 5], [1, 2, 3], 0))
    assert solution.value == 0
    assert solution.contained == (False, False, False)


@pytest.mark.parametrize("solve", SOLVERS)
def test_single_fitting_item(solve):
    solution = solve(build_problem([7], [3], 3))
    assert solution.value == 7
    assert solution.contained == (True,)


@pytest.mark.parametrize("solve", SOLVERS)
def test_zero_weight_items_are_always_taken(solve):
    solution = solve(build_problem([2, 9, 4], [0, 5, 0], 4))
    assert solution.value == 6
    assert solution.contained == (True, False, True)


@pytest.mark.parametrize("solve", SOLVERS)
def test_greedy_pick_is_not_optimal(solve):
    # greedy by ratio takes item 0 and then nothing else fits
    solution = solve(build_problem([13, 10, 10], [6, 5, 5], 10))
    assert solution.value == 20
    assert solution.contained == (False, True, True)


def test_solvers_agree_beyond_float_precision():
    problem = build_problem([2**53, 1, 0], [1, 1, 1], 2)
    assert dynamic_solve(problem).value == bounding_solve(problem).value == 2**53 + 1


def test_solvers_agree_on_large_magnitudes():
    rng = random.Random(53)
    for _ in range(30):
        n = rng.randint(1, 8)
        problem = build_problem(
            [rng.randint(2**53, 2**62) + rng.randint(0, 3) for _ in range(n)],
            [rng.randint(1, 10) for _ in range(n)],
            rng.randint(0, 30),
        )
        dp = dynamic_solve(problem)
        bnb = bounding_solve(problem)
        dp.check(problem)
        bnb.check(problem)
        assert bnb.optimal
        assert dp.value == bnb.value == brute_force_value(problem)
