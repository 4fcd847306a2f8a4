# exact_kp/__init__.py
'''
Exact solvers for the 0/1 knapsack problem.

- dynamic_solve: dynamic programming over a staircase-compressed value cache
- bounding_solve: best-first branch and bound with the fractional relaxation bound
'''

from exact_kp.problem import InvalidProblemError, Problem, Solution, build_problem
from exact_kp.solvers.classic.dp_solver import dynamic_solve
from exact_kp.solvers.classic.bnb_solver import bounding_solve

__all__ = [
    "InvalidProblemError",
    "Problem",
    "Solution",
    "build_problem",
    "dynamic_solve",
    "bounding_solve",
]
