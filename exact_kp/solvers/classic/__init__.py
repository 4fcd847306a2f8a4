from exact_kp.solvers.classic.dp_solver import DPSolver, OracleCache, dynamic_solve, oracle
from exact_kp.solvers.classic.bnb_solver import (
    BranchAndBoundSolver,
    SearchNode,
    bounding_solve,
    efficiency_order,
    fractional_bound,
)
