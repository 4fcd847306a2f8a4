# Scripts/solve.py
import argparse
import logging
import sys

from exact_kp.solvers.classic.bnb_solver import bounding_solve
from exact_kp.solvers.classic.dp_solver import dynamic_solve
from exact_kp.problem import InvalidProblemError
from exact_kp.utils.config_loader import cfg
from exact_kp.utils.generator import format_solution, load_instance_from_file
from exact_kp.utils.logger import setup_logger

SOLVERS = {
    "bnb": "Branch and Bound",
    "dp": "Dynamic Programming",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve a 0/1 knapsack instance exactly.")
    parser.add_argument("path", type=str, help="Instance file: 'n capacity' then one 'value weight' line per item.")
    parser.add_argument(
        "--solver",
        choices=sorted(SOLVERS),
        default="bnb",
        help="Exact algorithm to use (default: bnb)."
    )
    parser.add_argument(
        "--node-limit",
        type=int,
        default=cfg.classic_solvers.branch_and_bound.node_limit,
        help="Maximum nodes expanded by branch and bound; the best solution found so far is returned when it runs out."
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=cfg.paths.logs,
        help="Directory for the run's log file."
    )
    return parser


def main(argv=None) -> int:
    """Reads an instance file, solves it, and prints the solution to stdout."""
    args = build_parser().parse_args(argv)

    setup_logger(run_name="solve", log_dir=args.log_dir, level=cfg.logging.level)
    logger = logging.getLogger(__name__)

    try:
        problem = load_instance_from_file(args.path)
    except FileNotFoundError:
        logger.error(f"Instance file not found: {args.path}")
        return 1
    except InvalidProblemError as e:
        logger.error(f"Invalid instance '{args.path}': {e}")
        return 1

    logger.info(f"Solving {problem} with {SOLVERS[args.solver]}")
    if args.solver == "dp":
        solution = dynamic_solve(problem)
    else:
        solution = bounding_solve(problem, node_limit=args.node_limit)

    print(format_solution(solution))
    return 0


if __name__ == '__main__':
    sys.exit(main())
