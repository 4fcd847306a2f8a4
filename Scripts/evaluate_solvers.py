# Scripts/evaluate_solvers.py
import argparse
import logging
import os
import sys
from typing import Dict, List

import pandas as pd
from tqdm import tqdm

from exact_kp.utils.config_loader import cfg
from exact_kp.utils.logger import setup_logger
from exact_kp.evaluation.plotting import plot_evaluation_times
from exact_kp.evaluation.reporting import save_results_to_csv, summarize_results
from exact_kp.utils.run_utils import create_run_name


def instance_size(instance_file: str) -> int:
    """Number of items encoded in a suite filename such as 'instance_n20_uncorrelated_1.txt'."""
    return int(os.path.basename(instance_file).split('_n')[1].split('_')[0])


def solver_config(name: str) -> Dict:
    """Per-solver settings from config.yaml."""
    if name == "Branch and Bound":
        return vars(cfg.classic_solvers.branch_and_bound)
    return {}


def run_evaluation(instance_files: List[str], solvers: Dict) -> List[Dict]:
    """Runs every solver on every instance and returns one record per (solver, instance)."""
    logger = logging.getLogger(__name__)
    raw_results = []

    for name, SolverClass in solvers.items():
        logger.info(f"--- Evaluating Solver: {name} ---")
        try:
            solver_instance = SolverClass(config=solver_config(name))
            for instance_file in tqdm(instance_files, desc=f"Solving with {name}"):
                result = solver_instance.solve(instance_file)
                raw_results.append({
                    "solver": name,
                    "instance": os.path.basename(instance_file),
                    "n": instance_size(instance_file),
                    "value": result["value"],
                    "optimal": result["optimal"],
                    "time_seconds": result["time"],
                })
        except Exception as e:
            logger.error(f"Solver '{name}' failed during evaluation. Error: {e}", exc_info=True)

    return raw_results


def main(argv=None):
    """
    Evaluates the configured exact solvers on the generated test suite, checks
    that they agree with the baseline, and writes a summary csv and a time plot.
    """
    parser = argparse.ArgumentParser(description="Evaluate the exact knapsack solvers.")
    parser.add_argument("--data-dir", type=str, default=cfg.paths.data_testing,
                        help="Directory holding the instance files.")
    parser.add_argument("--limit", type=int, default=None,
                        help="Limit the number of test instances to run (for quick testing).")
    args = parser.parse_args(argv)

    # --- 1. Create a unique name and directory for this evaluation run ---
    run_name = create_run_name(cfg)
    run_dir = os.path.join(cfg.paths.artifacts, "runs", "evaluation", run_name)
    os.makedirs(run_dir, exist_ok=True)

    setup_logger(run_name="evaluation_session", log_dir=run_dir, level=cfg.logging.level)
    logger = logging.getLogger(__name__)
    logger.info(f"--- Starting New Evaluation Run: {run_name} ---")

    # --- 2. Data Loading ---
    if not os.path.isdir(args.data_dir) or not os.listdir(args.data_dir):
        logger.error(f"Test data directory is empty or does not exist: {args.data_dir}")
        logger.error("Please run 'generate_data.py' to create test instances first.")
        return 1
    instance_files = sorted(
        (os.path.join(args.data_dir, f) for f in os.listdir(args.data_dir) if f.endswith(('.txt', '.csv'))),
        key=instance_size
    )
    if args.limit is not None and args.limit > 0:
        logger.info(f"--- Running in limited mode. Processing only the first {args.limit} instances. ---")
        instance_files = instance_files[:args.limit]

    # --- 3. Run Evaluation Loop ---
    solvers = cfg.classic_solvers.algorithms_to_test
    logger.info(f"Solvers to be evaluated: {list(solvers.keys())}")
    raw_results = run_evaluation(instance_files, solvers)

    if not raw_results:
        logger.critical("CRITICAL: No results were generated from any solver. Exiting.")
        sys.exit(1)

    # --- 4. Cross-check against the baseline ---
    baseline_name = next((
        name for name, solver_class in solvers.items()
        if solver_class == cfg.classic_solvers.baseline_algorithm
    ), None)
    if baseline_name is None:
        baseline_name = next(iter(solvers))
        logger.warning(f"Baseline solver is not among the evaluated solvers; comparing against '{baseline_name}'.")
    results_df = pd.DataFrame(raw_results)
    summary_df = summarize_results(results_df, baseline_name)

    total_mismatches = int(summary_df['mismatches'].sum())
    if total_mismatches:
        logger.error(f"{total_mismatches} results disagree with the baseline '{baseline_name}'.")
    else:
        logger.info(f"All solvers agree with the baseline '{baseline_name}'.")

    # --- 5. Save Reports and Generate Plots ---
    logger.info("--- Finalizing Results and Plots ---")
    save_results_to_csv(results_df, os.path.join(run_dir, "evaluation_raw_results.csv"))
    save_results_to_csv(summary_df, os.path.join(run_dir, "evaluation_full_summary.csv"))
    plot_evaluation_times(summary_df, os.path.join(run_dir, "evaluation_times_vs_n.png"))

    logger.info("--- Evaluation script finished successfully! ---")
    return 0


if __name__ == '__main__':
    sys.exit(main())
