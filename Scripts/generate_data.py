# Scripts/generate_data.py
# -*- coding: utf-8 -*-

'''
Generates a suite of knapsack instances for evaluating the exact solvers.
Sizes, correlation and item ranges come from the data_gen section of config.yaml.
'''

import argparse
import logging
import os
import random

from exact_kp.utils.config_loader import cfg
from exact_kp.utils.generator import generate_knapsack_instance, save_instance_to_file
from exact_kp.utils.logger import setup_logger


def create_suite(output_dir: str, data_gen_cfg, seed=None) -> list:
    """
    Generates and saves instances_per_n instances for every size in n_range.

    Returns:
        list: Paths of the files written.
    """
    logger = logging.getLogger(__name__)
    logger.info(f"--- Generating Test Suite in '{output_dir}' Directory ---")
    os.makedirs(output_dir, exist_ok=True)

    rng = random.Random(seed)
    start_n, stop_n, step = data_gen_cfg.n_range
    written = []

    for n_items in range(start_n, stop_n, step):
        for instance_number in range(1, data_gen_cfg.instances_per_n + 1):
            items, capacity = generate_knapsack_instance(
                n=n_items,
                correlation=data_gen_cfg.correlation,
                max_weight=data_gen_cfg.max_weight,
                max_value=data_gen_cfg.max_value,
                capacity_ratio=data_gen_cfg.capacity_ratio,
                rng=rng
            )
            # the instance number keeps files of the same size apart
            filename = os.path.join(
                output_dir,
                f"instance_n{n_items}_{data_gen_cfg.correlation}_{instance_number}.txt"
            )
            save_instance_to_file(items, capacity, filename)
            written.append(filename)

    logger.info(f"--- Test Suite Generation Complete: {len(written)} instances ---")
    return written


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate knapsack test instances.")
    parser.add_argument("--output-dir", type=str, default=cfg.paths.data_testing,
                        help="Where to write the instance files.")
    parser.add_argument("--seed", type=int, default=cfg.data_gen.seed,
                        help="Random seed for reproducible suites.")
    args = parser.parse_args(argv)

    setup_logger(run_name="generation", log_dir=cfg.paths.logs, level=cfg.logging.level)
    create_suite(args.output_dir, cfg.data_gen, seed=args.seed)


if __name__ == '__main__':
    main()
