# exact_kp/utils/generator.py
# -*- coding: utf-8 -*-


'''
This module provides functions to generate, save, load and render knapsack instances.

Instance files use the plain text format: the first line is 'num_items capacity',
every following line is 'value weight'. Files written by the older benchmark
tooling (a 'value,weight' csv header after the first line) are read as well.
'''

import csv
import os
import random
from typing import List, Optional, Tuple
import logging

from exact_kp.problem import InvalidProblemError, Problem, Solution, build_problem

logger = logging.getLogger(__name__)

CORRELATION_TYPES = ['uncorrelated', 'weakly_correlated', 'strongly_correlated', 'subset_sum']


# Function to generate a knapsack instance with one constraint
def generate_knapsack_instance(
    n: int,
    correlation: str = 'uncorrelated',
    max_weight: int = 1000,
    max_value: int = 1000,
    capacity_ratio: float = 0.5,
    rng: Optional[random.Random] = None
) -> Tuple[List[Tuple[int, int]], int]:

    """
    Generate an instance of the 0/1 knapsack problem.

    Args:
        n (int): Number of items to generate.
        correlation (str): Type of correlation between item values and weights.
            Options: 'uncorrelated', 'weakly_correlated',
                    'strongly_correlated', 'subset_sum'.
        max_weight (int): Maximum weight for a single item.
        max_value (int): Maximum value for a single item (used when uncorrelated).
        capacity_ratio (float): Ratio of knapsack capacity to the total weight of all items (between 0.0 and 1.0).
        rng (random.Random, optional): Source of randomness, for reproducible suites.

    Returns:
        Tuple[List[Tuple[int, int]], int]:
            - A list of items, each represented as a tuple (value, weight).
            - The computed knapsack capacity.
    """

    if correlation not in CORRELATION_TYPES:
        raise ValueError("Correlation type must be one of 'uncorrelated', 'weakly_correlated', 'strongly_correlated', or 'subset_sum'")
    if not (0.0 < capacity_ratio <= 1.0):
        raise ValueError("Capacity ratio must be between 0.0 and 1.0")
    rng = rng or random.Random()

    items = []
    total_weight = 0

    for _ in range(n):
        weight = rng.randint(1, max_weight)
        value = 0

        if correlation == 'uncorrelated':
            value = rng.randint(1, max_value)
        elif correlation == 'weakly_correlated':
            # noise of about 25% of the maximum value
            noise = int(max_value / 4)
            value = max(1, weight + rng.randint(-noise, noise))
        elif correlation == 'strongly_correlated':
            # noise of about 10% of the maximum value
            noise = int(max_value / 10)
            value = max(1, weight + rng.randint(-noise, noise))
        elif correlation == 'subset_sum':
            value = weight

        items.append((value, weight))
        total_weight += weight

    capacity = int(total_weight * capacity_ratio)

    return items, capacity


def problem_from_items(items: List[Tuple[int, int]], capacity: int) -> Problem:
    """Builds a Problem from (value, weight) pairs."""
    return build_problem([v for v, _ in items], [w for _, w in items], capacity)


def save_instance_to_file(items: List[Tuple[int, int]], capacity: int, filename: str):
    """Saves the generated instance in the 'value weight' text format."""
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filename, 'w') as f:
        f.write(f"{len(items)} {capacity}\n")
        for value, weight in items:
            f.write(f"{value} {weight}\n")

    logger.info(f"Instance successfully saved to {filename}")


def parse_instance(text: str) -> Problem:
    """
    Parses an instance from text.
    The first line is 'num_items capacity'; each following non-empty line is one item.
    Items may be separated by whitespace or by a comma, and a 'value,weight' header is skipped.

    Raises:
        InvalidProblemError: If the text is empty, a line is malformed, or the item count
            does not match the header.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise InvalidProblemError("Instance is empty.")

    try:
        num_items_str, capacity_str = lines[0].split()[:2]
        expected_num_items = int(num_items_str)
        capacity = int(capacity_str)
    except ValueError as e:
        raise InvalidProblemError(f"Malformed header line: {lines[0]!r}") from e

    body = lines[1:]
    if body and body[0].replace(' ', '').lower() == 'value,weight':
        body = body[1:]

    values = []
    weights = []
    for row in csv.reader(body):
        fields = row if len(row) > 1 else row[0].split()
        try:
            values.append(int(fields[0]))
            weights.append(int(fields[1]))
        except (ValueError, IndexError) as e:
            raise InvalidProblemError(f"Malformed item line: {row!r}") from e

    if len(values) != expected_num_items:
        raise InvalidProblemError(
            f"Header specified {expected_num_items} items, but {len(values)} items were found."
        )

    return build_problem(values, weights, capacity)


def load_instance_from_file(filename: str) -> Problem:
    """
    Loads a knapsack instance from a text or csv file.

    Returns:
        Problem: The validated instance.
    """
    with open(filename, 'r', newline='') as f:
        problem = parse_instance(f.read())

    logger.info(f"Instance successfully loaded from {filename} ({len(problem)} items).")
    return problem


def format_solution(solution: Solution) -> str:
    """Renders a solution as '<value> <optimal flag>' followed by the 0/1 item flags."""
    out = f"{solution.value} {int(solution.optimal)}\n"
    out += ' '.join('1' if flag else '0' for flag in solution.contained)
    return out
