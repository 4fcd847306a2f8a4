import random

import pytest

from exact_kp.problem import InvalidProblemError, Solution
from exact_kp.utils.generator import (
    format_solution,
    generate_knapsack_instance,
    load_instance_from_file,
    parse_instance,
    problem_from_items,
    save_instance_to_file,
)


def test_parse_whitespace_format():
    problem = parse_instance("3 9\n5 4\n6 5\n\n3 2\n")
    assert problem.values == (5, 6, 3)
    assert problem.weights == (4, 5, 2)
    assert problem.capacity == 9


def test_parse_csv_format_with_header():
    problem = parse_instance("2 10\nvalue,weight\n7,3\n8,4\n")
    assert problem.values == (7, 8)
    assert problem.weights == (3, 4)


def test_parse_rejects_count_mismatch():
    with pytest.raises(InvalidProblemError, match="Header specified 3 items"):
        parse_instance("3 9\n5 4\n6 5\n")


@pytest.mark.parametrize("text", ["", "abc\n", "1 5\n7\n", "1 5\nx y\n"])
def test_parse_rejects_malformed_text(text):
    with pytest.raises(InvalidProblemError):
        parse_instance(text)


def test_save_and_load(tmp_path):
    path = tmp_path / "suite" / "instance_n3_uncorrelated_1.txt"
    save_instance_to_file([(5, 4), (6, 5), (3, 2)], 9, str(path))
    assert path.read_text() == "3 9\n5 4\n6 5\n3 2\n"
    problem = load_instance_from_file(str(path))
    assert problem == problem_from_items([(5, 4), (6, 5), (3, 2)], 9)


def test_format_solution():
    assert format_solution(Solution(value=11, contained=[True, True, False])) == "11 1\n1 1 0"
    assert format_solution(Solution(value=0, contained=[False], optimal=False)) == "0 0\n0"


@pytest.mark.parametrize("correlation", ['uncorrelated', 'weakly_correlated', 'strongly_correlated', 'subset_sum'])
def test_generate_instance(correlation):
    items, capacity = generate_knapsack_instance(
        n=20, correlation=correlation, max_weight=50, max_value=60, capacity_ratio=0.5, rng=random.Random(1)
    )
    assert len(items) == 20
    assert all(1 <= w <= 50 and v >= 1 for v, w in items)
    assert capacity == int(sum(w for _, w in items) * 0.5)
    if correlation == 'subset_sum':
        assert all(v == w for v, w in items)


def test_generate_is_reproducible_with_seeded_rng():
    first = generate_knapsack_instance(10, rng=random.Random(3))
    second = generate_knapsack_instance(10, rng=random.Random(3))
    assert first == second


def test_generate_rejects_bad_arguments():
    with pytest.raises(ValueError):
        generate_knapsack_instance(5, correlation='inverse')
    with pytest.raises(ValueError):
        generate_knapsack_instance(5, capacity_ratio=1.5)
