import pytest

from exact_kp.solvers.classic.bnb_solver import BranchAndBoundSolver
from exact_kp.solvers.classic.dp_solver import DPSolver
from exact_kp.solvers.interface import SolverInterface
from exact_kp.utils.generator import save_instance_to_file


@pytest.fixture
def instance_path(tmp_path):
    path = tmp_path / "instance_n3_uncorrelated_1.txt"
    save_instance_to_file([(5, 4), (6, 5), (3, 2)], 9, str(path))
    return str(path)


@pytest.mark.parametrize("solver_class", [DPSolver, BranchAndBoundSolver])
def test_solve_reports_value_solution_and_time(solver_class, instance_path):
    result = solver_class(config={}).solve(instance_path)
    assert result["value"] == 11
    assert result["solution"] == [1, 1, 0]
    assert result["optimal"] is True
    assert result["time"] >= 0


def test_branch_and_bound_reads_node_limit(instance_path):
    solver = BranchAndBoundSolver(config={"node_limit": 0})
    result = solver.solve(instance_path)
    assert result["optimal"] is False


def test_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        SolverInterface()


def test_solver_names():
    assert DPSolver().name == "Dynamic Programming"
    assert BranchAndBoundSolver().name == "Branch and Bound"
