# exact_kp/solvers/interface.py
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict

from exact_kp.problem import Problem, Solution
from exact_kp.utils.generator import load_instance_from_file

logger = logging.getLogger(__name__)


class SolverInterface(ABC):
    """
    Common base class for every solver in the registry.

    Subclasses implement `solve_problem`; `solve` takes care of loading the
    instance file and timing the run, so all solvers report results in the
    same format.
    """
    def __init__(self, config: Dict[str, Any] = None):
        self.config = config or {}
        self.name = self.__class__.__name__

    @abstractmethod
    def solve_problem(self, problem: Problem) -> Solution:
        """Solves an in-memory problem instance."""

    def solve(self, instance_path: str) -> Dict[str, Any]:
        """
        Loads an instance from disk and solves it.

        Returns:
            Dict[str, Any]: 'value', 'time' (seconds), 'solution' (0/1 list in item order)
            and 'optimal'.
        """
        problem = load_instance_from_file(instance_path)
        start_time = time.perf_counter()
        solution = self.solve_problem(problem)
        end_time = time.perf_counter()

        logger.debug(f"{self.name} solved {instance_path}: value {solution.value} in {end_time - start_time:.6f}s")
        return {
            "value": solution.value,
            "time": end_time - start_time,
            "solution": [int(flag) for flag in solution.contained],
            "optimal": solution.optimal,
        }

    def __repr__(self):
        return f"{self.__class__.__name__}(name={self.name!r})"
