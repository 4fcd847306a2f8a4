# exact_kp/utils/config_loader.py
import yaml
import os
from types import SimpleNamespace
from typing import Dict, Any

# --- Import solver CLASSes here ---
from exact_kp.solvers.classic.dp_solver import DPSolver
from exact_kp.solvers.classic.bnb_solver import BranchAndBoundSolver

# The registry maps a name to a Solver Class.
ALGORITHM_REGISTRY = {
    "Dynamic Programming": DPSolver,
    "Branch and Bound": BranchAndBoundSolver,
}

PACKAGE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
PROJECT_ROOT = os.path.dirname(PACKAGE_DIR)
DEFAULT_CONFIG_PATH = os.path.join(PACKAGE_DIR, 'configs', 'config.yaml')


def _post_process_config(config_dict: Dict[str, Any], project_root: str = PROJECT_ROOT) -> Dict[str, Any]:
    """
    Processes the raw config dict to add dynamic values and absolute paths.
    This function contains all logic that cannot be represented in a static YAML file.
    """
    # --- 1. Build absolute paths for all entries in the 'paths' section ---
    for key, rel_path in config_dict['paths'].items():
        config_dict['paths'][key] = os.path.join(project_root, rel_path)
    config_dict['paths']['root'] = project_root

    # --- 2. Validate data generation settings ---
    data_gen_cfg = config_dict['data_gen']
    if len(data_gen_cfg['n_range']) != 3:
        raise ValueError(f"data_gen.n_range must be [start, stop, step], got {data_gen_cfg['n_range']}.")

    # --- 3. Map Algorithm Names to Classes ---
    classic_cfg = config_dict['classic_solvers']
    try:
        classic_cfg['algorithms_to_test'] = {
            name: ALGORITHM_REGISTRY[name] for name in classic_cfg['algorithms_to_test']
        }
        classic_cfg['baseline_algorithm'] = ALGORITHM_REGISTRY[classic_cfg['baseline_algorithm']]
    except KeyError as e:
        raise ValueError(f"Algorithm '{e.args[0]}' is defined in config.yaml but not found in ALGORITHM_REGISTRY in config_loader.py.") from e

    return config_dict


def dict_to_namespace(d: Dict) -> SimpleNamespace:
    """
    Recursively converts nested dicts to SimpleNamespace for dot notation access.
    Dicts keyed by names that are not identifiers (e.g. solver names) stay dicts.
    """
    for k, v in d.items():
        if isinstance(v, dict) and all(isinstance(key, str) and key.isidentifier() for key in v):
            d[k] = dict_to_namespace(v)
    return SimpleNamespace(**d)


def load_config(config_path: str = DEFAULT_CONFIG_PATH, project_root: str = PROJECT_ROOT) -> SimpleNamespace:
    """
    Loads, processes, and returns the project configuration from a YAML file
    as a SimpleNamespace object for dot notation access.
    """
    try:
        with open(config_path, 'r') as f:
            config_dict = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {config_path}")

    processed_config = _post_process_config(config_dict, project_root)
    return dict_to_namespace(processed_config)


# --- A single, global config instance for easy import across the project ---
# Other modules can simply use: from exact_kp.utils.config_loader import cfg
cfg = load_config()
