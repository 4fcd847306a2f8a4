# exact_kp/utils/run_utils.py
import datetime
from types import SimpleNamespace

def create_run_name(config: SimpleNamespace) -> str:
    """
    Creates a unique and informative name for an evaluation run.

    Args:
        config (SimpleNamespace): The configuration object for the run.

    Returns:
        str: A unique name, e.g., '20250622_210000_n10-60_uncorrelated'
    """
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")

    # Extract key parameters from the config to make the name informative
    try:
        start_n, stop_n, step = config.data_gen.n_range
        last_n = start_n + ((stop_n - 1 - start_n) // step) * step
        run_name = f"{timestamp}_n{start_n}-{last_n}_{config.data_gen.correlation}"
    except (AttributeError, TypeError, ValueError, ZeroDivisionError):
        # Fallback for configs without a data generation section
        run_name = timestamp

    return run_name
