# exact_kp/evaluation/reporting.py
import logging
import os

import pandas as pd

logger = logging.getLogger(__name__)


def summarize_results(results_df: pd.DataFrame, baseline_name: str) -> pd.DataFrame:
    """
    Aggregates raw per-instance results into one row per (solver, n).

    Besides the mean value and time, the summary counts the instances on which a
    solver disagrees with the baseline. Both solvers are exact, so any mismatch
    points to a bug.
    """
    baseline_values = (
        results_df[results_df['solver'] == baseline_name]
        .set_index('instance')['value']
    )
    df = results_df.copy()
    df['baseline_value'] = df['instance'].map(baseline_values)
    df['mismatch'] = df['baseline_value'].notna() & (df['value'] != df['baseline_value'])

    return df.groupby(['solver', 'n']).agg(
        instances=('instance', 'count'),
        avg_value=('value', 'mean'),
        avg_time_ms=('time_seconds', lambda x: x.mean() * 1000),
        max_time_ms=('time_seconds', lambda x: x.max() * 1000),
        mismatches=('mismatch', 'sum'),
    ).reset_index()


def save_results_to_csv(results_df: pd.DataFrame, save_path: str):
    """Writes a results DataFrame to csv, creating the parent directory if needed."""
    os.makedirs(os.path.dirname(save_path) or '.', exist_ok=True)
    results_df.to_csv(save_path, index=False)
    logger.info(f"Results saved to {save_path}")
