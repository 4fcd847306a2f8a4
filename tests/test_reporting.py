import pandas as pd
import pytest

from exact_kp.evaluation.reporting import save_results_to_csv, summarize_results


def _results():
    return pd.DataFrame([
        {"solver": "DP", "instance": "a", "n": 10, "value": 50, "optimal": True, "time_seconds": 0.002},
        {"solver": "BnB", "instance": "a", "n": 10, "value": 50, "optimal": True, "time_seconds": 0.001},
        {"solver": "DP", "instance": "b", "n": 20, "value": 70, "optimal": True, "time_seconds": 0.004},
        {"solver": "BnB", "instance": "b", "n": 20, "value": 69, "optimal": False, "time_seconds": 0.003},
    ])


def test_summary_counts_mismatches_against_baseline():
    summary = summarize_results(_results(), baseline_name="DP")
    bnb = summary[summary["solver"] == "BnB"].set_index("n")
    assert bnb.loc[10, "mismatches"] == 0
    assert bnb.loc[20, "mismatches"] == 1
    assert summary["mismatches"].sum() == 1
    assert bnb.loc[10, "avg_time_ms"] == pytest.approx(1.0)


def test_save_results_to_csv(tmp_path):
    path = tmp_path / "out" / "summary.csv"
    save_results_to_csv(_results(), str(path))
    assert pd.read_csv(path).shape == (4, 6)
