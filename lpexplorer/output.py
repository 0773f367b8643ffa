"""Write analysis outputs and chart payloads.

This module is the boundary between in-memory results and the artifacts
consumed by reports and the chart front end.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict
from typing import Dict, List, Sequence

import numpy as np
import pandas as pd

from .schema import MIN_POINTS, AnalysisResult, IvPoint, ResultColumns
from .units import ev_to_kelvin

logger = logging.getLogger(__name__)


def result_to_dict(result: AnalysisResult) -> Dict[str, object]:
    """Return the record shape of ``result``; absent estimates stay ``None``."""
    return asdict(result)


def chart_payload(points: Sequence[IvPoint]) -> Dict[str, List[float]]:
    """Return voltage and current series for a chart.

    Both lists are empty when fewer than five points are supplied, so the
    chart is never drawn for a sweep that was not analyzed.
    """
    if len(points) < MIN_POINTS:
        return {"voltages": [], "currents": []}
    return {
        "voltages": [float(p.V) for p in points],
        "currents": [float(p.I) for p in points],
    }


def chart_json(points: Sequence[IvPoint]) -> str:
    return json.dumps(chart_payload(points))


def save_results_to_csv(results_df: pd.DataFrame, output_dir: str = "output") -> str:
    """Save per-run results to ``analysis_results.csv``.

    Args:
        results_df (pandas.DataFrame): Output from
            ``lpexplorer.analysis.create_results_dataframe``.
        output_dir (str): Directory where the CSV is written.

    Returns:
        str: Path to the written CSV.

    Raises:
        KeyError: If the electron-temperature column is missing.

    Note:
        Adds an ``Electron Temperature (K)`` column next to the eV value.
    """
    cols = ResultColumns()
    if cols.te not in results_df.columns:
        raise KeyError(f"Missing value column '{cols.te}' for export.")

    os.makedirs(output_dir, exist_ok=True)
    report = results_df.copy()
    te_ev = pd.to_numeric(report[cols.te], errors="coerce").to_numpy(dtype=float)
    te_k = np.array(
        [ev_to_kelvin(t) if np.isfinite(t) else np.nan for t in te_ev], dtype=float
    )
    report.insert(report.columns.get_loc(cols.te) + 1, cols.te_kelvin, te_k)

    results_path = os.path.join(output_dir, "analysis_results.csv")
    report.to_csv(results_path, index=False)
    logger.info("Saved analysis results to %s", results_path)
    return results_path
