"""
Langmuir probe quick-look analysis.

This module turns one I-V sweep into four single-pass estimates:
- Floating potential Vf from the first zero crossing of I(V).
- Plasma potential Vp from the midpoint of the steepest dI/dV interval.
- Electron temperature Te (eV) from a straight-line fit of ln(I) against V
  in the trimmed window between Vf and Vp.
- Electron saturation current from the mean of the high-voltage tail beyond
  Vp, with a top-decile fallback.

Insufficient data (fewer than five usable samples) is not an error: the
result carries the surviving point count and no estimates. Individual
estimators that cannot produce a value leave their field empty without
affecting the others.

No ion-current subtraction or sheath correction is applied; values are
quick-look estimates only.
"""

from __future__ import annotations

import logging
import math
import os
from typing import Dict, Iterable, List

import numpy as np
import pandas as pd

from .data_processing import load_iv_data, points_from_dataframe, prepare_points
from .probe import (
    estimate_electron_saturation_current,
    estimate_electron_temperature,
    estimate_floating_potential,
    estimate_plasma_potential,
    voltage_span,
)
from .schema import MIN_POINTS, AnalysisResult, ResultColumns

logger = logging.getLogger(__name__)


class LangmuirAnalyzer:
    """Stateless entry point for single-sweep analysis.

    One instance may be shared across threads and unrelated analyses.
    """

    def analyze(self, points: Iterable) -> AnalysisResult:
        """Analyze one I-V sweep; see :func:`analyze`."""
        return analyze(points)


def analyze(points: Iterable) -> AnalysisResult:
    """Analyze one I-V sweep.

    Args:
        points: Iterable of :class:`~lpexplorer.schema.IvPoint` or
            ``(V, I)`` pairs in any order. Non-finite samples and repeated
            voltages are tolerated.

    Returns:
        AnalysisResult: Estimates for the sweep; see the module docstring.

    Raises:
        TypeError: If ``points`` is ``None``.
    """
    pts = prepare_points(points)
    if len(pts) < MIN_POINTS:
        return AnalysisResult(point_count=len(pts))

    vf = estimate_floating_potential(pts)
    vp = estimate_plasma_potential(pts)
    te = estimate_electron_temperature(pts, vf, vp)
    isat = estimate_electron_saturation_current(
        pts, vp, pts[0].V, voltage_span(pts)
    )
    return AnalysisResult(
        floating_potential=vf,
        plasma_potential=vp,
        electron_temperature=te,
        electron_saturation_current=isat,
        point_count=len(pts),
    )


def process_all_files(file_list: Iterable[str]) -> List[Dict]:
    """Analyze every sweep file in ``file_list``.

    Args:
        file_list: Paths to delimited V/I text files.

    Returns:
        list[dict]: One entry per readable file with keys ``run_name``,
        ``source_file``, ``data`` (parsed DataFrame), ``points`` (prepared
        samples) and ``result`` (:class:`AnalysisResult`). Unreadable files
        are logged and skipped.
    """
    results = []

    for filepath in file_list:
        logger.info("Processing %s", filepath)
        try:
            df = load_iv_data(filepath)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading %s: %s", filepath, e)
            continue

        points = prepare_points(points_from_dataframe(df))
        result = analyze(points)
        if not result.is_sufficient:
            logger.warning(
                "Only %d usable points in %s; need at least %d",
                result.point_count,
                filepath,
                MIN_POINTS,
            )

        results.append(
            {
                "run_name": os.path.splitext(os.path.basename(filepath))[0],
                "source_file": os.path.basename(filepath),
                "data": df,
                "points": points,
                "result": result,
            }
        )

    return results


def _or_nan(value):
    return np.nan if value is None else float(value)


def create_results_dataframe(results: List[Dict]) -> pd.DataFrame:
    """Build one row per analyzed run using :class:`ResultColumns` labels.

    Absent estimates become NaN here, at the tabular boundary only.
    """
    cols = ResultColumns()
    rows = []
    for res in results:
        r: AnalysisResult = res["result"]
        rows.append(
            {
                cols.run: res.get("run_name", ""),
                cols.source: res.get("source_file", ""),
                cols.vf: _or_nan(r.floating_potential),
                cols.vp: _or_nan(r.plasma_potential),
                cols.te: _or_nan(r.electron_temperature),
                cols.isat: _or_nan(r.electron_saturation_current),
                cols.n: int(r.point_count),
                cols.notes: r.notes,
            }
        )
    return pd.DataFrame(
        rows,
        columns=[
            cols.run,
            cols.source,
            cols.vf,
            cols.vp,
            cols.te,
            cols.isat,
            cols.n,
            cols.notes,
        ],
    )


def _fmt(value: float, spec: str) -> str:
    return "n/a" if value is None or not math.isfinite(value) else format(value, spec)


def print_summary(results_df: pd.DataFrame) -> None:
    """Log a compact per-run summary table."""
    cols = ResultColumns()
    logger.info(
        "%-24s %10s %10s %10s %12s %6s",
        "Run",
        "Vf (V)",
        "Vp (V)",
        "Te (eV)",
        "Ie_sat (A)",
        "n",
    )
    for _, row in results_df.iterrows():
        logger.info(
            "%-24s %10s %10s %10s %12s %6d",
            row[cols.run],
            _fmt(row[cols.vf], ".3f"),
            _fmt(row[cols.vp], ".3f"),
            _fmt(row[cols.te], ".3f"),
            _fmt(row[cols.isat], ".3e"),
            int(row[cols.n]),
        )
