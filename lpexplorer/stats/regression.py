"""Provide straight-line fits used by the probe estimators and diagnostics.

This module supports:
- the guarded sum-form least-squares fit behind the electron-temperature
  estimate, and
- a diagnostic regression with R^2 and slope uncertainty used when plotting
  the electron-retardation region.
"""

from __future__ import annotations

import importlib.util
import math
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

HAVE_SCIPY = importlib.util.find_spec("scipy") is not None
if HAVE_SCIPY:
    from scipy.stats import t as student_t

# Below this |n*Sxx - Sx^2| the abscissae are treated as collinear.
DENOM_TOLERANCE = 1e-20


def linear_fit(
    x: Sequence[float], y: Sequence[float]
) -> Optional[Tuple[float, float]]:
    """Fit ``y = slope * x + intercept`` by ordinary least squares.

    Args:
        x: Independent values.
        y: Dependent values, paired with ``x``. Extra trailing values in the
            longer sequence are ignored.

    Returns:
        tuple[float, float] | None: ``(slope, intercept)``, or ``None`` when
        fewer than two pairs are given, the denominator
        ``n*sum(x^2) - sum(x)^2`` is within ``1e-20`` of zero, or either
        coefficient is non-finite.

    Note:
        The closed-form sums are used instead of ``numpy.polyfit`` so the
        degenerate-denominator guard applies exactly.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    n = int(min(len(x_arr), len(y_arr)))
    if n < 2:
        return None
    x_arr = x_arr[:n]
    y_arr = y_arr[:n]

    sx = float(np.sum(x_arr))
    sy = float(np.sum(y_arr))
    sxx = float(np.sum(x_arr * x_arr))
    sxy = float(np.sum(x_arr * y_arr))

    denom = n * sxx - sx * sx
    if abs(denom) < DENOM_TOLERANCE:
        return None

    slope = (n * sxy - sx * sy) / denom
    intercept = (sy - slope * sx) / n
    if not (math.isfinite(slope) and math.isfinite(intercept)):
        return None
    return slope, intercept


def linear_regression(
    x: np.ndarray, y: np.ndarray, min_points: int = 3
) -> Dict[str, float]:
    """Fit a straight line to finite data pairs and report fit diagnostics.

    Args:
        x (numpy.ndarray): Independent variable array (for example, probe
            voltage in V).
        y (numpy.ndarray): Dependent variable array (for example, ln(I)).
        min_points (int, optional): Minimum number of finite paired
            observations required. Defaults to ``3``.

    Returns:
        dict[str, float]: Keys ``m`` (slope), ``b`` (intercept), ``r2``,
        ``se_m``, ``ci95_m`` (95% half-width, NaN without SciPy) and ``n``.

    Raises:
        ValueError: If there are insufficient valid points or no variance in
            either variable.

    Note:
        Diagnostics describe statistical scatter only. The quick-look
        estimators rely on :func:`linear_fit`; this routine is for reporting.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    x_arr = x_arr[mask]
    y_arr = y_arr[mask]
    n = int(len(x_arr))
    if n < min_points:
        raise ValueError("Insufficient valid data for regression.")

    xbar = float(np.mean(x_arr))
    ssxx = float(np.sum((x_arr - xbar) ** 2))
    if ssxx <= 0:
        raise ValueError("Insufficient variance for regression.")

    m, b = np.polyfit(x_arr, y_arr, 1)
    resid = y_arr - (m * x_arr + b)

    sse = float(np.sum(resid**2))
    sst = float(np.sum((y_arr - y_arr.mean()) ** 2))
    if sst <= 0:
        raise ValueError("Insufficient variance for regression.")
    r2 = 1.0 - sse / sst

    dof = n - 2
    se_m = math.nan
    ci95_m = math.nan
    if dof > 0:
        se_m = float(np.sqrt((sse / dof) / ssxx))
        if HAVE_SCIPY:
            ci95_m = float(student_t.ppf(0.975, dof)) * se_m

    return {
        "m": float(m),
        "b": float(b),
        "r2": float(r2),
        "se_m": se_m,
        "ci95_m": ci95_m,
        "n": n,
    }
