"""Electron temperature and electron saturation current estimators.

Both estimators are pure functions over a prepared sweep and return ``None``
when the data do not support a value.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from ..data_processing import to_arrays
from ..schema import IvPoint
from ..stats.regression import linear_fit
from .retardation_region import retardation_window, select_retardation_region

# A ln(I) slope flatter than this would imply a near-infinite temperature.
MIN_LOG_SLOPE = 1e-12

SATURATION_OFFSET = 0.20
KNEE_FALLBACK_FRACTION = 0.70
MIN_SPAN = 1e-6
MIN_TAIL_POINTS = 3


def estimate_electron_temperature(
    points: Sequence[IvPoint], vf: Optional[float], vp: Optional[float]
) -> Optional[float]:
    """Estimate Te (eV) from the exponential electron-retardation region.

    Args:
        points: Prepared sweep.
        vf: Floating potential in volts, or ``None``.
        vp: Plasma potential in volts, or ``None``.

    Returns:
        float | None: ``1 / slope`` of the least-squares fit of ``ln(I)``
        against ``V`` over the trimmed window between ``vf`` and ``vp``.
        ``None`` when a potential is missing, the window is degenerate, fewer
        than three positive-current samples fall inside it, the fit fails,
        the slope is flatter than ``1e-12`` or the result is non-finite.
    """
    window = retardation_window(vf, vp)
    if window is None:
        return None
    v, i = to_arrays(points)
    mask = select_retardation_region(v, i, *window)
    if int(np.sum(mask)) < 3:
        return None

    fit = linear_fit(v[mask], np.log(i[mask]))
    if fit is None:
        return None
    slope, _ = fit
    if abs(slope) < MIN_LOG_SLOPE:
        return None

    te = 1.0 / slope
    return te if math.isfinite(te) else None


def voltage_span(points: Sequence[IvPoint]) -> float:
    """Return ``max V - min V`` floored at ``1e-6``."""
    if len(points) == 0:
        return MIN_SPAN
    return max(MIN_SPAN, points[-1].V - points[0].V)


def estimate_electron_saturation_current(
    points: Sequence[IvPoint],
    vp: Optional[float],
    v_min: float,
    span: float,
) -> Optional[float]:
    """Average the current in the high-voltage saturation tail.

    The primary tail is every sample with ``V >= cutoff`` and ``I > 0``, where
    ``cutoff = (vp or v_min + 0.7 * span) + 0.2 * span``. When that tail has
    fewer than three samples, the ``max(3, n // 10)`` highest-voltage
    positive-current samples are averaged instead.

    Args:
        points: Prepared sweep, ascending in voltage.
        vp: Plasma potential in volts, or ``None``.
        v_min: Lowest voltage of the sweep.
        span: Voltage span of the sweep (already floored, see
            :func:`voltage_span`).

    Returns:
        float | None: Electron saturation current in amps, or ``None`` when
        neither rule finds three qualifying samples.
    """
    v, i = to_arrays(points)
    knee = vp if vp is not None else v_min + KNEE_FALLBACK_FRACTION * span
    cutoff = knee + SATURATION_OFFSET * span

    tail = i[(v >= cutoff) & (i > 0)]
    if tail.size >= MIN_TAIL_POINTS:
        return float(np.mean(tail))

    take = max(MIN_TAIL_POINTS, len(points) // 10)
    positive = i[i > 0]
    # Ascending voltage order, so the last entries are the highest voltages.
    top = positive[-take:]
    if top.size >= MIN_TAIL_POINTS:
        return float(np.mean(top))
    return None
