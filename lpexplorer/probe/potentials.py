"""Locate the floating and plasma potentials of a prepared I-V sweep.

Both estimators take a strictly ascending, finite point sequence (see
:func:`lpexplorer.data_processing.prepare_points`) and return ``None``
rather than a sentinel when no estimate is possible.

Floating potential:
    The voltage where the net probe current is zero. The first sign change
    scanning up from the lowest voltage is interpolated linearly; later
    crossings on a noisy sweep are ignored.

Plasma potential:
    The knee of the curve, approximated by the interval with the largest
    discrete slope dI/dV. The midpoint of that interval is reported.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from ..data_processing import VOLTAGE_TOLERANCE, to_arrays
from ..schema import IvPoint


def estimate_floating_potential(points: Sequence[IvPoint]) -> Optional[float]:
    """Return the voltage where the probe current crosses zero.

    Consecutive pairs ``(a, b)`` are scanned in ascending voltage. For each
    pair, an exactly-zero ``a.I`` returns ``a.V``, then an exactly-zero
    ``b.I`` returns ``b.V``, then a strict sign change returns the linear
    interpolation ``a.V + t * (b.V - a.V)`` with ``t = -a.I / (b.I - a.I)``.

    Args:
        points: Prepared sweep.

    Returns:
        float | None: Floating potential in volts. If the current never
        changes sign, the voltage of the sample with the smallest ``|I|``
        (lowest voltage among ties), which is also used when the
        interpolation overflows. ``None`` only for an empty sweep.
    """
    if len(points) == 0:
        return None
    v, i = to_arrays(points)

    a_i, b_i = i[:-1], i[1:]
    crossing = ((a_i < 0) & (b_i > 0)) | ((a_i > 0) & (b_i < 0))
    event = (a_i == 0) | (b_i == 0) | crossing
    hits = np.flatnonzero(event)
    if hits.size:
        k = int(hits[0])
        if i[k] == 0:
            return float(v[k])
        if i[k + 1] == 0:
            return float(v[k + 1])
        with np.errstate(over="ignore", invalid="ignore"):
            t = -i[k] / (i[k + 1] - i[k])
            vf = float(v[k] + t * (v[k + 1] - v[k]))
        if math.isfinite(vf):
            return vf
        # Overflowed interpolation; use the nearest-to-zero sample instead.

    # argmin keeps the first minimum, i.e. the lowest voltage.
    return float(v[int(np.argmin(np.abs(i)))])


def estimate_plasma_potential(points: Sequence[IvPoint]) -> Optional[float]:
    """Return the midpoint of the steepest interval of the sweep.

    Args:
        points: Prepared sweep.

    Returns:
        float | None: Plasma potential in volts. ``None`` with fewer than
        three points, when no interval has a usable voltage step, or when the
        largest slope is not finite. Equal maximal slopes resolve to the
        lowest-voltage interval.
    """
    if len(points) < 3:
        return None
    v, i = to_arrays(points)

    dv = np.diff(v)
    di = np.diff(i)
    usable = np.abs(dv) > VOLTAGE_TOLERANCE
    with np.errstate(over="ignore", invalid="ignore"):
        slopes = np.where(usable, di / np.where(usable, dv, 1.0), np.nan)

    candidates = np.flatnonzero(~np.isnan(slopes))
    if candidates.size == 0:
        return None
    k = int(candidates[np.argmax(slopes[candidates])])
    if not np.isfinite(slopes[k]):
        return None
    return float(0.5 * (v[k] + v[k + 1]))
