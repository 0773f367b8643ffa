"""Select the electron-retardation region used for the temperature fit.

Physical Context:
    Between the floating potential and the plasma potential the probe repels
    all but the most energetic electrons of a Maxwellian population, so the
    electron current grows as ``I ∝ exp(V / Te)`` with ``Te`` in eV. A
    straight-line fit of ``ln(I)`` against ``V`` in this window has slope
    ``1 / Te``.

Region Definition:
    The window spans ``[min(Vf, Vp), max(Vf, Vp)]`` trimmed by 10% of its
    width at each end, since both edges bend away from the exponential (ion
    current near Vf, the saturation knee near Vp). Only strictly positive
    currents are kept because the logarithm is otherwise undefined.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

RETARDATION_TRIM = 0.10
# Narrower windows are treated as degenerate.
MIN_WINDOW = 1e-6


def retardation_window(
    vf: Optional[float], vp: Optional[float], trim: float = RETARDATION_TRIM
) -> Optional[tuple[float, float]]:
    """Return the trimmed ``(low, high)`` voltage window between Vf and Vp.

    Args:
        vf: Floating potential in volts, or ``None``.
        vp: Plasma potential in volts, or ``None``.
        trim: Fraction of the span removed from each end.

    Returns:
        tuple[float, float] | None: Window bounds, or ``None`` when either
        potential is absent or the two are closer than ``1e-6`` V.
    """
    if vf is None or vp is None:
        return None
    vmin = min(vf, vp)
    vmax = max(vf, vp)
    span = vmax - vmin
    if span < MIN_WINDOW:
        return None
    return vmin + trim * span, vmax - trim * span


def select_retardation_region(
    voltage: np.ndarray, current: np.ndarray, low: float, high: float
) -> np.ndarray:
    """Return a boolean mask of samples inside ``[low, high]`` with ``I > 0``.

    Args:
        voltage (numpy.ndarray): Probe voltages in volts.
        current (numpy.ndarray): Probe currents in amps, aligned with
            ``voltage``.
        low (float): Inclusive lower voltage bound.
        high (float): Inclusive upper voltage bound.

    Returns:
        numpy.ndarray: Mask with the same shape as ``voltage``.
    """
    v = np.asarray(voltage, dtype=float)
    i = np.asarray(current, dtype=float)
    return (v >= low) & (v <= high) & (i > 0)
