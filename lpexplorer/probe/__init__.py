"""
Langmuir-probe estimators for quick-look plasma parameters.

Modules:
    potentials:
        Floating potential (zero crossing) and plasma potential (maximum
        dI/dV midpoint).

    retardation_region:
        Trimmed window between Vf and Vp used for the temperature fit.

    electron:
        Electron temperature from the ln(I) slope and electron saturation
        current from the high-voltage tail.

Design Principle:
    Every estimator is a pure function of a prepared sweep. Nothing here
    reads files, logs, or keeps state between calls.
"""

from .electron import (
    estimate_electron_saturation_current,
    estimate_electron_temperature,
    voltage_span,
)
from .potentials import estimate_floating_potential, estimate_plasma_potential
from .retardation_region import retardation_window, select_retardation_region

__all__ = [
    "estimate_floating_potential",
    "estimate_plasma_potential",
    "estimate_electron_temperature",
    "estimate_electron_saturation_current",
    "voltage_span",
    "retardation_window",
    "select_retardation_region",
]
