"""Define the sample, result record, and standardized column names."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

# Fewer prepared samples than this and no estimate is attempted.
MIN_POINTS = 5

ANALYSIS_NOTES = (
    "Quick-look analysis (zero-crossing Vf, max dI/dV Vp, ln(I) fit for Te, "
    "high-V tail average for Ie_sat)."
)


@dataclass(frozen=True, order=True)
class IvPoint:
    """One measured probe sample.

    Attributes:
        V: Applied probe voltage in volts.
        I: Collected probe current in amps. Not used for equality or ordering.
    """

    V: float
    I: float = field(compare=False)


@dataclass(frozen=True)
class AnalysisResult:
    """Quick-look estimates for a single I-V sweep.

    Every estimate is ``None`` when the data do not support a value. Callers
    must check presence before use.

    Attributes:
        floating_potential: Voltage where the net probe current is zero (V).
        plasma_potential: Voltage of maximum dI/dV (V).
        electron_temperature: Electron temperature from the ln(I) slope (eV).
        electron_saturation_current: Mean current in the high-voltage tail (A).
        point_count: Number of samples that survived cleaning.
        notes: Fixed description of the method family.
    """

    floating_potential: Optional[float] = None
    plasma_potential: Optional[float] = None
    electron_temperature: Optional[float] = None
    electron_saturation_current: Optional[float] = None
    point_count: int = 0
    notes: str = ANALYSIS_NOTES

    @property
    def is_sufficient(self) -> bool:
        return self.point_count >= MIN_POINTS


@dataclass(frozen=True)
class ResultColumns:
    """Container for standardized column labels.

    These labels are used by the batch results DataFrame and the CSV export so
    that tables and plots agree on naming.
    """

    run: str = "Run"
    source: str = "Source File"
    vf: str = "Floating Potential (V)"
    vp: str = "Plasma Potential (V)"
    te: str = "Electron Temperature (eV)"
    te_kelvin: str = "Electron Temperature (K)"
    isat: str = "Electron Saturation Current (A)"
    n: str = "Point Count"
    notes: str = "Notes"


VOLTAGE_COL = "Voltage (V)"
CURRENT_COL = "Current (A)"
