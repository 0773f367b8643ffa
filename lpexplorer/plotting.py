"""
Diagnostic figures for Langmuir probe sweeps.

Plotting functions receive precomputed points and an
:class:`~lpexplorer.schema.AnalysisResult` and only render them; no estimate
is recomputed here apart from the diagnostic ln(I) regression drawn in the
second panel.
"""

from __future__ import annotations

import os
import re
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from .data_processing import to_arrays
from .probe import retardation_window, select_retardation_region
from .schema import AnalysisResult, IvPoint
from .stats.regression import linear_regression

_STYLE_STATE = {"initialized": False}

DATA_COLOR = "#004371"
FIT_COLOR = "#a50f15"
MARKER_COLOR = "#4A4A4A"


def setup_plot_style() -> None:
    """Apply the project plotting style once per process."""
    if _STYLE_STATE["initialized"]:
        return
    plt.rcParams.update(
        {
            "font.family": "STIXGeneral",
            "font.size": 11,
            "axes.titlesize": 13,
            "axes.labelsize": 12,
            "xtick.labelsize": 10,
            "ytick.labelsize": 10,
            "legend.fontsize": 10,
            "mathtext.fontset": "stix",
            "mathtext.default": "regular",
            "axes.spines.top": False,
            "axes.spines.right": False,
            "grid.linestyle": ":",
            "grid.linewidth": 0.7,
            "legend.frameon": False,
            "lines.linewidth": 1.6,
            "lines.markersize": 4.0,
            "savefig.dpi": 300,
        }
    )
    _STYLE_STATE["initialized"] = True


def _safe_name(run_name: str) -> str:
    return re.sub(r"[^A-Za-z0-9._-]+", "_", run_name).strip("_") or "sweep"


def plot_iv_curve(
    points: Sequence[IvPoint],
    result: AnalysisResult,
    output_dir: str = "output",
    run_name: str = "sweep",
) -> str:
    """Render the two-panel diagnostic figure for one sweep.

    Panel (a) shows I(V) with the floating and plasma potentials marked and the
    saturation level drawn as a horizontal line. Panel (b) shows ln(I) for
    positive currents and, when Te is available, the fitted line over the
    trimmed electron-retardation window.

    Args:
        points: Prepared sweep.
        result: Estimates for the same sweep.
        output_dir: Directory for the PNG file.
        run_name: Used for the title and the file name.

    Returns:
        str: Path to the saved PNG file.
    """
    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)
    v, i = to_arrays(points)

    fig, (ax_iv, ax_log) = plt.subplots(1, 2, figsize=(10.0, 4.0))

    ax_iv.plot(v, i, "o-", color=DATA_COLOR, label="I(V)")
    ax_iv.axhline(0.0, color=MARKER_COLOR, linewidth=0.7)
    if result.floating_potential is not None:
        ax_iv.axvline(
            result.floating_potential,
            color=MARKER_COLOR,
            linestyle="--",
            label=f"$V_f$ = {result.floating_potential:.3g} V",
        )
    if result.plasma_potential is not None:
        ax_iv.axvline(
            result.plasma_potential,
            color=FIT_COLOR,
            linestyle="--",
            label=f"$V_p$ = {result.plasma_potential:.3g} V",
        )
    if result.electron_saturation_current is not None:
        ax_iv.axhline(
            result.electron_saturation_current,
            color=FIT_COLOR,
            linestyle=":",
            label=f"$I_{{e,sat}}$ = {result.electron_saturation_current:.3g} A",
        )
    ax_iv.set_xlabel("Probe voltage (V)")
    ax_iv.set_ylabel("Probe current (A)")
    ax_iv.set_title("(a) I-V characteristic")
    ax_iv.legend(loc="upper left")

    positive = i > 0
    ax_log.plot(v[positive], np.log(i[positive]), "o", color=DATA_COLOR)
    window = retardation_window(result.floating_potential, result.plasma_potential)
    if result.electron_temperature is not None and window is not None:
        mask = select_retardation_region(v, i, *window)
        fit = linear_regression(v[mask], np.log(i[mask]))
        x_line = np.linspace(window[0], window[1], 50)
        ax_log.plot(
            x_line,
            fit["m"] * x_line + fit["b"],
            color=FIT_COLOR,
            label=(
                f"$T_e$ = {result.electron_temperature:.3g} eV, "
                f"$R^2$ = {fit['r2']:.3f}"
            ),
        )
        ax_log.axvspan(window[0], window[1], color=FIT_COLOR, alpha=0.08)
        ax_log.legend(loc="lower right")
    ax_log.set_xlabel("Probe voltage (V)")
    ax_log.set_ylabel("ln(I / A)")
    ax_log.set_title("(b) Electron-retardation fit")

    fig.suptitle(run_name)
    fig.tight_layout()

    png_path = os.path.join(output_dir, f"{_safe_name(run_name)}_iv.png")
    fig.savefig(png_path)
    plt.close(fig)
    return png_path
