"""
A Python package for quick-look Langmuir probe analysis.

Extracts the floating potential, plasma potential, electron temperature and
electron saturation current from a single I-V sweep.

Modules:
    - data_processing: Parses V/I text exports and prepares samples.
    - probe: Pure estimators for the four plasma parameters.
    - analysis: Runs the estimators over one sweep or a batch of files.
    - output: Writes result tables and chart payloads.
    - plotting: Renders diagnostic I-V figures.
"""

__version__ = "1.0.0"

from .analysis import (
    LangmuirAnalyzer,
    analyze,
    create_results_dataframe,
    print_summary,
    process_all_files,
)
from .data_processing import (
    load_iv_data,
    parse_iv_lines,
    points_from_dataframe,
    prepare_points,
)
from .output import chart_json, chart_payload, result_to_dict, save_results_to_csv
from .plotting import plot_iv_curve, setup_plot_style
from .schema import AnalysisResult, IvPoint

__all__ = [
    # Data model
    "IvPoint",
    "AnalysisResult",
    # Data processing
    "load_iv_data",
    "parse_iv_lines",
    "points_from_dataframe",
    "prepare_points",
    # Analysis
    "LangmuirAnalyzer",
    "analyze",
    "process_all_files",
    "create_results_dataframe",
    "print_summary",
    # Output
    "chart_json",
    "chart_payload",
    "result_to_dict",
    "save_results_to_csv",
    # Plotting
    "setup_plot_style",
    "plot_iv_curve",
]
