#!/usr/bin/env python3
"""
Main script for running Langmuir probe quick-look analysis.
"""

# Pipeline overview (README-style):
# 1) Load each V/I export, sniffing the delimiter and skipping header rows.
# 2) Sort by voltage, drop non-finite samples and collapse repeated voltages.
# 3) Estimate Vf, Vp, Te and Ie_sat for every sweep with at least 5 points.
# 4) Export the per-run table and, unless disabled, diagnostic figures.

import argparse
import logging
import os
import sys
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from lpexplorer.analysis import (
    create_results_dataframe,
    print_summary,
    process_all_files,
)
from lpexplorer.output import save_results_to_csv
from lpexplorer.plotting import plot_iv_curve


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Quick-look Langmuir probe I-V analysis."
    )
    parser.add_argument("files", nargs="+", help="V/I text files (V first, I second).")
    parser.add_argument("--output-dir", default="output", help="Output directory.")
    parser.add_argument(
        "--no-plots", action="store_true", help="Skip diagnostic figures."
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main execution function."""

    args = _parse_args(argv)
    os.makedirs(args.output_dir, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(
                os.path.join(args.output_dir, "langmuir_analysis.log"), mode="w"
            ),
        ],
    )

    start_time = time.time()
    logging.info("Configured %d input files for analysis", len(args.files))

    results = process_all_files(args.files)
    if not results:
        logging.error("No readable input files. Terminating execution.")
        return 1

    results_df = create_results_dataframe(results)
    print_summary(results_df)
    results_csv = save_results_to_csv(results_df, args.output_dir)

    plot_paths = []
    if not args.no_plots:
        for res in results:
            if not res["result"].is_sufficient:
                continue
            plot_paths.append(
                plot_iv_curve(
                    res["points"], res["result"], args.output_dir, res["run_name"]
                )
            )

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    logging.info("Generated output files:")
    logging.info("  - Results CSV: %s", results_csv)
    for path in plot_paths:
        logging.info("  - I-V figure: %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
