"""
Handles I-V text parsing and preparation of probe samples for analysis.
"""

# Algorithm summary: sniff the delimiter of a two-column V/I export, coerce
# the first two fields of every row to numbers (header rows fall out as NaN),
# then sort by voltage, drop non-finite samples and collapse coincident
# voltages so every estimator sees a strictly ascending sweep.

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Sequence, Tuple

import numpy as np
import pandas as pd

from .schema import CURRENT_COL, VOLTAGE_COL, IvPoint

logger = logging.getLogger(__name__)

# Two voltages closer than this are the same sample.
VOLTAGE_TOLERANCE = 1e-12

_DELIMITERS = (",", ";", "\t")
_THOUSANDS_PATTERN = r"[+-]?\d{1,3}(?:,\d{3})+(?:\.\d*)?(?:[eE][+-]?\d+)?"


def _as_point(sample) -> IvPoint:
    if isinstance(sample, IvPoint):
        return sample
    v, i = sample
    return IvPoint(float(v), float(i))


def prepare_points(points: Iterable) -> List[IvPoint]:
    """Normalize raw samples into a strictly ascending, finite sweep.

    Args:
        points: Iterable of :class:`IvPoint` or ``(V, I)`` pairs, in any
            order, possibly containing NaN/inf or repeated voltages.

    Returns:
        list[IvPoint]: Samples sorted by ascending voltage with non-finite
        samples removed. Of samples whose voltages agree within ``1e-12``
        only the first along the (stable) sort order is kept.

    Raises:
        TypeError: If ``points`` is ``None``.

    Note:
        Empty or very short input is returned as-is (possibly empty); the
        caller decides whether enough samples remain.
    """
    if points is None:
        raise TypeError("points must be an iterable of samples, not None")

    finite = [
        p
        for p in (_as_point(s) for s in points)
        if math.isfinite(p.V) and math.isfinite(p.I)
    ]
    finite.sort(key=lambda p: p.V)

    prepared: List[IvPoint] = []
    last_v = None
    for p in finite:
        if last_v is None or abs(p.V - last_v) > VOLTAGE_TOLERANCE:
            prepared.append(p)
            last_v = p.V
    return prepared


def to_arrays(points: Sequence[IvPoint]) -> Tuple[np.ndarray, np.ndarray]:
    """Split a point sequence into voltage and current arrays."""
    v = np.fromiter((p.V for p in points), dtype=float, count=len(points))
    i = np.fromiter((p.I for p in points), dtype=float, count=len(points))
    return v, i


def detect_delimiter(sample: str) -> str:
    """Return the first of ``,``, ``;`` or tab present in ``sample``.

    Defaults to ``,`` when none is present.
    """
    for delim in _DELIMITERS:
        if delim in sample:
            return delim
    return ","


def _split_row(raw: str, delim: str) -> List[str]:
    parts = raw.split(delim)
    if len(parts) < 2:
        # Delimiter guess failed for this row; try whitespace.
        parts = raw.split()
    return parts


def parse_iv_lines(lines: Iterable[str]) -> pd.DataFrame:
    """Parse a two-column voltage/current export into a tidy DataFrame.

    The delimiter is detected on the first non-blank line. Only the first two
    fields of each row are used. Rows whose fields do not parse as numbers
    (typically a header) and rows with non-finite values are dropped.

    Args:
        lines: Text lines of the export, with or without trailing newlines.

    Returns:
        pandas.DataFrame: Columns ``Voltage (V)`` and ``Current (A)`` sorted
        by voltage. Empty when nothing parses.
    """
    rows = [line.rstrip("\r\n") for line in lines]
    rows = [line for line in rows if line.strip()]
    if not rows:
        return pd.DataFrame(columns=[VOLTAGE_COL, CURRENT_COL], dtype=float)

    delim = detect_delimiter(rows[0])
    records = []
    for raw in rows:
        parts = _split_row(raw, delim)
        if len(parts) < 2:
            continue
        records.append((parts[0].strip(), parts[1].strip()))
    if not records:
        return pd.DataFrame(columns=[VOLTAGE_COL, CURRENT_COL], dtype=float)

    df = pd.DataFrame.from_records(records, columns=[VOLTAGE_COL, CURRENT_COL])
    for col in (VOLTAGE_COL, CURRENT_COL):
        text = df[col].astype(str)
        if delim != ",":
            # Commas are only valid as 3-digit groups before the decimal point.
            grouped = text.str.fullmatch(_THOUSANDS_PATTERN)
            text = text.mask(text.str.contains(",", regex=False) & ~grouped)
            text = text.str.replace(",", "", regex=False)
        df[col] = pd.to_numeric(text, errors="coerce").astype(float)

    n_raw = len(df)
    df = df[np.isfinite(df[VOLTAGE_COL]) & np.isfinite(df[CURRENT_COL])]
    n_dropped = n_raw - len(df)
    if n_dropped:
        logger.debug("Dropped %d unparseable or non-finite rows", n_dropped)

    return df.sort_values(VOLTAGE_COL, kind="mergesort").reset_index(drop=True)


def load_iv_data(filepath):
    """
    Load an I-V sweep from a delimited text file.

    Args:
        filepath (str): Path to the CSV/TSV file with V in the first column
            and I in the second.

    Returns:
        pd.DataFrame: Parsed sweep, see :func:`parse_iv_lines`.
    """
    with open(filepath, "r", encoding="utf-8-sig") as fh:
        df = parse_iv_lines(fh)
    if df.empty:
        logger.warning("No numeric V/I rows found in %s", filepath)
    return df


def points_from_dataframe(df: pd.DataFrame) -> List[IvPoint]:
    """Convert a parsed sweep DataFrame into a list of :class:`IvPoint`.

    Raises:
        KeyError: If the voltage or current column is missing.
    """
    missing = {VOLTAGE_COL, CURRENT_COL} - set(df.columns)
    if missing:
        raise KeyError(f"Sweep DataFrame missing required columns: {sorted(missing)}")
    return [
        IvPoint(float(v), float(i))
        for v, i in zip(df[VOLTAGE_COL].to_numpy(), df[CURRENT_COL].to_numpy())
    ]
