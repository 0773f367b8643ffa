import math

import numpy as np

from lpexplorer.data_processing import (
    detect_delimiter,
    load_iv_data,
    parse_iv_lines,
    points_from_dataframe,
    prepare_points,
)
from lpexplorer.schema import IvPoint


def test_prepare_points_sorts_filters_and_deduplicates():
    raw = [
        (3.0, 0.3),
        (1.0, 0.1),
        (float("nan"), 1.0),
        (2.0, float("inf")),
        (1.0 + 1e-14, 9.9),
        (0.0, -0.2),
        (2.0, 0.2),
    ]
    pts = prepare_points(raw)
    assert [p.V for p in pts] == [0.0, 1.0, 2.0, 3.0]
    # First sample of the coincident-voltage cluster survives.
    assert pts[1].I == 0.1
    assert all(math.isfinite(p.V) and math.isfinite(p.I) for p in pts)


def test_prepare_points_output_strictly_ascending():
    rng = np.random.default_rng(0)
    v = np.round(rng.uniform(-5, 5, 200), 1)
    raw = [IvPoint(float(a), float(b)) for a, b in zip(v, rng.normal(size=200))]
    pts = prepare_points(raw)
    diffs = np.diff([p.V for p in pts])
    assert np.all(diffs > 1e-12)
    assert len(pts) == len(np.unique(v))


def test_prepare_points_tolerates_empty_input():
    assert prepare_points([]) == []


def test_detect_delimiter_order():
    assert detect_delimiter("1;2") == ";"
    assert detect_delimiter("1\t2") == "\t"
    assert detect_delimiter("1 2") == ","


def test_parse_iv_lines_skips_header_and_sorts():
    lines = ["V,I", "2.0, 0.5", "", "1.0,-0.25", "bad,row", "3.0,nan"]
    df = parse_iv_lines(lines)
    assert list(df["Voltage (V)"]) == [1.0, 2.0]
    assert list(df["Current (A)"]) == [-0.25, 0.5]


def test_parse_iv_lines_semicolon_with_thousands():
    df = parse_iv_lines(["Voltage;Current", "1,000.5;0.2", "-1;-0.1"])
    assert list(df["Voltage (V)"]) == [-1.0, 1000.5]


def test_parse_iv_lines_whitespace_fallback():
    df = parse_iv_lines(["0.0,0.0", "1.0   2.0"])
    assert list(df["Voltage (V)"]) == [0.0, 1.0]


def test_load_iv_data_empty_file_warns(caplog, tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("Voltage,Current\n")
    df = load_iv_data(str(path))
    assert df.empty
    assert any("No numeric V/I rows" in rec.message for rec in caplog.records)


def test_points_from_dataframe_round_trip(tmp_path):
    path = tmp_path / "sweep.tsv"
    path.write_text("V\tI\n0\t-1\n1\t2\n")
    pts = points_from_dataframe(load_iv_data(str(path)))
    assert [(p.V, p.I) for p in pts] == [(0.0, -1.0), (1.0, 2.0)]


def test_parse_iv_lines_rejects_misplaced_group_separators():
    df = parse_iv_lines(["V;I", "1.000,5;0.2", "12,34;0.4", "2;0.3", "-1,234;0.1"])
    assert list(df["Voltage (V)"]) == [-1234.0, 2.0]
    assert list(df["Current (A)"]) == [0.1, 0.3]
