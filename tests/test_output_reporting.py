"""Tests for export-layer behavior."""

import json

import pandas as pd
import pytest

from lpexplorer.analysis import analyze, create_results_dataframe
from lpexplorer.output import (
    chart_json,
    chart_payload,
    result_to_dict,
    save_results_to_csv,
)
from lpexplorer.schema import IvPoint
from lpexplorer.units import ev_to_kelvin


def test_save_results_to_csv_adds_kelvin_column(tmp_path):
    pts = [IvPoint(float(v), float(v) - 1.5) for v in range(8)]
    df = create_results_dataframe(
        [{"run_name": "r1", "source_file": "r1.csv", "result": analyze(pts)}]
    )
    path = save_results_to_csv(df, output_dir=str(tmp_path))
    written = pd.read_csv(path)
    assert "Electron Temperature (K)" in written.columns
    cols = list(written.columns)
    assert cols.index("Electron Temperature (K)") == cols.index(
        "Electron Temperature (eV)"
    ) + 1


def test_save_results_to_csv_requires_temperature_column(tmp_path):
    with pytest.raises(KeyError):
        save_results_to_csv(pd.DataFrame({"Run": ["r1"]}), output_dir=str(tmp_path))


def test_ev_to_kelvin_one_ev():
    assert ev_to_kelvin(1.0) == pytest.approx(11604.518, rel=1e-6)


def test_chart_payload_requires_five_points():
    pts = [IvPoint(float(v), 0.0) for v in range(4)]
    assert chart_payload(pts) == {"voltages": [], "currents": []}
    pts.append(IvPoint(4.0, 1.0))
    payload = json.loads(chart_json(pts))
    assert payload["voltages"] == [0.0, 1.0, 2.0, 3.0, 4.0]
    assert payload["currents"][-1] == 1.0


def test_result_to_dict_keeps_absent_estimates_as_none():
    record = result_to_dict(analyze([]))
    assert record["electron_temperature"] is None
    assert record["point_count"] == 0
