import numpy as np
import pytest

from lpexplorer.stats.regression import linear_fit, linear_regression


def test_linear_fit_recovers_exact_line():
    x = [0.0, 1.0, 2.0, 3.0]
    y = [1.0, 3.0, 5.0, 7.0]
    slope, intercept = linear_fit(x, y)
    assert slope == pytest.approx(2.0)
    assert intercept == pytest.approx(1.0)


def test_linear_fit_rejects_single_point():
    assert linear_fit([1.0], [2.0]) is None


def test_linear_fit_rejects_constant_x():
    assert linear_fit([2.0, 2.0, 2.0], [1.0, 2.0, 3.0]) is None


def test_linear_fit_rejects_non_finite_result():
    assert linear_fit([0.0, 1.0, 2.0], [0.0, np.inf, 1.0]) is None


def test_linear_regression_reports_diagnostics():
    x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    y = 0.5 * x - 1.0 + np.array([0.01, -0.01, 0.0, 0.01, -0.01])
    reg = linear_regression(x, y)
    assert abs(reg["m"] - 0.5) < 0.02
    assert 0.99 < reg["r2"] <= 1.0
    assert reg["n"] == 5


def test_linear_regression_insufficient_points_raises():
    with pytest.raises(ValueError):
        linear_regression(np.array([0.0, 1.0]), np.array([1.0, 2.0]))
