import pytest

from lpexplorer.probe import estimate_floating_potential, estimate_plasma_potential
from lpexplorer.schema import IvPoint


def _pts(pairs):
    return [IvPoint(v, i) for v, i in pairs]


def test_floating_potential_interpolates_first_crossing():
    pts = _pts([(-1, -2.0), (0, -0.5), (1, 1.0), (2, 3.0)])
    assert estimate_floating_potential(pts) == pytest.approx(1.0 / 3.0)


def test_floating_potential_exact_zero_sample():
    pts = _pts([(-1, -2.0), (0, 0.0), (1, 1.0)])
    assert estimate_floating_potential(pts) == 0.0


def test_floating_potential_first_crossing_wins():
    pts = _pts([(0, -1.0), (1, 1.0), (2, -1.0), (3, 1.0)])
    assert estimate_floating_potential(pts) == pytest.approx(0.5)


def test_floating_potential_falls_back_to_min_abs_current():
    pts = _pts([(0, 0.1), (1, 0.2), (2, 0.05), (3, 0.3)])
    assert estimate_floating_potential(pts) == 2.0


def test_floating_potential_fallback_tie_picks_lowest_voltage():
    pts = _pts([(0, -0.3), (1, -0.1), (2, -0.1), (3, -0.2)])
    assert estimate_floating_potential(pts) == 1.0


def test_plasma_potential_is_midpoint_of_steepest_interval():
    pts = _pts([(0, 0), (1, 1), (2, 5), (3, 6)])
    assert estimate_plasma_potential(pts) == 1.5


def test_plasma_potential_tie_picks_first_interval():
    pts = _pts([(0, 0), (1, 2), (2, 2), (3, 4)])
    assert estimate_plasma_potential(pts) == 0.5


def test_plasma_potential_needs_three_points():
    assert estimate_plasma_potential(_pts([(0, 0), (1, 1)])) is None


def test_plasma_potential_overflowing_slope_is_indeterminate():
    pts = _pts([(0.0, -1e308), (0.5, 1e308), (1.0, 1e308)])
    assert estimate_plasma_potential(pts) is None


def test_floating_potential_overflowing_interpolation_falls_back():
    pts = _pts([(-1e308, -1e308), (1e308, 1e308)])
    assert estimate_floating_potential(pts) == -1e308
