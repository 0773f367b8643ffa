"""
Statistical utilities for probe analysis.

This subpackage provides the straight-line fits used by the estimators and
by the diagnostic plots. All functions operate on arrays and primitive types;
no plasma-specific logic is included.

Modules:
    regression:
        Guarded closed-form least-squares fit, plus a diagnostic regression
        with R^2 and slope uncertainty.

Design Principle:
    This subpackage has no dependencies on probe/ or plotting modules.
    It provides pure numerical utilities that can be independently tested.
"""

from .regression import linear_fit, linear_regression

__all__ = ["linear_fit", "linear_regression"]
