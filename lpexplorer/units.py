"""Centralized unit conversion utilities."""

from __future__ import annotations

K_EV: float = 8.617333262145e-5  # eV/K


def ev_to_kelvin(temperature_ev: float) -> float:
    """Convert an electron temperature from eV to kelvin.

    Args:
        temperature_ev (float): Temperature expressed as ``k_B T`` in
            electronvolts.

    Returns:
        float: Temperature in kelvin.

    References:
        CODATA 2018 Boltzmann constant, 8.617333262145e-5 eV/K.
    """
    return float(temperature_ev) / K_EV
