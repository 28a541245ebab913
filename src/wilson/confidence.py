# src/wilson/confidence.py
"""Conversions between a two-sided confidence level and the multiplier z."""

from __future__ import annotations

import math

from scipy import stats as scipy_stats


def z_from_confidence(level: float) -> float:
    """z such that N(0,1) puts ``level`` of its mass in [-z, z].

    z_from_confidence(0.95) ~= 1.96
    """
    if not (0.0 < level < 1.0):
        raise ValueError(f"level must be in (0,1). Got {level}.")
    return float(scipy_stats.norm.ppf(0.5 + 0.5 * level))


def confidence_from_z(z: float) -> float:
    """Two-sided coverage of [-z, z] under N(0,1)."""
    if not (z >= 0.0 and math.isfinite(z)):
        raise ValueError(f"z must be finite and >= 0. Got {z}.")
    return float(2.0 * scipy_stats.norm.cdf(z) - 1.0)
