# tests/unit/test_confidence.py
from __future__ import annotations

import pytest

from wilson import confidence_from_z, wilson_f64, z_from_confidence


def test_z_for_95_percent() -> None:
    assert z_from_confidence(0.95) == pytest.approx(1.959964, abs=1e-6)


@pytest.mark.parametrize(
    "z, level",
    [(1.0, 0.6826895), (2.0, 0.9544997), (3.0, 0.9973002)],
)
def test_documented_rules_of_thumb(z: float, level: float) -> None:
    assert confidence_from_z(z) == pytest.approx(level, abs=1e-6)
    assert z_from_confidence(level) == pytest.approx(z, abs=1e-5)


def test_zero_z_is_zero_confidence() -> None:
    assert confidence_from_z(0.0) == 0.0


@pytest.mark.parametrize("level", [0.0, 1.0, -0.1, 1.5])
def test_level_out_of_range(level: float) -> None:
    with pytest.raises(ValueError):
        z_from_confidence(level)


@pytest.mark.parametrize("z", [-1.0, float("inf"), float("nan")])
def test_bad_z(z: float) -> None:
    with pytest.raises(ValueError):
        confidence_from_z(z)


def test_wider_level_wider_interval() -> None:
    narrow = wilson_f64(7.0, 30.0, z_from_confidence(0.80))
    wide = wilson_f64(7.0, 30.0, z_from_confidence(0.99))
    assert wide.width > narrow.width
