# src/wilson/precision.py
"""
Floating-point widths.

Each ``Precision`` bundles the scalar constructor and square root for one width,
so the interval code is written once and specialised by binding, not by
branching per call.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from .errors import ConfigError


@dataclass(frozen=True, slots=True)
class Precision:
    name: str
    scalar: Callable[[Any], Any]
    sqrt: Callable[[Any], Any]


F64 = Precision(name="f64", scalar=float, sqrt=math.sqrt)
F32 = Precision(name="f32", scalar=np.float32, sqrt=np.sqrt)

_BY_NAME = {p.name: p for p in (F32, F64)}


def precision_for(name: str) -> Precision:
    try:
        return _BY_NAME[name]
    except KeyError as e:
        raise ConfigError(
            f"Unknown precision {name!r}. Allowed: {sorted(_BY_NAME)}"
        ) from e
