# src/wilson/config.py
"""
Import-time configuration.

The floating-point width is a process-start decision: ``WILSON_FP`` is read once
when the package is imported and the default ``wilson()`` entry point is bound
to the matching precision. There is deliberately no ``set_config``; callers who
need the other width call ``wilson_f32`` / ``wilson_f64`` directly.

    WILSON_FP=f32 python -c "import wilson; print(wilson.FP)"
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Literal, Mapping, Optional

from .errors import ConfigError

LOG = logging.getLogger(__name__)

PrecisionName = Literal["f32", "f64"]
_PRECISIONS: tuple[str, ...] = ("f32", "f64")

ENV_PRECISION = "WILSON_FP"


@dataclass(frozen=True)
class WilsonConfig:
    """
    Package configuration.

    precision:
        "f64" (default) computes with Python floats, "f32" with numpy.float32
        throughout. Exactly one is active per process.
    """

    precision: PrecisionName = "f64"

    def __post_init__(self) -> None:
        if self.precision not in _PRECISIONS:
            raise ConfigError(
                f"precision must be one of {list(_PRECISIONS)}, got {self.precision!r}"
            )


def load_config(environ: Optional[Mapping[str, str]] = None) -> WilsonConfig:
    """Build a config from the environment (``os.environ`` by default)."""
    env = os.environ if environ is None else environ
    raw = env.get(ENV_PRECISION, "")
    name = str(raw).strip().lower() or "f64"
    if name not in _PRECISIONS:
        raise ConfigError(
            f"{ENV_PRECISION} must be 'f32' or 'f64', got {raw!r}"
        )
    cfg = WilsonConfig(precision=name)  # type: ignore[arg-type]
    LOG.debug("wilson precision resolved to %s", cfg.precision)
    return cfg


CONFIG = load_config()
