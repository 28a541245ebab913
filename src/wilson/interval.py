# src/wilson/interval.py
"""
Wilson score interval for a binomial proportion.

Provides:
  - wilson(successes, trials, z)      width chosen at import (WILSON_FP)
  - wilson_f64(successes, trials, z)  Python float arithmetic
  - wilson_f32(successes, trials, z)  numpy.float32 arithmetic
  - WilsonResult(low, high)

Notes:
  * Inputs are not validated. ``0 <= successes <= trials`` and ``z >= 0`` are the
    caller's job; out-of-domain input either computes whatever the arithmetic
    gives or raises DomainError when the square-root argument goes negative.
  * ``trials <= 0.001`` short-circuits to the uninformative interval [0, 1].
  * Bounds are not clipped to [0, 1].

z=1 is roughly two-thirds confidence, z=2 roughly 95%, z=3 roughly 99.7%.

Example: act on a user only when at least a third of their posts are flagged,
erring on the side of not acting when there is little evidence::

    if wilson(n_flagged, n_posts, 1.5).low > 0.33:
        ban_user()

With z=1.5 two flagged posts out of two is enough, one out of one is not, and a
single clean post raises the bar to three flagged.
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

from .config import CONFIG
from .errors import DomainError
from .precision import F32, F64, Precision, precision_for

LOG = logging.getLogger(__name__)

# Trial counts at or below this are treated as "no trials observed".
DEGENERATE_TRIALS = 0.001


class WilsonResult(NamedTuple):
    """Bounds of a Wilson interval; the next trial succeeds with probability in [low, high]."""

    low: float
    high: float

    @property
    def width(self) -> float:
        return self.high - self.low

    @property
    def center(self) -> float:
        return (self.low + self.high) / 2

    def contains(self, rate: float) -> bool:
        return self.low <= rate <= self.high


def _wilson(successes: Any, trials: Any, z: Any, prec: Precision) -> WilsonResult:
    t = prec.scalar
    n = t(trials)
    s = t(successes)
    zz = t(z)

    if n <= t(DEGENERATE_TRIALS):
        return WilsonResult(t(0.0), t(1.0))

    z2 = zz * zz
    p = (s + t(0.5) * z2) / (n + z2)
    # divide before multiplying so large f32 counts stay finite
    radicand = s * ((n - s) / n) + z2 / t(4.0)
    # NaN fails this comparison too
    if not radicand >= 0:
        LOG.debug(
            "wilson domain error: successes=%r trials=%r z=%r radicand=%r",
            successes, trials, z, radicand,
        )
        raise DomainError(
            f"sqrt of negative argument ({radicand!r}); expected 0 <= successes <= trials "
            f"and finite inputs, got successes={successes!r}, trials={trials!r}, z={z!r}"
        )
    d = zz / (n + z2) * prec.sqrt(radicand)
    return WilsonResult(p - d, p + d)


def wilson_f64(successes: float, trials: float, z: float) -> WilsonResult:
    """Wilson interval in double precision.

    Args:
        successes: observed successes, 0 <= successes <= trials (may be fractional)
        trials: number of trials >= 0 (may be fractional)
        z: confidence multiplier >= 0; larger z widens the interval

    Returns:
        WilsonResult(low, high). (0.0, 1.0) when trials <= 0.001.

    Raises:
        DomainError: the square-root argument is negative or NaN. Infinite
            trials also lands here, since (n - s) / n is inf / inf.
    """
    return _wilson(successes, trials, z, F64)


def wilson_f32(successes: float, trials: float, z: float) -> WilsonResult:
    """Wilson interval in single precision; bounds are numpy.float32."""
    return _wilson(successes, trials, z, F32)


_ENTRY_POINTS = {"f32": wilson_f32, "f64": wilson_f64}

_active = precision_for(CONFIG.precision)
FP = _active.scalar
wilson = _ENTRY_POINTS[_active.name]
