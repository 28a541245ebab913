"""Wilson score confidence intervals for binomial proportions."""

from importlib import metadata as _metadata

from .config import CONFIG, WilsonConfig, load_config
from .confidence import confidence_from_z, z_from_confidence
from .errors import ConfigError, DomainError, WilsonError
from .interval import DEGENERATE_TRIALS, FP, WilsonResult, wilson, wilson_f32, wilson_f64

try:
    __version__ = _metadata.version("wilson-interval")
except _metadata.PackageNotFoundError:  # pragma: no cover - during local usage
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "CONFIG",
    "ConfigError",
    "DEGENERATE_TRIALS",
    "DomainError",
    "FP",
    "WilsonConfig",
    "WilsonError",
    "WilsonResult",
    "confidence_from_z",
    "load_config",
    "wilson",
    "wilson_f32",
    "wilson_f64",
    "z_from_confidence",
]
