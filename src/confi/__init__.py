"""Validated significance levels, confidence levels and confidence intervals."""

from importlib import metadata as _metadata

from .confidence import ConfidenceLevel
from .errors import ConfidenceError, InvalidRangeError, OutOfRangeError
from .interval import ConfidenceInterval
from .probability import ProbabilityValue
from .significance import SignificanceLevel

try:
    __version__ = _metadata.version("confi")
except _metadata.PackageNotFoundError:  # pragma: no cover - during local usage
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "ConfidenceError",
    "ConfidenceInterval",
    "ConfidenceLevel",
    "InvalidRangeError",
    "OutOfRangeError",
    "ProbabilityValue",
    "SignificanceLevel",
]
