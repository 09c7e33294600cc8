"""Conversions between rating systems.

Supported pairs:
- Elo -> Ingo: ingo = 355 - elo / 8, age 26
- Ingo -> Elo: elo = 2840 - 8 * ingo (exact inverse of the above)
- Elo -> DWZ: rating carried over, index 6, age 26

No other pair is defined.
"""

from .config import ConversionConfig, DEFAULT_CONFIG
from .ingo import elo_to_ingo, ingo_to_elo
from .dwz import elo_to_dwz
from .batch import elo_to_ingo_batch, ingo_to_elo_batch, elo_to_dwz_batch
from .registry import (
    Conversion,
    UnsupportedConversionError,
    get_conversion,
    supported_conversions,
)

__all__ = [
    "ConversionConfig",
    "DEFAULT_CONFIG",
    # Scalar
    "elo_to_ingo",
    "ingo_to_elo",
    "elo_to_dwz",
    # Population-wide
    "elo_to_ingo_batch",
    "ingo_to_elo_batch",
    "elo_to_dwz_batch",
    # Lookup
    "Conversion",
    "UnsupportedConversionError",
    "get_conversion",
    "supported_conversions",
]
