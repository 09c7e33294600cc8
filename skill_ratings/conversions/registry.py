"""
Lookup of the supported conversions by (source, target) system.

The set of pairs is small and partial. A missing pair is
reported as an error; conversions are never chained to fill the gap.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple, Union

from ..ratings.types import RatingKind
from .batch import elo_to_dwz_batch, elo_to_ingo_batch, ingo_to_elo_batch
from .dwz import elo_to_dwz
from .ingo import elo_to_ingo, ingo_to_elo


class UnsupportedConversionError(ValueError):
    """No conversion is defined between the requested rating systems."""

    def __init__(self, source: RatingKind, target: RatingKind):
        self.source = source
        self.target = target
        supported = ", ".join(f"{s.value}->{t.value}" for s, t in supported_conversions())
        super().__init__(
            f"No conversion from {source.value} to {target.value} "
            f"(supported: {supported})"
        )


@dataclass(frozen=True)
class Conversion:
    """A supported conversion with its scalar and population-wide functions."""

    source: RatingKind
    target: RatingKind
    convert: Callable
    convert_batch: Callable


_CONVERSIONS: Dict[Tuple[RatingKind, RatingKind], Conversion] = {
    (c.source, c.target): c
    for c in (
        Conversion(RatingKind.ELO, RatingKind.INGO, elo_to_ingo, elo_to_ingo_batch),
        Conversion(RatingKind.INGO, RatingKind.ELO, ingo_to_elo, ingo_to_elo_batch),
        Conversion(RatingKind.ELO, RatingKind.DWZ, elo_to_dwz, elo_to_dwz_batch),
    )
}


def _as_kind(system: Union[RatingKind, str, type]) -> RatingKind:
    """Accept a RatingKind, its string value, or a rating value type."""
    if isinstance(system, (RatingKind, str)):
        return RatingKind(system)
    kind = getattr(system, "kind", None)
    if not isinstance(kind, RatingKind):
        raise ValueError(f"Unknown rating system: {system!r}")
    return kind


def supported_conversions() -> List[Tuple[RatingKind, RatingKind]]:
    """All (source, target) pairs with a defined conversion."""
    return list(_CONVERSIONS)


def get_conversion(
    source: Union[RatingKind, str, type],
    target: Union[RatingKind, str, type],
) -> Conversion:
    """
    Look up the conversion between two rating systems.

    Args:
        source: Source system (RatingKind, name such as "elo", or rating type)
        target: Target system, in the same forms

    Returns:
        The Conversion for the pair

    Raises:
        UnsupportedConversionError: If no conversion is defined for the pair
        ValueError: If a system name is not recognised
    """
    source_kind, target_kind = _as_kind(source), _as_kind(target)
    try:
        return _CONVERSIONS[(source_kind, target_kind)]
    except KeyError:
        raise UnsupportedConversionError(source_kind, target_kind) from None
