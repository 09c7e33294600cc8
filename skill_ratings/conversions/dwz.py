"""Elo -> DWZ conversion."""

from ..ratings.types import DWZRating, EloRating
from .config import ConversionConfig, DEFAULT_CONFIG


def elo_to_dwz(elo: EloRating, config: ConversionConfig = DEFAULT_CONFIG) -> DWZRating:
    """
    Convert an Elo rating to a DWZ rating.

    Elo and DWZ share a numeric range, so the rating is carried over as is.
    The index and age are filled from `config` (6 events, age 26). This is a
    convenience default, not a calibrated mapping between the two systems.
    """
    return DWZRating(
        rating=elo.rating,
        index=config.dwz_index,
        age=config.unknown_age,
    )
