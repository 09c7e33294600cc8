"""
Elo <-> Ingo conversions.

Ingo runs in the opposite direction to Elo (lower is better), so the mapping
is a decreasing affine function:

    ingo = 355 - elo / 8
    elo  = 2840 - 8 * ingo

The two formulas are exact inverses of each other.
"""

from ..ratings.defaults import ELO_FROM_INGO_OFFSET, INGO_OFFSET, INGO_SCALE
from ..ratings.types import EloRating, IngoRating
from .config import ConversionConfig, DEFAULT_CONFIG


def elo_to_ingo(elo: EloRating, config: ConversionConfig = DEFAULT_CONFIG) -> IngoRating:
    """
    Convert an Elo rating to an Ingo rating.

    Elo has no age, so the result always uses the unknown-age convention.

    Args:
        elo: Source Elo rating
        config: Fill-in conventions (default: age 26)

    Returns:
        New IngoRating
    """
    return IngoRating(
        rating=INGO_OFFSET - (elo.rating / INGO_SCALE),
        age=config.unknown_age,
    )


def ingo_to_elo(ingo: IngoRating) -> EloRating:
    """Convert an Ingo rating to an Elo rating. The Ingo age is dropped."""
    return EloRating(rating=ELO_FROM_INGO_OFFSET - INGO_SCALE * ingo.rating)
