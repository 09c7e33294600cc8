"""
Skill Ratings - rating value types for Elo, Glicko, Glicko-2, DWZ, TrueSkill
and Ingo, with conversions between them.

Every rating is an immutable value record; constructing one with no
arguments gives the system's default. Conversions are pure functions named
by direction, and only a few pairs are defined.

Quick Start:
    from skill_ratings import EloRating, IngoRating, elo_to_ingo, ingo_to_elo

    elo = EloRating()                  # rating=1000.0
    ingo = elo_to_ingo(elo)            # IngoRating(rating=230.0, age=26)
    back = ingo_to_elo(ingo)           # rating=1000.0

    # Lower Ingo is better
    strong = IngoRating.from_elo(EloRating(2400.0))

Whole populations (numpy arrays, numba kernels):
    from skill_ratings import PlayerRatings, RatingKind, elo_to_ingo_batch

    elo = PlayerRatings(kind=RatingKind.ELO, ratings=[1000.0, 1800.0, 2400.0])
    ingo = elo_to_ingo_batch(elo)
    print(ingo.to_dataframe())

Looking up a conversion by system:
    from skill_ratings import get_conversion

    get_conversion("elo", "dwz").convert(EloRating(1800.0))
    get_conversion("glicko", "elo")    # raises UnsupportedConversionError
"""

from .ratings import (
    RatingKind,
    EloRating,
    GlickoRating,
    Glicko2Rating,
    DWZRating,
    TrueSkillRating,
    IngoRating,
)
from .base import PlayerRatings
from .conversions import (
    ConversionConfig,
    DEFAULT_CONFIG,
    elo_to_ingo,
    ingo_to_elo,
    elo_to_dwz,
    elo_to_ingo_batch,
    ingo_to_elo_batch,
    elo_to_dwz_batch,
    Conversion,
    UnsupportedConversionError,
    get_conversion,
    supported_conversions,
)

__version__ = "0.1.0"

__all__ = [
    # Ratings
    "RatingKind",
    "EloRating",
    "GlickoRating",
    "Glicko2Rating",
    "DWZRating",
    "TrueSkillRating",
    "IngoRating",
    # Base
    "PlayerRatings",
    # Conversions
    "ConversionConfig",
    "DEFAULT_CONFIG",
    "elo_to_ingo",
    "ingo_to_elo",
    "elo_to_dwz",
    "elo_to_ingo_batch",
    "ingo_to_elo_batch",
    "elo_to_dwz_batch",
    "Conversion",
    "UnsupportedConversionError",
    "get_conversion",
    "supported_conversions",
]
