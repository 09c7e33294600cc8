"""Rating value types."""

from .types import (
    RatingKind,
    EloRating,
    GlickoRating,
    Glicko2Rating,
    DWZRating,
    TrueSkillRating,
    IngoRating,
    RATING_TYPES,
)

__all__ = [
    "RatingKind",
    "EloRating",
    "GlickoRating",
    "Glicko2Rating",
    "DWZRating",
    "TrueSkillRating",
    "IngoRating",
    "RATING_TYPES",
]
