"""
Element-wise conversions over whole PlayerRatings populations.

Each function mirrors its scalar counterpart and produces bit-identical
values; the input container is never modified.
"""

import numpy as np

from ..base import PlayerRatings
from ..ratings.defaults import ELO_FROM_INGO_OFFSET, INGO_OFFSET, INGO_SCALE
from ..ratings.types import RatingKind
from .config import ConversionConfig, DEFAULT_CONFIG
from ._numba_core import elo_to_ingo_array, ingo_to_elo_array


def _require_kind(ratings: PlayerRatings, kind: RatingKind) -> None:
    if ratings.kind is not kind:
        raise ValueError(
            f"Expected {kind.value} ratings, got {ratings.kind.value}"
        )


def elo_to_ingo_batch(
    ratings: PlayerRatings,
    config: ConversionConfig = DEFAULT_CONFIG,
) -> PlayerRatings:
    """Convert Elo ratings for every player to Ingo (unknown age for all)."""
    _require_kind(ratings, RatingKind.ELO)
    return PlayerRatings(
        kind=RatingKind.INGO,
        ratings=elo_to_ingo_array(ratings.ratings, INGO_OFFSET, INGO_SCALE),
        age=np.full(ratings.num_players, config.unknown_age, dtype=np.int64),
        metadata=ratings.metadata.copy(),
    )


def ingo_to_elo_batch(ratings: PlayerRatings) -> PlayerRatings:
    """Convert Ingo ratings for every player to Elo. Ages are dropped."""
    _require_kind(ratings, RatingKind.INGO)
    return PlayerRatings(
        kind=RatingKind.ELO,
        ratings=ingo_to_elo_array(ratings.ratings, ELO_FROM_INGO_OFFSET, INGO_SCALE),
        metadata=ratings.metadata.copy(),
    )


def elo_to_dwz_batch(
    ratings: PlayerRatings,
    config: ConversionConfig = DEFAULT_CONFIG,
) -> PlayerRatings:
    """Convert Elo ratings for every player to DWZ with default index and age."""
    _require_kind(ratings, RatingKind.ELO)
    n = ratings.num_players
    return PlayerRatings(
        kind=RatingKind.DWZ,
        ratings=ratings.ratings.copy(),
        index=np.full(n, config.dwz_index, dtype=np.int64),
        age=np.full(n, config.unknown_age, dtype=np.int64),
        metadata=ratings.metadata.copy(),
    )
