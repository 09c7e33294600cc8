"""
Rating value types for the supported rating systems.

Each rating is a frozen dataclass: an immutable snapshot created either by its
constructor (which yields the system's documented default) or by a conversion.
No validation is performed; producers are responsible for keeping deviation,
volatility, uncertainty and index non-negative.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .defaults import (
    DEFAULT_ELO_RATING,
    DEFAULT_GLICKO_DEVIATION,
    DEFAULT_GLICKO_RATING,
    DEFAULT_GLICKO2_VOLATILITY,
    DEFAULT_INGO_RATING,
    DEFAULT_TRUESKILL_RATING,
    DEFAULT_TRUESKILL_UNCERTAINTY,
    UNKNOWN_AGE,
)


class RatingKind(Enum):
    """Rating system a value belongs to."""

    ELO = "elo"
    GLICKO = "glicko"
    GLICKO2 = "glicko2"
    DWZ = "dwz"
    TRUESKILL = "trueskill"
    INGO = "ingo"

    @classmethod
    def _missing_(cls, value):
        # Names are matched case-insensitively: RatingKind("ELO") is ELO.
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


# Elo compares by identity only; there is no field-wise ==.
@dataclass(frozen=True, eq=False)
class EloRating:
    """
    The Elo rating of a player.

    Attributes:
        rating: Elo rating number (default: 1000.0)
    """

    kind: ClassVar[RatingKind] = RatingKind.ELO
    higher_is_better: ClassVar[bool] = True

    rating: float = DEFAULT_ELO_RATING

    @classmethod
    def from_ingo(cls, ingo: "IngoRating") -> "EloRating":
        """Convert an Ingo rating to Elo."""
        from ..conversions.ingo import ingo_to_elo

        return ingo_to_elo(ingo)


@dataclass(frozen=True)
class GlickoRating:
    """
    The Glicko rating of a player. For Glicko-2 see `Glicko2Rating`.

    Attributes:
        rating: Glicko rating number (default: 1500.0)
        deviation: Rating deviation, narrower is more certain (default: 350.0)
    """

    kind: ClassVar[RatingKind] = RatingKind.GLICKO
    higher_is_better: ClassVar[bool] = True

    rating: float = DEFAULT_GLICKO_RATING
    deviation: float = DEFAULT_GLICKO_DEVIATION


@dataclass(frozen=True)
class Glicko2Rating:
    """
    The Glicko-2 rating of a player.

    Attributes:
        rating: Glicko-2 rating number (default: 1500.0)
        deviation: Rating deviation (default: 350.0)
        volatility: Expected fluctuation of the rating (default: 0.06)
    """

    kind: ClassVar[RatingKind] = RatingKind.GLICKO2
    higher_is_better: ClassVar[bool] = True

    rating: float = DEFAULT_GLICKO_RATING
    deviation: float = DEFAULT_GLICKO_DEVIATION
    volatility: float = DEFAULT_GLICKO2_VOLATILITY


@dataclass(frozen=True)
class DWZRating:
    """
    The DWZ (Deutsche Wertungszahl) rating of a player.

    There is no default: convert an existing `EloRating` with
    `DWZRating.from_elo`, or obtain a first DWZ from an external assignment
    procedure.

    Attributes:
        rating: DWZ rating number
        index: Number of rated events the player has completed
        age: Player age; use 26 (any value above 25) when unknown
    """

    kind: ClassVar[RatingKind] = RatingKind.DWZ
    higher_is_better: ClassVar[bool] = True

    rating: float
    index: int
    age: int

    @classmethod
    def from_elo(cls, elo: EloRating) -> "DWZRating":
        """Convert an Elo rating to DWZ."""
        from ..conversions.dwz import elo_to_dwz

        return elo_to_dwz(elo)


@dataclass(frozen=True)
class TrueSkillRating:
    """
    The TrueSkill rating of a player.

    Attributes:
        rating: Skill estimate mu (default: 25.0)
        uncertainty: Skill uncertainty sigma (default: 25/3 ≈ 8.333)
    """

    kind: ClassVar[RatingKind] = RatingKind.TRUESKILL
    higher_is_better: ClassVar[bool] = True

    rating: float = DEFAULT_TRUESKILL_RATING
    uncertainty: float = DEFAULT_TRUESKILL_UNCERTAINTY


@dataclass(frozen=True)
class IngoRating:
    """
    The Ingo rating of a player.

    Unlike every other system a lower number denotes a stronger player, and
    negative values are possible.

    Attributes:
        rating: Ingo rating number, lower is better (default: 230.0)
        age: Player age; use 26 (any value above 25) when unknown
    """

    kind: ClassVar[RatingKind] = RatingKind.INGO
    higher_is_better: ClassVar[bool] = False

    rating: float = DEFAULT_INGO_RATING
    age: int = UNKNOWN_AGE

    @classmethod
    def from_elo(cls, elo: EloRating) -> "IngoRating":
        """Convert an Elo rating to Ingo."""
        from ..conversions.ingo import elo_to_ingo

        return elo_to_ingo(elo)


RATING_TYPES = {
    RatingKind.ELO: EloRating,
    RatingKind.GLICKO: GlickoRating,
    RatingKind.GLICKO2: Glicko2Rating,
    RatingKind.DWZ: DWZRating,
    RatingKind.TRUESKILL: TrueSkillRating,
    RatingKind.INGO: IngoRating,
}
