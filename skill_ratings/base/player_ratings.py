"""Container for many players' ratings in one system (numpy-based)."""

from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional, Sequence

import numpy as np
import polars as pl

from ..ratings.types import RATING_TYPES, RatingKind

_INTEGER_COLUMNS = ("index", "age")


def _column_name(field_name: str) -> str:
    # The primary rating array is plural, like every other array-of-players.
    return "ratings" if field_name == "rating" else field_name


def required_columns(kind: RatingKind) -> List[str]:
    """Array attributes a PlayerRatings of this kind must carry."""
    return [_column_name(f.name) for f in fields(RATING_TYPES[kind])]


def _compute_ranks(ratings: np.ndarray, higher_is_better: bool) -> np.ndarray:
    """
    Compute ranks for all players in O(n log n).

    Returns array where ranks[i] = rank of player i (1 = best).
    """
    n = len(ratings)
    order = np.argsort(-ratings if higher_is_better else ratings, kind="stable")
    ranks = np.empty(n, dtype=np.int64)
    ranks[order] = np.arange(1, n + 1)
    return ranks


@dataclass
class PlayerRatings:
    """
    Ratings for a population of players, all in the same rating system.

    Each field of the system's value type is stored as a contiguous numpy
    array indexed by player id; columns the system does not use stay None.

    Attributes:
        kind: Rating system of every row
        ratings: (num_players,) float64 primary rating
        deviation: (num_players,) float64 rating deviation (Glicko, Glicko-2)
        volatility: (num_players,) float64 volatility (Glicko-2)
        uncertainty: (num_players,) float64 sigma (TrueSkill)
        index: (num_players,) int64 completed rated events (DWZ)
        age: (num_players,) int64 player age (DWZ, Ingo)
        metadata: Free-form information carried along with the ratings
    """

    kind: RatingKind
    ratings: np.ndarray

    deviation: Optional[np.ndarray] = None
    volatility: Optional[np.ndarray] = None
    uncertainty: Optional[np.ndarray] = None
    index: Optional[np.ndarray] = None
    age: Optional[np.ndarray] = None

    metadata: Dict = field(default_factory=dict)

    def __post_init__(self):
        """Coerce arrays to contiguous dtypes and check the columns match the kind."""
        self.kind = RatingKind(self.kind)
        required = required_columns(self.kind)

        for name in ("ratings", "deviation", "volatility", "uncertainty", "index", "age"):
            values = getattr(self, name)
            if values is None:
                if name in required:
                    raise ValueError(
                        f"{self.kind.value} ratings require a '{name}' array"
                    )
                continue
            if name in _INTEGER_COLUMNS:
                raw = np.asarray(values)
                if raw.dtype.kind == "f" and not np.array_equal(raw, np.trunc(raw)):
                    raise ValueError(f"'{name}' must hold whole numbers")
                values = np.ascontiguousarray(raw, dtype=np.int64)
            else:
                values = np.ascontiguousarray(values, dtype=np.float64)
            if values.shape != (len(self.ratings),):
                raise ValueError(
                    f"'{name}' has shape {values.shape}, expected ({len(self.ratings)},)"
                )
            setattr(self, name, values)

    @property
    def num_players(self) -> int:
        return len(self.ratings)

    @property
    def higher_is_better(self) -> bool:
        return RATING_TYPES[self.kind].higher_is_better

    @property
    def ranks(self) -> np.ndarray:
        """Ranks array (1 = best), honouring the system's polarity."""
        return _compute_ranks(self.ratings, self.higher_is_better)

    def get_rating(self, player_id: int):
        """Get the rating value record for a single player."""
        rating_type = RATING_TYPES[self.kind]
        values = {}
        for f in fields(rating_type):
            column = getattr(self, _column_name(f.name))
            values[f.name] = column[player_id].item()
        return rating_type(**values)

    def to_records(self) -> list:
        """All players as rating value records."""
        return [self.get_rating(i) for i in range(self.num_players)]

    @classmethod
    def from_records(cls, records: Sequence, metadata: Optional[Dict] = None) -> "PlayerRatings":
        """
        Build a container from rating value records.

        Args:
            records: Ratings of one system, index = player_id
            metadata: Optional metadata to attach

        Raises:
            ValueError: If records is empty or mixes rating systems
        """
        if len(records) == 0:
            raise ValueError("Cannot infer the rating system from an empty sequence")

        kind = records[0].kind
        mixed = {r.kind.value for r in records if r.kind is not kind}
        if mixed:
            raise ValueError(
                f"All records must be {kind.value} ratings, also got: {', '.join(sorted(mixed))}"
            )

        columns = {
            _column_name(f.name): [getattr(r, f.name) for r in records]
            for f in fields(RATING_TYPES[kind])
        }
        return cls(kind=kind, metadata=dict(metadata or {}), **columns)

    def to_dataframe(self) -> pl.DataFrame:
        """Convert ratings to a Polars DataFrame."""
        data = {"player_id": np.arange(self.num_players)}
        for name in required_columns(self.kind):
            data[name] = getattr(self, name)
        data["rank"] = self.ranks
        return pl.DataFrame(data)

    def clone(self) -> "PlayerRatings":
        """Create a deep copy of the ratings."""
        return PlayerRatings(
            kind=self.kind,
            ratings=self.ratings.copy(),
            deviation=self.deviation.copy() if self.deviation is not None else None,
            volatility=self.volatility.copy() if self.volatility is not None else None,
            uncertainty=self.uncertainty.copy() if self.uncertainty is not None else None,
            index=self.index.copy() if self.index is not None else None,
            age=self.age.copy() if self.age is not None else None,
            metadata=self.metadata.copy(),
        )

    def __repr__(self) -> str:
        return f"PlayerRatings(kind={self.kind.value}, players={self.num_players})"
