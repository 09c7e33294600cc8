"""Base containers for rating populations."""

from .player_ratings import PlayerRatings, required_columns

__all__ = ["PlayerRatings", "required_columns"]
