"""Configuration for conversions that fill in fields the source lacks."""

from dataclasses import dataclass

from ..ratings.defaults import DEFAULT_DWZ_INDEX, UNKNOWN_AGE


@dataclass(frozen=True)
class ConversionConfig:
    """
    Fill-in conventions for conversion targets.

    These are conventions, not calibrated values: an Elo rating carries no age
    or event count, so the target's fields are filled with the defaults below.

    Raises:
        ValueError: If unknown_age is 25 or below, or dwz_index is negative
    """

    unknown_age: int = UNKNOWN_AGE  # Any age above 25 reads as "adult / unknown"
    dwz_index: int = DEFAULT_DWZ_INDEX  # Events assumed completed for a fresh DWZ

    def __post_init__(self):
        if self.unknown_age <= 25:
            raise ValueError(
                f"unknown_age must be above 25 to read as unknown, got {self.unknown_age}"
            )
        if self.dwz_index < 0:
            raise ValueError(f"dwz_index must be non-negative, got {self.dwz_index}")


DEFAULT_CONFIG = ConversionConfig()
