"""Default values and fixed conversion constants."""

DEFAULT_ELO_RATING = 1000.0

DEFAULT_GLICKO_RATING = 1500.0
DEFAULT_GLICKO_DEVIATION = 350.0
DEFAULT_GLICKO2_VOLATILITY = 0.06

DEFAULT_TRUESKILL_RATING = 25.0
DEFAULT_TRUESKILL_UNCERTAINTY = 25.0 / 3.0

DEFAULT_INGO_RATING = 230.0

# Any age above 25 means "adult / unknown"; never 0.
UNKNOWN_AGE = 26

# Events assumed completed when a DWZ is filled in from Elo.
DEFAULT_DWZ_INDEX = 6

# Ingo = INGO_OFFSET - Elo / INGO_SCALE, and its exact inverse
# Elo = ELO_FROM_INGO_OFFSET - INGO_SCALE * Ingo (2840 == 8 * 355).
INGO_OFFSET = 355.0
INGO_SCALE = 8.0
ELO_FROM_INGO_OFFSET = 2840.0
