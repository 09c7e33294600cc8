"""Tests for the PlayerRatings container and population-wide conversions."""

import numpy as np
import polars as pl
import pytest

from skill_ratings import (
    DWZRating,
    EloRating,
    Glicko2Rating,
    IngoRating,
    PlayerRatings,
    RatingKind,
    elo_to_dwz,
    elo_to_dwz_batch,
    elo_to_ingo,
    elo_to_ingo_batch,
    get_conversion,
    ingo_to_elo,
    ingo_to_elo_batch,
)


def generate_elo_ratings(num_players: int = 200, seed: int = 42) -> PlayerRatings:
    """Random Elo population spanning weak to very strong players."""
    rng = np.random.RandomState(seed)
    return PlayerRatings(
        kind=RatingKind.ELO,
        ratings=rng.uniform(-200.0, 3400.0, num_players),
        metadata={"source": "synthetic"},
    )


def test_container_coerces_dtypes():
    ratings = PlayerRatings(kind="ingo", ratings=[230, 100], age=[26.0, 40.0])
    assert ratings.kind is RatingKind.INGO
    assert ratings.ratings.dtype == np.float64
    assert ratings.age.dtype == np.int64
    assert ratings.ratings.flags["C_CONTIGUOUS"]
    assert ratings.num_players == 2


def test_container_requires_kind_columns():
    with pytest.raises(ValueError, match="'age'"):
        PlayerRatings(kind=RatingKind.INGO, ratings=[230.0])
    with pytest.raises(ValueError, match="'volatility'"):
        PlayerRatings(kind=RatingKind.GLICKO2, ratings=[1500.0], deviation=[350.0])


def test_container_rejects_mismatched_lengths():
    with pytest.raises(ValueError, match="shape"):
        PlayerRatings(kind=RatingKind.GLICKO, ratings=[1500.0, 1600.0], deviation=[350.0])


def test_records_round_trip():
    records = [Glicko2Rating(), Glicko2Rating(1720.5, 60.0, 0.04)]
    ratings = PlayerRatings.from_records(records)

    assert ratings.kind is RatingKind.GLICKO2
    assert ratings.get_rating(1) == Glicko2Rating(1720.5, 60.0, 0.04)
    assert ratings.to_records() == records


def test_get_rating_returns_python_scalars():
    ratings = PlayerRatings.from_records([DWZRating(1800.0, 6, 26)])
    dwz = ratings.get_rating(0)
    assert type(dwz.rating) is float
    assert type(dwz.index) is int
    assert type(dwz.age) is int


def test_from_records_rejects_empty_and_mixed():
    with pytest.raises(ValueError, match="empty"):
        PlayerRatings.from_records([])
    with pytest.raises(ValueError, match="ingo"):
        PlayerRatings.from_records([EloRating(), IngoRating()])


def test_ranks_respect_polarity():
    elo = PlayerRatings(kind=RatingKind.ELO, ratings=[1000.0, 2400.0, 1800.0])
    ingo = elo_to_ingo_batch(elo)

    np.testing.assert_array_equal(elo.ranks, [3, 1, 2])
    # Lower Ingo is better, so the same players keep the same ranks
    np.testing.assert_array_equal(ingo.ranks, elo.ranks)


def test_elo_to_ingo_batch_matches_scalar():
    elo = generate_elo_ratings()
    ingo = elo_to_ingo_batch(elo)

    assert ingo.kind is RatingKind.INGO
    for i in range(elo.num_players):
        assert ingo.get_rating(i) == elo_to_ingo(EloRating(float(elo.ratings[i])))


def test_ingo_to_elo_batch_matches_scalar():
    ingo = PlayerRatings(
        kind=RatingKind.INGO,
        ratings=np.linspace(-60.0, 300.0, 50),
        age=np.full(50, 18),
    )
    elo = ingo_to_elo_batch(ingo)

    assert elo.kind is RatingKind.ELO
    assert elo.age is None
    expected = [ingo_to_elo(r).rating for r in ingo.to_records()]
    np.testing.assert_array_equal(elo.ratings, expected)


def test_batch_round_trip():
    elo = generate_elo_ratings()
    back = ingo_to_elo_batch(elo_to_ingo_batch(elo))
    np.testing.assert_allclose(back.ratings, elo.ratings, rtol=0, atol=1e-9)


def test_elo_to_dwz_batch():
    elo = generate_elo_ratings(num_players=20)
    dwz = elo_to_dwz_batch(elo)

    np.testing.assert_array_equal(dwz.ratings, elo.ratings)
    assert dwz.get_rating(3) == elo_to_dwz(EloRating(float(elo.ratings[3])))
    assert (dwz.index == 6).all()
    assert (dwz.age == 26).all()


def test_batch_does_not_alias_input():
    elo = generate_elo_ratings(num_players=10)
    before = elo.clone()
    dwz = elo_to_dwz_batch(elo)
    dwz.ratings[:] = 0.0

    np.testing.assert_array_equal(elo.ratings, before.ratings)
    assert dwz.metadata == {"source": "synthetic"}
    assert dwz.metadata is not elo.metadata


def test_batch_rejects_wrong_kind():
    ingo = PlayerRatings.from_records([IngoRating()])
    with pytest.raises(ValueError, match="Expected elo ratings, got ingo"):
        elo_to_ingo_batch(ingo)
    with pytest.raises(ValueError):
        elo_to_dwz_batch(ingo)


def test_registry_batch_functions():
    elo = generate_elo_ratings(num_players=5)
    conversion = get_conversion("elo", "ingo")
    np.testing.assert_array_equal(
        conversion.convert_batch(elo).ratings,
        elo_to_ingo_batch(elo).ratings,
    )


def test_to_dataframe():
    ingo = PlayerRatings.from_records([IngoRating(230.0), IngoRating(-10.0, 30)])
    df = ingo.to_dataframe()

    assert isinstance(df, pl.DataFrame)
    assert df.columns == ["player_id", "ratings", "age", "rank"]
    assert df["rank"].to_list() == [2, 1]
    assert df["age"].to_list() == [26, 30]


def test_clone_is_deep():
    ratings = PlayerRatings.from_records([DWZRating(1500.0, 3, 12)])
    cloned = ratings.clone()
    cloned.index[0] = 99

    assert ratings.index[0] == 3
    assert repr(cloned) == "PlayerRatings(kind=dwz, players=1)"


def test_ingo_to_elo_batch_rejects_wrong_kind():
    elo = generate_elo_ratings(num_players=3)
    with pytest.raises(ValueError, match="Expected ingo ratings, got elo"):
        ingo_to_elo_batch(elo)


def test_container_rejects_fractional_integer_columns():
    with pytest.raises(ValueError, match="'age' must hold whole numbers"):
        PlayerRatings(kind=RatingKind.INGO, ratings=[230.0], age=[26.9])
    with pytest.raises(ValueError, match="'index'"):
        PlayerRatings(kind=RatingKind.DWZ, ratings=[1500.0], index=[6.5], age=[26])


def test_container_kind_name_is_case_insensitive():
    ratings = PlayerRatings(kind="ELO", ratings=[1000.0])
    assert ratings.kind is RatingKind.ELO
