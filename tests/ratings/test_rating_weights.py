"""
Tests for rating-weight estimation from player records.

Players are synthetic: ratings are random integers and PER is an exact
linear function of them, so the regression must return the weights.
Playoff rows and short seasons carry junk PER and must be ignored.
"""

import numpy as np
import pytest

from ratingfit.core.exceptions import SingularMatrixError, ValidationError
from ratingfit.ratings import (
    MIN_MINUTES,
    RATING_KEYS,
    RatingWeights,
    collect_samples,
    regress_ratings_per,
)


def _player(pid, seasons):
    """seasons: list of (season, ratings dict, [stats rows])"""
    ratings = []
    stats = []
    for season, rating_row, stat_rows in seasons:
        ratings.append(dict(rating_row, season=season))
        for row in stat_rows:
            stats.append(dict(row, season=season))
    return {"pid": pid, "ratings": ratings, "stats": stats}


@pytest.fixture
def true_weights(rng):
    return dict(zip(RATING_KEYS, rng.uniform(-0.2, 0.4, size=len(RATING_KEYS))))


@pytest.fixture
def league(rng, true_weights):
    """60 players x 3 seasons; the third season of each player is too short."""
    players = []
    for pid in range(60):
        seasons = []
        for k, season in enumerate((2021, 2022, 2023)):
            rating_row = {key: int(rng.integers(20, 81)) for key in RATING_KEYS}
            per = sum(true_weights[key] * rating_row[key] for key in RATING_KEYS)
            minutes = 1500 if k < 2 else 300
            seasons.append((season, rating_row, [
                {"playoffs": False, "min": minutes, "per": per if k < 2 else 99.0},
                {"playoffs": True, "min": 600, "per": -50.0},
            ]))
        players.append(_player(pid, seasons))
    return players


# ═══════════════════════════════════════════════════════════════════════
# collect_samples
# ═══════════════════════════════════════════════════════════════════════


class TestCollectSamples:
    """Matching rating seasons to regular-season stats."""

    def test_counts_only_qualifying_seasons(self, league):
        samples = collect_samples(league)
        assert samples.n == 120
        assert samples.ratings.shape == (120, 15)
        assert samples.labels == RATING_KEYS

    def test_playoff_and_short_rows_excluded(self, league):
        samples = collect_samples(league)
        assert not np.any(samples.response == -50.0)
        assert not np.any(samples.response == 99.0)

    def test_keys_identify_rows(self, league):
        samples = collect_samples(league)
        assert samples.keys[0] == (0, 2021)
        assert samples.keys[1] == (0, 2022)
        assert samples.keys[2] == (1, 2021)

    def test_minutes_threshold_is_strict(self):
        rating = {key: 50 for key in RATING_KEYS}
        players = [_player(1, [
            (2020, rating, [{"min": MIN_MINUTES, "per": 10.0}]),
            (2021, rating, [{"min": MIN_MINUTES + 1, "per": 12.0}]),
        ])]
        samples = collect_samples(players)
        assert samples.keys == ((1, 2021),)
        assert samples.response.tolist() == [12.0]

    def test_missing_playoffs_flag_is_regular_season(self):
        players = [_player(1, [(2020, {"hgt": 40}, [{"min": 900, "per": 15.0}])])]
        samples = collect_samples(players, ratings=["hgt"])
        assert samples.ratings.tolist() == [[40.0]]

    def test_split_season_yields_one_row_per_stats_row(self):
        players = [_player(1, [(2020, {"hgt": 40}, [
            {"min": 900, "per": 15.0},
            {"min": 700, "per": 11.0},
        ])])]
        samples = collect_samples(players, ratings=["hgt"])
        assert samples.response.tolist() == [15.0, 11.0]

    def test_custom_stat_and_ratings(self):
        players = [_player(1, [(2020, {"hgt": 40, "spd": 60}, [
            {"min": 900, "per": 15.0, "ws": 4.5},
        ])])]
        samples = collect_samples(players, ratings=("spd", "hgt"), stat="ws")
        assert samples.labels == ("spd", "hgt")
        assert samples.ratings.tolist() == [[60.0, 40.0]]
        assert samples.response.tolist() == [4.5]

    def test_no_qualifying_seasons(self):
        players = [_player(1, [(2020, {"hgt": 40}, [{"min": 100, "per": 15.0}])])]
        with pytest.raises(ValidationError, match="no player-season"):
            collect_samples(players, ratings=["hgt"])

    def test_missing_rating_key(self):
        players = [_player(7, [(2020, {"hgt": 40}, [{"min": 900, "per": 15.0}])])]
        with pytest.raises(ValidationError, match="player 7, season 2020: missing 'stre'"):
            collect_samples(players, ratings=["hgt", "stre"])

    def test_missing_stat_key(self):
        players = [_player(7, [(2020, {"hgt": 40}, [{"min": 900}])])]
        with pytest.raises(ValidationError, match="missing 'per'"):
            collect_samples(players, ratings=["hgt"])

    def test_empty_ratings_list(self, league):
        with pytest.raises(ValidationError, match="at least one rating key"):
            collect_samples(league, ratings=())


# ═══════════════════════════════════════════════════════════════════════
# regress_ratings_per
# ═══════════════════════════════════════════════════════════════════════


class TestRegressRatingsPer:
    """End-to-end weight estimation."""

    def test_recovers_true_weights(self, league, true_weights):
        weights = regress_ratings_per(league)
        assert isinstance(weights, RatingWeights)
        assert weights.labels == RATING_KEYS
        assert weights.n_samples == 120
        for key, value in weights.as_dict().items():
            assert value == pytest.approx(true_weights[key], abs=1e-8)

    def test_matches_qr_backend(self, league):
        normal = regress_ratings_per(league, backend="normal")
        qr = regress_ratings_per(league, backend="cpu_qr")
        np.testing.assert_allclose(normal.coefficients, qr.coefficients, rtol=1e-8, atol=1e-10)

    def test_scaled_weights(self, league, true_weights):
        scaled = regress_ratings_per(league).scaled()
        assert scaled["hgt"] == pytest.approx(100 * true_weights["hgt"], abs=1e-6)

    def test_report_lines(self, league):
        lines = regress_ratings_per(league).report_lines()
        assert len(lines) == len(RATING_KEYS)
        assert lines[0].startswith("hgt: ")
        assert lines[-1].startswith("reb: ")
        value = float(lines[0].split(": ")[1])
        assert np.isfinite(value)

    def test_intercept(self, league):
        weights = regress_ratings_per(league, add_intercept=True)
        assert weights.labels[0] == "(Intercept)"
        assert weights.as_dict()["(Intercept)"] == pytest.approx(0.0, abs=1e-6)

    def test_solution_exposed(self, league):
        weights = regress_ratings_per(league)
        assert weights.solution.r_squared == pytest.approx(1.0)
        assert weights.solution.backend_name == "cpu_normal"

    def test_collinear_ratings(self):
        players = [
            _player(pid, [(2020, {"ins": v, "dnk": 2 * v}, [{"min": 900, "per": v / 3}])])
            for pid, v in enumerate([30, 45, 60, 75])
        ]
        with pytest.raises(SingularMatrixError):
            regress_ratings_per(players, ratings=["ins", "dnk"])
