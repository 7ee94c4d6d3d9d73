"""
Rating weights: how much each rating is worth in PER.

Regresses a season stat on player ratings and hands back the fitted
weights for a reporting layer to display. Nothing here prints.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from ratingfit.regression import fit, LinearSolution
from ratingfit.regression.solvers import BackendChoice
from ratingfit.ratings.samples import RATING_KEYS, MIN_MINUTES, collect_samples

# Ratings run 0-100, so per-point weights are reported per 100 points
REPORT_SCALE = 100.0


@dataclass(frozen=True, eq=False)
class RatingWeights:
    """
    Fitted rating weights.

    Attributes:
        labels: Predictor names in column order ('(Intercept)' first if fitted)
        coefficients: Per-point weight of each predictor
        n_samples: Number of player-seasons in the fit
        solution: The full regression solution, for diagnostics
    """
    labels: tuple[str, ...]
    coefficients: NDArray[np.floating[Any]]
    n_samples: int
    solution: LinearSolution = field(repr=False)

    def as_dict(self) -> dict[str, float]:
        return {label: float(c) for label, c in zip(self.labels, self.coefficients)}

    def scaled(self, factor: float = REPORT_SCALE) -> dict[str, float]:
        """Weights multiplied by `factor`, keyed by label."""
        return {label: float(c) * factor for label, c in zip(self.labels, self.coefficients)}

    def report_lines(self, factor: float = REPORT_SCALE) -> list[str]:
        """One 'label: weight' line per predictor, scaled by `factor`."""
        return [f"{label}: {value}" for label, value in self.scaled(factor).items()]


def regress_ratings_per(
    players: Iterable[Mapping[str, Any]],
    *,
    ratings: Sequence[str] = RATING_KEYS,
    stat: str = "per",
    min_minutes: float = MIN_MINUTES,
    add_intercept: bool = False,
    backend: BackendChoice = 'auto',
) -> RatingWeights:
    """
    Fit `stat` against player ratings over every qualifying season.

    Args:
        players: Player records (see ratingfit.ratings.samples)
        ratings: Rating keys to regress on
        stat: Response stat key
        min_minutes: Seasons must exceed this many regular-season minutes
        add_intercept: Fit a constant term as well
        backend: Regression backend (see ratingfit.regression.fit)

    Returns:
        RatingWeights with one weight per rating

    Raises:
        ValidationError: If no season qualifies or records are incomplete
        SingularMatrixError: If the ratings are perfectly collinear
    """
    samples = collect_samples(
        players, ratings=ratings, stat=stat, min_minutes=min_minutes,
    )
    solution = fit(
        samples.ratings,
        samples.response,
        labels=samples.labels,
        add_intercept=add_intercept,
        backend=backend,
    )
    return RatingWeights(
        labels=solution.labels,
        coefficients=solution.coefficients,
        n_samples=samples.n,
        solution=solution,
    )
