"""
Player rating weights.

Public API:
    regress_ratings_per(players, ...) -> RatingWeights
    collect_samples(players, ...) -> Samples

Example:
    >>> from ratingfit.ratings import regress_ratings_per
    >>> weights = regress_ratings_per(players)
    >>> for line in weights.report_lines():
    ...     print(line)
"""

from ratingfit.ratings.samples import RATING_KEYS, MIN_MINUTES, Samples, collect_samples
from ratingfit.ratings.weights import RatingWeights, regress_ratings_per

__all__ = [
    "RATING_KEYS",
    "MIN_MINUTES",
    "Samples",
    "collect_samples",
    "RatingWeights",
    "regress_ratings_per",
]
