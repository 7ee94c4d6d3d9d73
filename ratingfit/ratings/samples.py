"""
Player-season samples for rating regressions.

Turns player records into one regression row per qualifying
player-season: the season's ratings as predictors, a season stat
(PER by default) as the response.

Player records are plain mappings as the data layer hands them out:

    {
        'pid': 17,
        'ratings': [{'season': 2024, 'hgt': 45, 'stre': 60, ...}, ...],
        'stats': [{'season': 2024, 'playoffs': False, 'min': 1830, 'per': 17.2}, ...],
    }
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from ratingfit.core.exceptions import ValidationError

RATING_KEYS: tuple[str, ...] = (
    "hgt",
    "stre",
    "spd",
    "jmp",
    "endu",
    "ins",
    "dnk",
    "ft",
    "fg",
    "tp",
    "oiq",
    "diq",
    "drb",
    "pss",
    "reb",
)

# Seasons at or below this many regular-season minutes are too noisy to use
MIN_MINUTES = 500


@dataclass(frozen=True)
class Samples:
    """
    Design rows and responses assembled from player records.

    Attributes:
        ratings: (n x k) rating values, columns in `labels` order
        response: (n,) stat values, row-aligned with `ratings`
        labels: Rating names
        keys: (pid, season) of each row
    """
    ratings: NDArray[np.floating[Any]]
    response: NDArray[np.floating[Any]]
    labels: tuple[str, ...]
    keys: tuple[tuple[Any, Any], ...]

    @property
    def n(self) -> int:
        return self.response.shape[0]


def collect_samples(
    players: Iterable[Mapping[str, Any]],
    *,
    ratings: Sequence[str] = RATING_KEYS,
    stat: str = "per",
    min_minutes: float = MIN_MINUTES,
) -> Samples:
    """
    Pair each rating season with its regular-season stats.

    A ratings row and a stats row match when their seasons are equal and
    the stats row is not a playoff row. Matches with `min` strictly above
    `min_minutes` become samples. A season split across several stats
    rows yields one sample per qualifying row.

    Args:
        players: Player records with 'ratings' and 'stats' lists
        ratings: Rating keys to use as predictors, in column order
        stat: Stats key to use as the response
        min_minutes: Minutes threshold a season must exceed

    Returns:
        Samples in player, then rating-season order

    Raises:
        ValidationError: If a matched row lacks a required key, or no
            season qualifies
    """
    labels = tuple(ratings)
    if not labels:
        raise ValidationError("ratings: at least one rating key is required")

    rows: list[list[float]] = []
    response: list[float] = []
    keys: list[tuple[Any, Any]] = []

    for player in players:
        pid = player.get('pid')
        for pr in player.get('ratings', ()):
            season = _require(pr, 'season', pid)
            for ps in player.get('stats', ()):
                if _require(ps, 'season', pid) != season or ps.get('playoffs', False):
                    continue
                if _require(ps, 'min', pid) <= min_minutes:
                    continue
                response.append(float(_require(ps, stat, pid)))
                rows.append([float(_require(pr, key, pid)) for key in labels])
                keys.append((pid, season))

    if not rows:
        raise ValidationError(
            f"no player-season has more than {min_minutes} minutes with a matching ratings row"
        )

    return Samples(
        ratings=np.array(rows, dtype=np.float64),
        response=np.array(response, dtype=np.float64),
        labels=labels,
        keys=tuple(keys),
    )


def _require(row: Mapping[str, Any], key: str, pid: Any) -> Any:
    try:
        return row[key]
    except KeyError:
        raise ValidationError(
            f"player {pid!r}, season {row.get('season')!r}: missing {key!r}"
        ) from None
