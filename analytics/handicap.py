"""Handicap index and summary statistics for a single golfer.

Every function here is pure: the caller fetches the golfer's most recent
rounds (most recent first, at most MAX_RECENT_ROUNDS) and persists the result.
Rounds missing a field are left out of whichever calculation needs it.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from models.round import Round
from models.stats import (
    DEFAULT_HANDICAP,
    MAX_HANDICAP,
    MIN_HANDICAP,
    HandicapResult,
    StatsSnapshot,
)

from .stats import clamp, mean, present_scores, round_half_up

MAX_RECENT_ROUNDS = 20
MIN_ROUNDS_FOR_INDEX = 5
STANDARD_SLOPE = 113
HANDICAP_ADJUSTMENT = 0.96

# (minimum rounds supplied, number of lowest differentials averaged)
DIFFERENTIALS_TABLE = [
    (20, 8),
    (15, 6),
    (10, 4),
    (8, 3),
    (6, 2),
]


def differential(round_obj: Round) -> Optional[float]:
    """Score differential for one round, or None if score or ratings are missing."""
    if not round_obj.has_score() or not round_obj.has_ratings():
        return None
    return (
        (round_obj.score - round_obj.course_rating)
        * STANDARD_SLOPE
        / round_obj.slope_rating
    )


def sorted_differentials(rounds: Sequence[Round]) -> List[float]:
    """All defined differentials, best (lowest) first."""
    values = [differential(r) for r in rounds]
    return sorted(v for v in values if v is not None)


def differentials_to_use(total_rounds: int) -> int:
    """How many of the lowest differentials count toward the index."""
    for min_rounds, count in DIFFERENTIALS_TABLE:
        if total_rounds >= min_rounds:
            return count
    return 1


def compute_handicap_index(rounds: Sequence[Round]) -> float:
    """
    Handicap index in [0, 54] from a golfer's recent rounds.

    - fewer than MIN_ROUNDS_FOR_INDEX rounds: DEFAULT_HANDICAP
    - no round with score and both ratings: DEFAULT_HANDICAP
    - otherwise: mean of the k lowest differentials * 0.96, where k comes
      from the number of rounds supplied (not the number of differentials)
    """
    if len(rounds) < MIN_ROUNDS_FOR_INDEX:
        return DEFAULT_HANDICAP

    differentials = sorted_differentials(rounds)
    if not differentials:
        return DEFAULT_HANDICAP

    k = differentials_to_use(len(rounds))
    lowest = differentials[:k]
    return clamp(mean(lowest) * HANDICAP_ADJUSTMENT, MIN_HANDICAP, MAX_HANDICAP)


def compute_stats(rounds: Sequence[Round]) -> StatsSnapshot:
    """
    Summary stats for a golfer. Assumes rounds are ordered most recent first;
    last_played_date is taken from rounds[0] without re-sorting.
    """
    scores = present_scores(rounds)
    if not scores:
        return StatsSnapshot()

    return StatsSnapshot(
        total_rounds=len(rounds),
        best_score=min(scores),
        average_score=round_half_up(mean(scores), 1),
        last_played_date=rounds[0].round_date,
    )


def compute_handicap(rounds: Sequence[Round]) -> HandicapResult:
    return HandicapResult(
        index=compute_handicap_index(rounds),
        stats=compute_stats(rounds),
    )
