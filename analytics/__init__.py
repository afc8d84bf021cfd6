from .handicap import (
    compute_handicap,
    compute_handicap_index,
    compute_stats,
    differential,
    differentials_to_use,
)
from .leaderboard import (
    LeaderboardPeriod,
    aggregate,
    best_rounds,
    period_start,
    rank_entries,
)

__all__ = [
    "compute_handicap",
    "compute_handicap_index",
    "compute_stats",
    "differential",
    "differentials_to_use",
    "LeaderboardPeriod",
    "aggregate",
    "best_rounds",
    "period_start",
    "rank_entries",
]
