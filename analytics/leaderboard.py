"""Period leaderboards: each golfer's best round in a window, ranked by score."""

from __future__ import annotations

import asyncio
from datetime import date, datetime
from enum import Enum
from typing import Awaitable, Callable, Dict, Iterable, List, Optional, Sequence, Union

from models.leaderboard import LeaderboardEntry
from models.profile import Profile
from models.round import Round

from .stats import days_before, first_of_month, first_of_year, utc_now

DEFAULT_LEADERBOARD_LIMIT = 50

ProfileFetcher = Callable[[str], Awaitable[Optional[Profile]]]


class LeaderboardPeriod(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


def period_start(
    period: Union[LeaderboardPeriod, str, None],
    now: Optional[datetime] = None,
) -> date:
    """
    First calendar date included in a leaderboard period.

    - week: 7 days before now
    - month: first day of now's month
    - year: January 1 of now's year

    Anything unrecognized falls back to month.
    """
    now = now or utc_now()
    if period == LeaderboardPeriod.WEEK:
        return days_before(now, 7)
    if period == LeaderboardPeriod.YEAR:
        return first_of_year(now)
    return first_of_month(now)


def best_rounds(rounds: Iterable[Round]) -> Dict[str, Round]:
    """
    Lowest-scoring round per user, in first-seen user order.

    Rounds without a score are skipped. On an exact tie the round seen first
    is kept.
    """
    best: Dict[str, Round] = {}
    for round_obj in rounds:
        if not round_obj.has_score():
            continue
        current = best.get(round_obj.user_id)
        if current is None or round_obj.score < current.score:
            best[round_obj.user_id] = round_obj
    return best


def build_entries(
    best: Dict[str, Round],
    profiles: Dict[str, Optional[Profile]],
) -> List[LeaderboardEntry]:
    """Merge best rounds with profiles; users without a profile are dropped."""
    entries: List[LeaderboardEntry] = []
    for user_id, round_obj in best.items():
        profile = profiles.get(user_id)
        if profile is None:
            continue
        entries.append(
            LeaderboardEntry(
                user_id=user_id,
                score=round_obj.score,
                course_name=round_obj.course_name,
                round_date=round_obj.round_date,
                name=profile.name,
                username=profile.username,
                handicap=profile.golf_handicap,
            )
        )
    return entries


def rank_entries(
    entries: Sequence[LeaderboardEntry],
    limit: int = DEFAULT_LEADERBOARD_LIMIT,
) -> List[LeaderboardEntry]:
    """
    Sort by score ascending and number positions 1..n.

    The sort is stable, so tied scores keep their input order and still get
    distinct consecutive positions. Truncation happens after numbering.
    """
    ranked = sorted(entries, key=lambda entry: entry.score)
    for index, entry in enumerate(ranked):
        entry.position = index + 1
    return ranked[:limit]


async def aggregate(
    rounds: Iterable[Round],
    fetch_profile: ProfileFetcher,
    limit: int = DEFAULT_LEADERBOARD_LIMIT,
) -> List[LeaderboardEntry]:
    """
    Build a ranked leaderboard from rounds already filtered to the period.

    Profile lookups run concurrently. If any lookup raises, the exception
    propagates and no leaderboard is returned.
    """
    best = best_rounds(rounds)
    user_ids = list(best)
    fetched = await asyncio.gather(*(fetch_profile(user_id) for user_id in user_ids))
    profiles = dict(zip(user_ids, fetched))
    return rank_entries(build_entries(best, profiles), limit)
