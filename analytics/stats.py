from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, Sequence

from models.round import Round


def present_scores(rounds: Iterable[Round]) -> List[int]:
    """Scores of every round that has one, in input order."""
    return [round_obj.score for round_obj in rounds if round_obj.has_score()]


def mean(values: Sequence[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


def round_half_up(value: float, places: int = 1) -> float:
    """Round to a fixed number of decimals with halves going up (80.25 -> 80.3)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def calendar_date(moment: date) -> date:
    """Drop the time of day from a datetime; plain dates pass through."""
    if isinstance(moment, datetime):
        return moment.date()
    return moment


def days_before(moment: date, days: int) -> date:
    return calendar_date(moment) - timedelta(days=days)


def first_of_month(moment: date) -> date:
    return calendar_date(moment).replace(day=1)


def first_of_year(moment: date) -> date:
    return calendar_date(moment).replace(month=1, day=1)
