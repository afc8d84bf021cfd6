from datetime import date
from pydantic import Field
from typing import Optional

from .base import BaseGolfModel

DEFAULT_HANDICAP = 54.0
MAX_HANDICAP = 54.0
MIN_HANDICAP = 0.0


class StatsSnapshot(BaseGolfModel):
    """Summary statistics written onto a golfer's profile."""
    total_rounds: int = Field(0, ge=0)
    best_score: Optional[int] = None
    average_score: Optional[float] = None
    last_played_date: Optional[date] = None


class HandicapResult(BaseGolfModel):
    """Handicap index plus the stats snapshot it was computed alongside."""
    index: float = Field(DEFAULT_HANDICAP, ge=MIN_HANDICAP, le=MAX_HANDICAP)
    stats: StatsSnapshot = Field(default_factory=StatsSnapshot)
