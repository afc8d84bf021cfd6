from datetime import date
from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class LeaderboardEntry(BaseGolfModel):
    """One golfer's best round in a period, merged with their profile."""
    user_id: str
    score: int
    course_name: Optional[str] = None
    round_date: Optional[date] = None
    name: Optional[str] = None
    username: Optional[str] = None
    handicap: Optional[float] = None
    position: Optional[int] = Field(None, ge=1)
