from datetime import date
from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class Round(BaseGolfModel):
    """A recorded round of golf. Read-only input to handicap and leaderboard math."""
    id: Optional[str] = None
    user_id: str
    round_date: Optional[date] = None
    score: Optional[int] = Field(None, ge=1)
    course_rating: Optional[float] = None
    slope_rating: Optional[float] = None
    course_name: Optional[str] = None

    def has_score(self) -> bool:
        return self.score is not None

    def has_ratings(self) -> bool:
        """True when both ratings are usable for a differential (a zero slope is not)."""
        return bool(self.course_rating) and bool(self.slope_rating)
