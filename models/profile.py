from datetime import datetime
from pydantic import Field
from typing import Optional

from .base import BaseGolfModel
from .stats import DEFAULT_HANDICAP, MAX_HANDICAP, MIN_HANDICAP, StatsSnapshot


class Profile(BaseGolfModel):
    """A golfer's public profile: identity, current handicap and stats."""
    user_id: str
    email: Optional[str] = None
    name: str = ""
    username: Optional[str] = None
    golf_handicap: float = Field(DEFAULT_HANDICAP, ge=MIN_HANDICAP, le=MAX_HANDICAP)
    is_public: bool = True
    stats: StatsSnapshot = Field(default_factory=StatsSnapshot)
    create_date: Optional[datetime] = None
    update_date: Optional[datetime] = None

    @staticmethod
    def default_username(email: Optional[str]) -> Optional[str]:
        """Username derived from the local part of an email address."""
        if not email:
            return None
        return email.split("@")[0]
