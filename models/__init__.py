from .base import BaseGolfModel
from .friendship import Friendship, FriendshipStatus
from .leaderboard import LeaderboardEntry
from .profile import Profile
from .round import Round
from .stats import DEFAULT_HANDICAP, HandicapResult, StatsSnapshot

__all__ = [
    "BaseGolfModel",
    "DEFAULT_HANDICAP",
    "Friendship",
    "FriendshipStatus",
    "HandicapResult",
    "LeaderboardEntry",
    "Profile",
    "Round",
    "StatsSnapshot",
]
