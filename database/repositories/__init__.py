from .friendship_repo import FriendshipRepositoryDB
from .profile_repo import ProfileRepositoryDB
from .round_repo import RoundRepositoryDB

__all__ = ["FriendshipRepositoryDB", "ProfileRepositoryDB", "RoundRepositoryDB"]
