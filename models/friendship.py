from datetime import datetime
from enum import Enum
from typing import Optional

from .base import BaseGolfModel


class FriendshipStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"


class Friendship(BaseGolfModel):
    """A link between two golfers, created pending by the requester."""
    id: Optional[str] = None
    user_id_1: str
    user_id_2: str
    requester: str
    status: FriendshipStatus = FriendshipStatus.PENDING
    create_date: Optional[datetime] = None
