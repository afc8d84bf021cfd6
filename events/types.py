from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional


class DomainEvent(BaseModel):
    """Something that happened in the store and that handlers react to."""
    occurred_at: Optional[datetime] = None


class AccountCreated(DomainEvent):
    """A new auth account was created."""
    user_id: str = Field(min_length=1)
    email: Optional[str] = None
    display_name: Optional[str] = None


class RoundRecorded(DomainEvent):
    """A round was inserted for a golfer."""
    user_id: str = Field(min_length=1)
    round_id: Optional[str] = None
