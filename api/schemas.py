"""API-specific request and response models."""

from datetime import date
from pydantic import BaseModel, Field
from typing import Optional

from models import HandicapResult, Round


class RecordRoundRequest(BaseModel):
    """A round submitted by a golfer. Ratings are optional."""
    user_id: str = Field(min_length=1)
    round_date: date
    score: int = Field(ge=1, le=200)
    course_rating: Optional[float] = Field(None, gt=0, le=90)
    slope_rating: Optional[float] = Field(None, ge=55, le=155)
    course_name: Optional[str] = None


class FriendRequest(BaseModel):
    requester_id: str = Field(min_length=1)
    recipient_id: str = Field(min_length=1)


class FriendRequestResponse(BaseModel):
    success: bool
    message: str
    friendship_id: Optional[str] = None


class RecordRoundResponse(BaseModel):
    round: Round
    handicap: HandicapResult
