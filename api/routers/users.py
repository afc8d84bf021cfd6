"""Profile API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from database.db_manager import DatabaseManager
from database.exceptions import NotFoundError
from api.dependencies import get_db, get_dispatcher
from events.dispatcher import EventDispatcher
from events.types import RoundRecorded
from models import HandicapResult, Profile

router = APIRouter()


@router.get("/{user_id}", response_model=Profile)
async def get_profile(user_id: str, db: DatabaseManager = Depends(get_db)):
    profile = await db.profiles.get_profile(user_id)
    if not profile:
        raise HTTPException(404, "User not found")
    return profile


@router.post("/{user_id}/handicap/recalculate", response_model=HandicapResult)
async def recalculate_handicap(
    user_id: str,
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    """Recompute handicap and stats on demand, as if a round had just been recorded."""
    try:
        results = await dispatcher.dispatch(RoundRecorded(user_id=user_id))
    except NotFoundError:
        raise HTTPException(404, "User not found")
    return results[0]
