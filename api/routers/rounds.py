"""Round API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from database.db_manager import DatabaseManager
from database.exceptions import IntegrityError
from api.dependencies import get_db, get_dispatcher
from api.schemas import RecordRoundRequest, RecordRoundResponse
from events.dispatcher import EventDispatcher
from events.types import RoundRecorded
from models import Round

router = APIRouter()


@router.post("", response_model=RecordRoundResponse, status_code=201)
async def record_round(
    req: RecordRoundRequest,
    db: DatabaseManager = Depends(get_db),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    """Save a round, then recalculate the golfer's handicap from it."""
    try:
        saved = await db.rounds.create_round(Round(**req.model_dump()))
    except IntegrityError:
        raise HTTPException(404, "User not found")

    try:
        results = await dispatcher.dispatch(
            RoundRecorded(user_id=saved.user_id, round_id=saved.id)
        )
    except Exception:
        raise HTTPException(500, "Round saved but handicap update failed")
    return RecordRoundResponse(round=saved, handicap=results[0])


@router.get("/{round_id}", response_model=Round)
async def get_round(round_id: str, db: DatabaseManager = Depends(get_db)):
    round_ = await db.rounds.get_round(round_id)
    if not round_:
        raise HTTPException(404, "Round not found")
    return round_
