"""Leaderboard API endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from database.db_manager import DatabaseManager
from api.dependencies import get_db
from analytics.leaderboard import (
    DEFAULT_LEADERBOARD_LIMIT,
    LeaderboardPeriod,
    aggregate,
    period_start,
)
from models import LeaderboardEntry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[LeaderboardEntry])
async def get_leaderboard(
    period: str = Query(LeaderboardPeriod.MONTH.value),
    limit: int = Query(DEFAULT_LEADERBOARD_LIMIT, ge=1, le=500),
    db: DatabaseManager = Depends(get_db),
):
    """Best round per golfer since the start of the period, lowest score first.

    Unknown periods are treated as "month".
    """
    start = period_start(period)
    try:
        rounds = await db.rounds.get_rounds_since(start)
        return await aggregate(rounds, db.profiles.get_profile, limit)
    except Exception:
        logger.exception("Error generating leaderboard (period=%s, limit=%d)", period, limit)
        raise HTTPException(500, "Failed to generate leaderboard")
