"""Conversion between asyncpg database rows and Pydantic domain models.

Tables:
- users.profiles    one row per golfer, keyed by the auth user_id (TEXT),
                    stats stored as JSONB
- users.rounds      one row per recorded round
- users.friendships pending/accepted links between two golfers
"""

import json
from typing import Optional

from models import DEFAULT_HANDICAP, Friendship, Profile, Round, StatsSnapshot


def _optional_float(value) -> Optional[float]:
    """NUMERIC columns come back as Decimal; zero is treated as missing."""
    return float(value) if value else None


def _positive_score(value) -> Optional[int]:
    """Zero or negative totals are malformed and treated as missing."""
    return value if value is not None and value > 0 else None


# ================================================================
# Row -> Model (reads)
# ================================================================

def round_from_row(row) -> Round:
    """users.rounds row -> Round model."""
    return Round(
        id=str(row["id"]),
        user_id=row["user_id"],
        round_date=row["round_date"],
        score=_positive_score(row["total_score"]),
        course_rating=_optional_float(row["course_rating"]),
        slope_rating=_optional_float(row["slope_rating"]),
        course_name=row["course_name"],
    )


def stats_from_json(value) -> StatsSnapshot:
    """JSONB stats column -> StatsSnapshot (asyncpg hands JSONB back as text)."""
    if not value:
        return StatsSnapshot()
    if isinstance(value, str):
        value = json.loads(value)
    return StatsSnapshot.model_validate(value)


def profile_from_row(row) -> Profile:
    """users.profiles row -> Profile model."""
    handicap = row["golf_handicap"]
    return Profile(
        user_id=row["user_id"],
        email=row["email"],
        name=row["name"] or "",
        username=row["username"],
        golf_handicap=float(handicap) if handicap is not None else DEFAULT_HANDICAP,
        is_public=row["is_public"],
        stats=stats_from_json(row["stats"]),
        create_date=row["create_date"],
        update_date=row["update_date"],
    )


def friendship_from_row(row) -> Friendship:
    """users.friendships row -> Friendship model."""
    return Friendship(
        id=str(row["id"]),
        user_id_1=row["user_id_1"],
        user_id_2=row["user_id_2"],
        requester=row["requester"],
        status=row["status"],
        create_date=row["create_date"],
    )


# ================================================================
# Model -> Row dict (writes)
# ================================================================

def stats_to_json(stats: StatsSnapshot) -> str:
    return json.dumps(stats.to_document())


def round_to_row(round_: Round) -> dict:
    """Round -> dict for users.rounds INSERT."""
    return {
        "user_id": round_.user_id,
        "round_date": round_.round_date,
        "total_score": round_.score,
        "course_rating": round_.course_rating,
        "slope_rating": round_.slope_rating,
        "course_name": round_.course_name,
    }


def profile_to_row(profile: Profile) -> dict:
    """Profile -> dict for users.profiles INSERT."""
    return {
        "user_id": profile.user_id,
        "email": profile.email,
        "name": profile.name,
        "username": profile.username,
        "golf_handicap": profile.golf_handicap,
        "is_public": profile.is_public,
        "stats": stats_to_json(profile.stats),
    }
