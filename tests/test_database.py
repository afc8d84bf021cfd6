import json
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import uuid4

import asyncpg
import pytest

from database.converters import (
    friendship_from_row,
    profile_from_row,
    profile_to_row,
    round_from_row,
    round_to_row,
    stats_from_json,
    stats_to_json,
)
from database.db_manager import DatabaseManager
from database.exceptions import DuplicateError, IntegrityError, NotFoundError
from database.repositories import (
    FriendshipRepositoryDB,
    ProfileRepositoryDB,
    RoundRepositoryDB,
)
from models import FriendshipStatus, HandicapResult, Profile, Round, StatsSnapshot

CREATED = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


# ================================================================
# Row helpers
# ================================================================

def _round_row(*, total_score=82, course_rating=Decimal("71.2"), slope_rating=Decimal("125"),
               round_date=date(2026, 10, 4), user_id="u1"):
    """Helper: minimal users.rounds row dict."""
    return {
        "id": uuid4(),
        "user_id": user_id,
        "round_date": round_date,
        "total_score": total_score,
        "course_rating": course_rating,
        "slope_rating": slope_rating,
        "course_name": "Pebble Creek",
        "created_at": CREATED,
    }


def _profile_row(*, stats=None, golf_handicap=Decimal("54.0")):
    """Helper: minimal users.profiles row dict."""
    return {
        "user_id": "u1",
        "email": "sam@example.com",
        "name": "Sam",
        "username": "sam",
        "golf_handicap": golf_handicap,
        "is_public": True,
        "stats": stats,
        "create_date": CREATED,
        "update_date": CREATED,
    }


def _friendship_row(requester="a", recipient="b"):
    return {
        "id": uuid4(),
        "user_id_1": requester,
        "user_id_2": recipient,
        "requester": requester,
        "status": "pending",
        "create_date": CREATED,
    }


# ================================================================
# converters.py
# ================================================================

def test_round_converter_maps_numeric_columns():
    row = _round_row()
    r = round_from_row(row)

    assert r.id == str(row["id"])
    assert r.score == 82
    assert r.course_rating == 71.2
    assert r.slope_rating == 125.0
    assert r.round_date == date(2026, 10, 4)


def test_round_converter_null_and_zero_ratings_are_missing():
    r = round_from_row(_round_row(course_rating=None, slope_rating=Decimal("0")))
    assert r.course_rating is None
    assert r.slope_rating is None
    assert not r.has_ratings()


def test_round_converter_null_score():
    assert round_from_row(_round_row(total_score=None)).score is None


@pytest.mark.parametrize("total_score", [0, -3])
def test_round_converter_out_of_range_score_is_missing(total_score):
    r = round_from_row(_round_row(total_score=total_score))
    assert r.score is None
    assert not r.has_score()


def test_round_to_row():
    r = Round(user_id="u1", round_date=date(2026, 10, 4), score=80,
              course_rating=70.1, slope_rating=121, course_name="Oak Hills")
    assert round_to_row(r) == {
        "user_id": "u1",
        "round_date": date(2026, 10, 4),
        "total_score": 80,
        "course_rating": 70.1,
        "slope_rating": 121,
        "course_name": "Oak Hills",
    }


def test_stats_json_roundtrip_through_text():
    stats = StatsSnapshot(total_rounds=2, best_score=80, average_score=80.5,
                          last_played_date=date(2026, 10, 4))
    assert stats_from_json(stats_to_json(stats)) == stats


def test_stats_from_json_handles_null_and_dict():
    assert stats_from_json(None) == StatsSnapshot()
    assert stats_from_json({"total_rounds": 1, "best_score": 90}).best_score == 90


def test_profile_converter():
    stats = json.dumps({"total_rounds": 5, "best_score": 78, "average_score": 82.4,
                        "last_played_date": "2026-10-04"})
    p = profile_from_row(_profile_row(stats=stats, golf_handicap=Decimal("12.48")))

    assert p.user_id == "u1"
    assert p.golf_handicap == pytest.approx(12.48)
    assert p.stats.total_rounds == 5
    assert p.stats.last_played_date == date(2026, 10, 4)


def test_profile_converter_zero_handicap_is_kept():
    p = profile_from_row(_profile_row(golf_handicap=Decimal("0")))
    assert p.golf_handicap == 0.0


def test_profile_to_row_serializes_stats():
    row = profile_to_row(Profile(user_id="u1", email="sam@example.com", username="sam"))
    assert row["golf_handicap"] == 54.0
    assert json.loads(row["stats"]) == {
        "total_rounds": 0, "best_score": None,
        "average_score": None, "last_played_date": None,
    }


def test_friendship_converter():
    f = friendship_from_row(_friendship_row())
    assert f.status == FriendshipStatus.PENDING
    assert f.requester == "a"


# ================================================================
# RoundRepositoryDB
# ================================================================

@pytest.mark.asyncio
async def test_round_repo_recent_rounds_newest_first_with_limit(mock_pool):
    pool, conn = mock_pool
    repo = RoundRepositoryDB(pool)
    conn.fetch.return_value = [
        _round_row(round_date=date(2026, 10, 4)),
        _round_row(round_date=date(2026, 9, 28)),
    ]

    rounds = await repo.get_recent_rounds("u1")

    assert [r.round_date for r in rounds] == [date(2026, 10, 4), date(2026, 9, 28)]
    query, user_id, limit = conn.fetch.call_args.args
    assert "ORDER BY round_date DESC" in query
    assert (user_id, limit) == ("u1", 20)


@pytest.mark.asyncio
async def test_round_repo_rounds_since(mock_pool):
    pool, conn = mock_pool
    repo = RoundRepositoryDB(pool)
    conn.fetch.return_value = [_round_row(user_id="a"), _round_row(user_id="b")]

    rounds = await repo.get_rounds_since(date(2026, 10, 1))

    assert [r.user_id for r in rounds] == ["a", "b"]
    query, start = conn.fetch.call_args.args
    assert "round_date >= $1" in query
    assert start == date(2026, 10, 1)


@pytest.mark.asyncio
async def test_round_repo_get_round_not_found(mock_pool):
    pool, conn = mock_pool
    conn.fetchrow.return_value = None
    assert await RoundRepositoryDB(pool).get_round(str(uuid4())) is None


@pytest.mark.asyncio
async def test_round_repo_get_round_malformed_id(mock_pool):
    pool, conn = mock_pool
    assert await RoundRepositoryDB(pool).get_round("not-a-uuid") is None
    conn.fetchrow.assert_not_awaited()


@pytest.mark.asyncio
async def test_round_repo_create_round(mock_pool):
    pool, conn = mock_pool
    row = _round_row()
    conn.fetchrow.return_value = row

    saved = await RoundRepositoryDB(pool).create_round(
        Round(user_id="u1", round_date=date(2026, 10, 4), score=82)
    )
    assert saved.id == str(row["id"])


@pytest.mark.asyncio
async def test_round_repo_create_round_unknown_user(mock_pool):
    pool, conn = mock_pool
    conn.fetchrow.side_effect = asyncpg.ForeignKeyViolationError("no profile")

    with pytest.raises(IntegrityError):
        await RoundRepositoryDB(pool).create_round(Round(user_id="nobody", score=90))


# ================================================================
# ProfileRepositoryDB
# ================================================================

@pytest.mark.asyncio
async def test_profile_repo_get_profile(mock_pool):
    pool, conn = mock_pool
    conn.fetchrow.return_value = _profile_row()
    p = await ProfileRepositoryDB(pool).get_profile("u1")
    assert p.username == "sam"


@pytest.mark.asyncio
async def test_profile_repo_get_profile_missing(mock_pool):
    pool, conn = mock_pool
    conn.fetchrow.return_value = None
    assert await ProfileRepositoryDB(pool).get_profile("u1") is None


@pytest.mark.asyncio
async def test_profile_repo_create_duplicate(mock_pool):
    pool, conn = mock_pool
    conn.fetchrow.side_effect = asyncpg.UniqueViolationError("duplicate key")

    with pytest.raises(DuplicateError):
        await ProfileRepositoryDB(pool).create_profile(Profile(user_id="u1"))


@pytest.mark.asyncio
async def test_profile_repo_update_handicap(mock_pool):
    pool, conn = mock_pool
    conn.execute.return_value = "UPDATE 1"
    result = HandicapResult(index=2.88, stats=StatsSnapshot(total_rounds=8, best_score=72))

    await ProfileRepositoryDB(pool).update_handicap("u1", result)

    query, user_id, index, stats = conn.execute.call_args.args
    assert "update_date = NOW()" in query
    assert (user_id, index) == ("u1", 2.88)
    assert json.loads(stats)["best_score"] == 72


@pytest.mark.asyncio
async def test_profile_repo_update_handicap_missing_profile(mock_pool):
    pool, conn = mock_pool
    conn.execute.return_value = "UPDATE 0"

    with pytest.raises(NotFoundError):
        await ProfileRepositoryDB(pool).update_handicap("ghost", HandicapResult())


# ================================================================
# FriendshipRepositoryDB
# ================================================================

@pytest.mark.asyncio
async def test_friendship_repo_find_between_checks_both_directions(mock_pool):
    pool, conn = mock_pool
    conn.fetchrow.return_value = _friendship_row(requester="b", recipient="a")

    f = await FriendshipRepositoryDB(pool).find_between("a", "b")

    assert f.requester == "b"
    query = conn.fetchrow.call_args.args[0]
    assert "user_id_1 = $2 AND user_id_2 = $1" in query


@pytest.mark.asyncio
async def test_friendship_repo_create_request(mock_pool):
    pool, conn = mock_pool
    conn.fetchrow.return_value = _friendship_row()

    f = await FriendshipRepositoryDB(pool).create_request("a", "b")

    assert f.status == FriendshipStatus.PENDING
    assert conn.fetchrow.call_args.args[1:] == ("a", "b", "pending")


def test_database_manager_wires_repositories(mock_pool):
    pool, _ = mock_pool
    manager = DatabaseManager(pool)
    assert isinstance(manager.profiles, ProfileRepositoryDB)
    assert isinstance(manager.rounds, RoundRepositoryDB)
    assert isinstance(manager.friendships, FriendshipRepositoryDB)
