"""Reads and inserts for users.rounds."""

import asyncpg
from datetime import date
from typing import List, Optional
from uuid import UUID

from models import Round
from database.converters import round_from_row, round_to_row
from database.exceptions import IntegrityError
from analytics.handicap import MAX_RECENT_ROUNDS


class RoundRepositoryDB:
    """Async access to recorded rounds."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Read
    # ================================================================

    async def get_round(self, round_id: str) -> Optional[Round]:
        """Round by id, or None when the id is unknown or not a UUID."""
        try:
            key = UUID(round_id)
        except ValueError:
            return None
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM users.rounds WHERE id = $1", key
            )
            return round_from_row(row) if row else None

    async def get_recent_rounds(
        self, user_id: str, *, limit: int = MAX_RECENT_ROUNDS
    ) -> List[Round]:
        """A golfer's most recent rounds, newest first."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT * FROM users.rounds
                   WHERE user_id = $1
                   ORDER BY round_date DESC NULLS LAST
                   LIMIT $2""",
                user_id, limit,
            )
            return [round_from_row(r) for r in rows]

    async def get_rounds_since(self, start: date) -> List[Round]:
        """Every golfer's rounds played on or after start, newest first."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT * FROM users.rounds
                   WHERE round_date >= $1
                   ORDER BY round_date DESC""",
                start,
            )
            return [round_from_row(r) for r in rows]

    # ================================================================
    # Create
    # ================================================================

    async def create_round(self, round_: Round) -> Round:
        """Insert a round. Returns it with the DB-generated id."""
        data = round_to_row(round_)
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    """INSERT INTO users.rounds
                       (user_id, round_date, total_score, course_rating,
                        slope_rating, course_name)
                       VALUES ($1, $2, $3, $4, $5, $6)
                       RETURNING *""",
                    data["user_id"], data["round_date"], data["total_score"],
                    data["course_rating"], data["slope_rating"], data["course_name"],
                )
                return round_from_row(row)
        except asyncpg.ForeignKeyViolationError as e:
            raise IntegrityError(f"No profile for user {round_.user_id}: {e}") from e
