"""CRUD operations for the users.profiles table."""

import asyncpg
from typing import Optional

from models import HandicapResult, Profile
from database.converters import profile_from_row, profile_to_row, stats_to_json
from database.exceptions import DuplicateError, NotFoundError


class ProfileRepositoryDB:
    """Async CRUD for golfer profiles."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Read
    # ================================================================

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM users.profiles WHERE user_id = $1", user_id
            )
            return profile_from_row(row) if row else None

    # ================================================================
    # Create
    # ================================================================

    async def create_profile(self, profile: Profile) -> Profile:
        """Insert a profile with server-side create/update timestamps."""
        data = profile_to_row(profile)
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    """INSERT INTO users.profiles
                       (user_id, email, name, username, golf_handicap, is_public,
                        stats, create_date, update_date)
                       VALUES ($1, $2, $3, $4, $5, $6, $7::jsonb, NOW(), NOW())
                       RETURNING *""",
                    data["user_id"], data["email"], data["name"], data["username"],
                    data["golf_handicap"], data["is_public"], data["stats"],
                )
                return profile_from_row(row)
        except asyncpg.UniqueViolationError as e:
            raise DuplicateError(f"Profile already exists for {profile.user_id}: {e}") from e

    # ================================================================
    # Update
    # ================================================================

    async def update_handicap(self, user_id: str, result: HandicapResult) -> None:
        """Overwrite handicap and stats snapshot, and set update_date to NOW()."""
        async with self._pool.acquire() as conn:
            status = await conn.execute(
                """UPDATE users.profiles
                   SET golf_handicap = $2, stats = $3::jsonb, update_date = NOW()
                   WHERE user_id = $1""",
                user_id, result.index, stats_to_json(result.stats),
            )
            if status == "UPDATE 0":
                raise NotFoundError(f"Profile {user_id} not found")
