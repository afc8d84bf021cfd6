"""Reads and inserts for users.friendships."""

import asyncpg
from typing import Optional

from models import Friendship, FriendshipStatus
from database.converters import friendship_from_row
from database.exceptions import DuplicateError


class FriendshipRepositoryDB:
    """Async access to friendships between golfers."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def find_between(self, user_a: str, user_b: str) -> Optional[Friendship]:
        """Existing friendship between two golfers, in either direction."""
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                """SELECT * FROM users.friendships
                   WHERE (user_id_1 = $1 AND user_id_2 = $2)
                      OR (user_id_1 = $2 AND user_id_2 = $1)
                   LIMIT 1""",
                user_a, user_b,
            )
            return friendship_from_row(row) if row else None

    async def create_request(self, requester_id: str, recipient_id: str) -> Friendship:
        """Insert a pending friendship initiated by requester_id."""
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    """INSERT INTO users.friendships
                       (user_id_1, user_id_2, requester, status, create_date)
                       VALUES ($1, $2, $1, $3, NOW())
                       RETURNING *""",
                    requester_id, recipient_id, FriendshipStatus.PENDING.value,
                )
                return friendship_from_row(row)
        except asyncpg.UniqueViolationError as e:
            raise DuplicateError(f"Friendship already exists: {e}") from e
