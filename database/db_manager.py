"""Single entry point to the repositories, built once per app on the shared pool."""

import asyncpg

from database.repositories import (
    FriendshipRepositoryDB,
    ProfileRepositoryDB,
    RoundRepositoryDB,
)


class DatabaseManager:
    """Groups the repositories that share one asyncpg pool."""

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool
        self.profiles = ProfileRepositoryDB(pool)
        self.rounds = RoundRepositoryDB(pool)
        self.friendships = FriendshipRepositoryDB(pool)
