from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_pool():
    pool = MagicMock()
    conn = AsyncMock()
    pool.acquire.return_value.__aenter__.return_value = conn
    return pool, conn


@pytest.fixture
def mock_db():
    """DatabaseManager stand-in with async repository methods."""
    db = MagicMock()
    db.profiles = AsyncMock()
    db.rounds = AsyncMock()
    db.friendships = AsyncMock()
    return db
