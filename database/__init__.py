from database.connection import DatabasePool, db
from database.db_manager import DatabaseManager
from database.repositories import (
    FriendshipRepositoryDB,
    ProfileRepositoryDB,
    RoundRepositoryDB,
)
from database.exceptions import (
    DatabaseError,
    DuplicateError,
    IntegrityError,
    InvalidRequestError,
    NotFoundError,
)

__all__ = [
    "DatabasePool",
    "db",
    "DatabaseManager",
    "FriendshipRepositoryDB",
    "ProfileRepositoryDB",
    "RoundRepositoryDB",
    "DatabaseError",
    "DuplicateError",
    "IntegrityError",
    "InvalidRequestError",
    "NotFoundError",
]
