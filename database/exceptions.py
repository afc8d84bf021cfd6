class DatabaseError(Exception):
    """Base for all database errors."""


class NotFoundError(DatabaseError):
    """Entity not found."""


class DuplicateError(DatabaseError):
    """Unique constraint violation, or an equivalent row already exists."""


class IntegrityError(DatabaseError):
    """Foreign key or check constraint violation."""


class InvalidRequestError(Exception):
    """A request that can never succeed, such as befriending yourself."""
