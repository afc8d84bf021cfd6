from fastapi import Request

from database.db_manager import DatabaseManager
from events.dispatcher import EventDispatcher


def get_db(request: Request) -> DatabaseManager:
    """FastAPI dependency that provides the DatabaseManager."""
    return request.app.state.db_manager


def get_dispatcher(request: Request) -> EventDispatcher:
    """FastAPI dependency that provides the domain event dispatcher."""
    return request.app.state.dispatcher
