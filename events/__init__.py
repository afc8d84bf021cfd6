from .dispatcher import EventDispatcher
from .handlers import build_dispatcher, create_profile, recalculate_handicap
from .types import AccountCreated, DomainEvent, RoundRecorded

__all__ = [
    "AccountCreated",
    "DomainEvent",
    "EventDispatcher",
    "RoundRecorded",
    "build_dispatcher",
    "create_profile",
    "recalculate_handicap",
]
