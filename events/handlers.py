"""Reactions to store events: profile creation and handicap recalculation."""

import logging
from functools import partial

from analytics.handicap import MAX_RECENT_ROUNDS, compute_handicap
from database.db_manager import DatabaseManager
from events.dispatcher import EventDispatcher
from events.types import AccountCreated, RoundRecorded
from models import HandicapResult, Profile

logger = logging.getLogger(__name__)


async def create_profile(event: AccountCreated, db: DatabaseManager) -> Profile:
    """Create the default profile for a new account: handicap 54.0, empty stats."""
    profile = Profile(
        user_id=event.user_id,
        email=event.email,
        name=event.display_name or "",
        username=Profile.default_username(event.email),
    )
    created = await db.profiles.create_profile(profile)
    logger.info("Created user profile for %s", event.user_id)
    return created


async def recalculate_handicap(event: RoundRecorded, db: DatabaseManager) -> HandicapResult:
    """Recompute handicap and stats from the golfer's recent rounds and save them."""
    rounds = await db.rounds.get_recent_rounds(event.user_id, limit=MAX_RECENT_ROUNDS)
    result = compute_handicap(rounds)
    await db.profiles.update_handicap(event.user_id, result)
    logger.info("Updated handicap for user %s: %s", event.user_id, result.index)
    return result


def build_dispatcher(db: DatabaseManager) -> EventDispatcher:
    dispatcher = EventDispatcher()
    dispatcher.register(AccountCreated, _bind(create_profile, db))
    dispatcher.register(RoundRecorded, _bind(recalculate_handicap, db))
    return dispatcher


def _bind(handler, db: DatabaseManager):
    bound = partial(handler, db=db)
    bound.__name__ = handler.__name__
    return bound
