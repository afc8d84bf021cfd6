"""Store trigger endpoints. Each delivers one domain event to its handlers."""

from fastapi import APIRouter, Depends, HTTPException
from database.exceptions import DuplicateError, NotFoundError
from api.dependencies import get_dispatcher
from events.dispatcher import EventDispatcher
from events.types import AccountCreated, RoundRecorded
from models import HandicapResult, Profile

router = APIRouter()


@router.post("/account-created", response_model=Profile, status_code=201)
async def account_created(
    event: AccountCreated,
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    try:
        results = await dispatcher.dispatch(event)
    except DuplicateError:
        raise HTTPException(409, f"Profile already exists for {event.user_id}")
    return results[0]


@router.post("/round-recorded", response_model=HandicapResult)
async def round_recorded(
    event: RoundRecorded,
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    try:
        results = await dispatcher.dispatch(event)
    except NotFoundError:
        raise HTTPException(404, "User not found")
    return results[0]
