"""Friend request API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from database.db_manager import DatabaseManager
from database.exceptions import DuplicateError, InvalidRequestError
from api.dependencies import get_db
from api.schemas import FriendRequest, FriendRequestResponse
from models import Friendship

logger = logging.getLogger(__name__)

router = APIRouter()


async def send_friend_request(
    db: DatabaseManager, requester_id: str, recipient_id: str
) -> Friendship:
    """Create a pending friendship.

    Raises InvalidRequestError for a self-request and DuplicateError when the
    two golfers are already linked in either direction.
    """
    if requester_id == recipient_id:
        raise InvalidRequestError("Cannot send friend request to yourself")
    if await db.friendships.find_between(requester_id, recipient_id):
        raise DuplicateError("Friendship already exists")
    return await db.friendships.create_request(requester_id, recipient_id)


@router.post("/requests", response_model=FriendRequestResponse, status_code=201)
async def create_friend_request(req: FriendRequest, db: DatabaseManager = Depends(get_db)):
    try:
        friendship = await send_friend_request(db, req.requester_id, req.recipient_id)
    except InvalidRequestError as e:
        raise HTTPException(400, str(e))
    except DuplicateError:
        raise HTTPException(409, "Friendship already exists")
    except Exception:
        logger.exception("Error sending friend request")
        raise HTTPException(500, "Failed to send friend request")
    return FriendRequestResponse(
        success=True, message="Friend request sent", friendship_id=friendship.id
    )
