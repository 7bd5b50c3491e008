# app/api/routes/friendship.py

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from models.account import Account
from schemas.account_schema import AccountPublic
from schemas.friendship_schema import (
    FriendshipCreate,
    FriendshipResponse,
    FriendshipStatusResponse
)
from services.friendship_service import FriendshipService
from services.account_service import AccountService
from infrastructure.postgres_connection import get_db_session
from api.routes.auth import current_active_user
from config.settings import settings


friendship_router = APIRouter(prefix="/friends", tags=["Friendships"])


@friendship_router.get("/search", response_model=list[AccountPublic])
async def search_users(
    q: str = Query(..., min_length=1, description="Name or email fragment"),
    limit: Optional[int] = Query(None, ge=1, le=settings.SEARCH_RESULT_MAX_LIMIT, description="Maximum number of results"),
    current_user: Account = Depends(current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Search for accounts to befriend.

    - **q**: Case-insensitive fragment of the name or email
    - **limit**: Maximum number of results (default 20, max 100)

    The current account is never part of the results.
    """
    return await AccountService.search_users(
        session=session,
        search_query=q,
        current_account_id=current_user.id,
        limit=limit
    )


@friendship_router.post("/request", response_model=FriendshipResponse, status_code=status.HTTP_201_CREATED)
async def send_friend_request(
    friendship_data: FriendshipCreate,
    current_user: Account = Depends(current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Send a friend request to another account.

    Fails with 409 if any relationship already exists between the two
    accounts, in either direction.
    """
    return await FriendshipService.send_friend_request(
        session=session,
        actor_id=current_user.id,
        target_id=friendship_data.account_id
    )


@friendship_router.post("/accept", response_model=FriendshipResponse)
async def accept_friend_request(
    friendship_data: FriendshipCreate,
    current_user: Account = Depends(current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Accept a pending friend request.

    - **account_id**: Account that sent the request

    Only the recipient of the request can accept it.
    """
    return await FriendshipService.accept_friend_request(
        session=session,
        actor_id=current_user.id,
        requester_id=friendship_data.account_id
    )


@friendship_router.post("/reject", status_code=status.HTTP_204_NO_CONTENT)
async def reject_friend_request(
    friendship_data: FriendshipCreate,
    current_user: Account = Depends(current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Reject a pending friend request.

    - **account_id**: Account that sent the request
    """
    await FriendshipService.reject_friend_request(
        session=session,
        actor_id=current_user.id,
        requester_id=friendship_data.account_id
    )
    return None


@friendship_router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_friend(
    account_id: int,
    current_user: Account = Depends(current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Remove a friend (both directions) or withdraw a pending request.

    Succeeds even if there is nothing to remove.
    """
    await FriendshipService.remove_friend(
        session=session,
        actor_id=current_user.id,
        other_id=account_id
    )
    return None


@friendship_router.get("/", response_model=list[AccountPublic])
async def get_friends(
    current_user: Account = Depends(current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Friends of the current account, most recent first"""
    return await FriendshipService.get_friends(session=session, actor_id=current_user.id)


@friendship_router.get("/requests/outgoing", response_model=list[AccountPublic])
async def get_pending_requests(
    current_user: Account = Depends(current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Accounts the current account sent a request to that are still pending"""
    return await FriendshipService.get_pending_requests(session=session, actor_id=current_user.id)


@friendship_router.get("/requests/incoming", response_model=list[AccountPublic])
async def get_incoming_requests(
    current_user: Account = Depends(current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Accounts waiting for the current account to accept or reject their request"""
    return await FriendshipService.get_incoming_requests(session=session, actor_id=current_user.id)


@friendship_router.get("/status/{account_id}", response_model=FriendshipStatusResponse)
async def get_friendship_status(
    account_id: int,
    current_user: Account = Depends(current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Relationship from the current account to another account.

    Only the outgoing edge is reported. A request received from that
    account is listed under /friends/requests/incoming instead.
    """
    edge = await FriendshipService.get_friendship_status(
        session=session,
        actor_id=current_user.id,
        other_id=account_id
    )
    if edge is None:
        return FriendshipStatusResponse(account_id=account_id)

    return FriendshipStatusResponse(
        account_id=account_id,
        status=edge.status,
        requester_id=edge.requester_id,
        target_id=edge.target_id,
        created_at=edge.created_at
    )
