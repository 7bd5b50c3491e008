# app/schemas/friendship_schema.py

from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional
from models.friendship import FriendshipStatus


class FriendshipCreate(BaseModel):
    """Schema naming the other account of a friendship operation"""
    account_id: int


class FriendshipResponse(BaseModel):
    """Schema for a single directed friendship edge"""
    id_friendship: int
    requester_id: int
    target_id: int
    status: FriendshipStatus
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FriendshipStatusResponse(BaseModel):
    """
    Edge from the current account to another account, if any.

    Only the current -> other direction is reported; a received request
    shows up as status None here and in the incoming requests list.
    """
    account_id: int
    status: Optional[FriendshipStatus] = None
    requester_id: Optional[int] = None
    target_id: Optional[int] = None
    created_at: Optional[datetime] = None
