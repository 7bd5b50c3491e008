# app/models/__init__.py

from models.account import Account
from models.friendship import Friendship, FriendshipStatus

__all__ = ["Account", "Friendship", "FriendshipStatus"]
