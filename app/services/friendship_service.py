# app/services/friendship_service.py

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select, delete, or_, and_
from models.account import Account
from models.friendship import Friendship, FriendshipStatus
from schemas.account_schema import AccountPublic
from infrastructure.postgres_connection import store_operation
from exceptions.domain_exceptions import (
    NotFoundException,
    ConflictException,
    UnauthorizedException
)
import logging

logger = logging.getLogger(__name__)


def _between(account_a: int, account_b: int):
    """Condition matching edges between two accounts in either direction"""
    return or_(
        and_(Friendship.requester_id == account_a, Friendship.target_id == account_b),
        and_(Friendship.requester_id == account_b, Friendship.target_id == account_a),
    )


class FriendshipService:
    """
    Service managing directed friendship edges.

    Pending requests are a single requester -> target edge. Accepting one
    promotes it and adds the reciprocal edge so that friends of an account
    can be read from its outgoing accepted edges alone. Every multi-statement
    write is committed as one transaction.
    """

    @staticmethod
    def _require_actor(actor_id: Optional[int]) -> int:
        if actor_id is None:
            raise UnauthorizedException()
        return actor_id

    @staticmethod
    async def _get_edge(
        session: AsyncSession,
        requester_id: int,
        target_id: int,
        status: Optional[FriendshipStatus] = None
    ) -> Optional[Friendship]:
        query = select(Friendship).where(
            Friendship.requester_id == requester_id,
            Friendship.target_id == target_id
        )
        if status is not None:
            query = query.where(Friendship.status == status)
        result = await session.execute(query)
        return result.scalar_one_or_none()

    @staticmethod
    async def send_friend_request(
        session: AsyncSession,
        actor_id: Optional[int],
        target_id: int
    ) -> Friendship:
        """
        Send a friend request from the acting account to target

        Args:
            session: Database session
            actor_id: ID of the account sending the request
            target_id: ID of the account receiving the request

        Returns:
            Created pending edge

        Raises:
            UnauthorizedException: If there is no acting account
            BadRequestException: If actor and target are the same account
            NotFoundException: If target doesn't exist or is inactive
            ConflictException: If any edge already exists between the pair
            StoreUnavailableException: If the data store call fails
        """
        actor_id = FriendshipService._require_actor(actor_id)
        new_edge = Friendship.request(actor_id, target_id)

        async with store_operation(session, "send_friend_request"):
            result = await session.execute(
                select(Account.id).where(Account.id == target_id, Account.is_active == True)
            )
            if result.scalar_one_or_none() is None:
                raise NotFoundException(
                    message="User not found",
                    details={"account_id": target_id}
                )

            # Any edge in either direction blocks a new request
            result = await session.execute(
                select(Friendship).where(_between(actor_id, target_id))
            )
            existing = result.scalars().first()
            if existing is not None:
                if existing.is_accepted:
                    message = "Users are already friends"
                elif existing.is_pending:
                    message = "Friend request already pending"
                else:
                    message = "Friendship already exists"
                raise ConflictException(
                    message=message,
                    details={
                        "friendship_id": existing.id_friendship,
                        "requester_id": existing.requester_id,
                        "target_id": existing.target_id,
                        "status": existing.status.value,
                    }
                )

            session.add(new_edge)
            try:
                await session.commit()
            except IntegrityError as e:
                # A concurrent request for the same pair won the insert
                await session.rollback()
                raise ConflictException(
                    message="Friend request already exists",
                    details={"requester_id": actor_id, "target_id": target_id}
                ) from e
            await session.refresh(new_edge)

        logger.info("Friend request sent: %s -> %s", actor_id, target_id)
        return new_edge

    @staticmethod
    async def accept_friend_request(
        session: AsyncSession,
        actor_id: Optional[int],
        requester_id: int
    ) -> Friendship:
        """
        Accept a pending friend request sent to the acting account

        Promotes the requester -> actor edge to accepted and writes the
        reciprocal actor -> requester edge in the same transaction.

        Returns:
            The promoted requester -> actor edge

        Raises:
            UnauthorizedException: If there is no acting account
            NotFoundException: If no pending request from requester exists
            ConflictException: If the actor -> requester edge is blocked;
                neither edge is modified
            StoreUnavailableException: If the data store call fails
        """
        actor_id = FriendshipService._require_actor(actor_id)

        async with store_operation(session, "accept_friend_request"):
            edge = await FriendshipService._get_edge(
                session, requester_id, actor_id, FriendshipStatus.PENDING
            )
            if edge is None:
                raise NotFoundException(
                    message="Friend request not found",
                    details={"requester_id": requester_id, "target_id": actor_id}
                )

            # Nothing is written until the reverse edge is known to be usable
            reverse = await FriendshipService._get_edge(session, actor_id, requester_id)
            if reverse is not None and not (reverse.is_pending or reverse.is_accepted):
                raise ConflictException(
                    message="Friendship is blocked",
                    details={"friendship_id": reverse.id_friendship, "status": reverse.status.value}
                )

            edge.accept()
            if reverse is None:
                session.add(Friendship.reciprocal_of(edge))
            elif reverse.is_pending:
                # Both sides requested each other concurrently
                reverse.accept()

            await session.commit()
            await session.refresh(edge)

        logger.info("Friend request accepted: %s -> %s", requester_id, actor_id)
        return edge

    @staticmethod
    async def reject_friend_request(
        session: AsyncSession,
        actor_id: Optional[int],
        requester_id: int
    ) -> None:
        """
        Reject a pending friend request sent to the acting account

        Raises:
            UnauthorizedException: If there is no acting account
            NotFoundException: If no pending request from requester exists
            StoreUnavailableException: If the data store call fails
        """
        actor_id = FriendshipService._require_actor(actor_id)

        async with store_operation(session, "reject_friend_request"):
            edge = await FriendshipService._get_edge(
                session, requester_id, actor_id, FriendshipStatus.PENDING
            )
            if edge is None:
                raise NotFoundException(
                    message="Friend request not found",
                    details={"requester_id": requester_id, "target_id": actor_id}
                )

            await session.delete(edge)
            await session.commit()

        logger.info("Friend request rejected: %s -> %s", requester_id, actor_id)

    @staticmethod
    async def remove_friend(
        session: AsyncSession,
        actor_id: Optional[int],
        other_id: int
    ) -> int:
        """
        Remove every edge between the acting account and other

        Deletes both accepted edges of a friendship, or a leftover pending
        edge in either direction. Removing a relationship that doesn't
        exist is a successful no-op.

        Returns:
            Number of edges deleted
        """
        actor_id = FriendshipService._require_actor(actor_id)

        async with store_operation(session, "remove_friend"):
            result = await session.execute(
                delete(Friendship).where(_between(actor_id, other_id))
            )
            await session.commit()

        removed = result.rowcount or 0
        if removed:
            logger.info("Friendship removed: %s <-> %s (%d edges)", actor_id, other_id, removed)
        return removed

    @staticmethod
    async def _list_accounts(session: AsyncSession, query, operation: str) -> List[AccountPublic]:
        query = query.order_by(Friendship.created_at.desc(), Friendship.id_friendship.desc())
        async with store_operation(session, operation):
            result = await session.execute(query)
            accounts = result.scalars().all()
        return [AccountPublic.model_validate(account) for account in accounts]

    @staticmethod
    async def get_friends(session: AsyncSession, actor_id: Optional[int]) -> List[AccountPublic]:
        """Accounts the acting account is friends with, newest friendship first"""
        actor_id = FriendshipService._require_actor(actor_id)
        query = (
            select(Account)
            .join(Friendship, Friendship.target_id == Account.id)
            .where(
                Friendship.requester_id == actor_id,
                Friendship.status == FriendshipStatus.ACCEPTED
            )
        )
        return await FriendshipService._list_accounts(session, query, "get_friends")

    @staticmethod
    async def get_pending_requests(session: AsyncSession, actor_id: Optional[int]) -> List[AccountPublic]:
        """Accounts the acting account sent a still-pending request to"""
        actor_id = FriendshipService._require_actor(actor_id)
        query = (
            select(Account)
            .join(Friendship, Friendship.target_id == Account.id)
            .where(
                Friendship.requester_id == actor_id,
                Friendship.status == FriendshipStatus.PENDING
            )
        )
        return await FriendshipService._list_accounts(session, query, "get_pending_requests")

    @staticmethod
    async def get_incoming_requests(session: AsyncSession, actor_id: Optional[int]) -> List[AccountPublic]:
        """Accounts that sent the acting account a still-pending request"""
        actor_id = FriendshipService._require_actor(actor_id)
        query = (
            select(Account)
            .join(Friendship, Friendship.requester_id == Account.id)
            .where(
                Friendship.target_id == actor_id,
                Friendship.status == FriendshipStatus.PENDING
            )
        )
        return await FriendshipService._list_accounts(session, query, "get_incoming_requests")

    @staticmethod
    async def get_friendship_status(
        session: AsyncSession,
        actor_id: Optional[int],
        other_id: int
    ) -> Optional[Friendship]:
        """
        Edge from the acting account to other, whatever its status

        Only the actor -> other direction is inspected. Callers telling a
        sent request apart from a received one must also look at the
        reverse direction (or the incoming requests list).
        """
        actor_id = FriendshipService._require_actor(actor_id)
        async with store_operation(session, "get_friendship_status"):
            return await FriendshipService._get_edge(session, actor_id, other_id)
