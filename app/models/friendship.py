# app/models/friendship.py

import enum
from datetime import datetime
from sqlalchemy import Integer, DateTime, ForeignKey, Enum, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from infrastructure.postgres_connection import Base
from exceptions.domain_exceptions import BadRequestException
from models.account import Account, utcnow


class FriendshipStatus(str, enum.Enum):
    """Status of a directed friendship edge"""
    PENDING = "pending"
    ACCEPTED = "accepted"
    BLOCKED = "blocked"


class Friendship(Base):
    """
    Directed friendship edge from requester to target.

    A pending request is a single requester -> target edge. A mutual
    friendship is two accepted edges, one in each direction.
    """
    __tablename__ = "friends"
    __table_args__ = (
        UniqueConstraint("requester_id", "target_id", name="uq_friends_requester_target"),
        CheckConstraint("requester_id <> target_id", name="ck_friends_no_self"),
    )

    id_friendship: Mapped[int] = mapped_column(Integer, primary_key=True, index=True, autoincrement=True)
    requester_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    target_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status: Mapped[FriendshipStatus] = mapped_column(
        Enum(
            FriendshipStatus,
            name="friendship_status",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=FriendshipStatus.PENDING,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    requester: Mapped[Account] = relationship(Account, foreign_keys=[requester_id])
    target: Mapped[Account] = relationship(Account, foreign_keys=[target_id])

    @classmethod
    def request(cls, requester_id: int, target_id: int) -> "Friendship":
        """Build a new pending edge"""
        if requester_id == target_id:
            raise BadRequestException(
                message="Cannot send friend request to yourself",
                details={"account_id": requester_id}
            )
        return cls(requester_id=requester_id, target_id=target_id, status=FriendshipStatus.PENDING)

    @classmethod
    def reciprocal_of(cls, edge: "Friendship") -> "Friendship":
        """Build the accepted mirror edge of an accepted edge"""
        if edge.status != FriendshipStatus.ACCEPTED:
            raise BadRequestException(
                message="Only accepted friendships have a reciprocal edge",
                details={"friendship_id": edge.id_friendship, "current_status": edge.status.value}
            )
        return cls(requester_id=edge.target_id, target_id=edge.requester_id, status=FriendshipStatus.ACCEPTED)

    def accept(self) -> None:
        """Promote a pending edge to accepted"""
        if self.status != FriendshipStatus.PENDING:
            raise BadRequestException(
                message="Friend request is not pending",
                details={"friendship_id": self.id_friendship, "current_status": self.status.value}
            )
        self.status = FriendshipStatus.ACCEPTED

    @property
    def is_pending(self) -> bool:
        return self.status == FriendshipStatus.PENDING

    @property
    def is_accepted(self) -> bool:
        return self.status == FriendshipStatus.ACCEPTED

    def __repr__(self):
        return (
            f"<Friendship(id_friendship={self.id_friendship}, requester={self.requester_id}, "
            f"target={self.target_id}, status='{self.status.value}')>"
        )
