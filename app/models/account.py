# app/models/account.py

from datetime import datetime, UTC
from sqlalchemy import String, Integer, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from fastapi_users_db_sqlalchemy import SQLAlchemyBaseUserTable
from infrastructure.postgres_connection import Base


def utcnow() -> datetime:
    return datetime.now(UTC)


class Account(Base, SQLAlchemyBaseUserTable[int]):
    """Registered account with profile metadata, integrated with fastapi-users"""
    __tablename__ = "accounts"

    # Explicitly define the id as primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Profile metadata
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    position: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    education: Mapped[str | None] = mapped_column(String(500), nullable=True)
    expertise: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    hobbies: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    adjectives: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    social_links: Mapped[dict[str, str]] = mapped_column(JSON, nullable=False, default=dict)
    profile_picture_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    # fastapi-users provides these fields automatically:
    # - email: str (unique, indexed)
    # - hashed_password: str
    # - is_active: bool (default True)
    # - is_superuser: bool (default False)
    # - is_verified: bool (default False)

    def __repr__(self):
        return f"<Account(id={self.id}, name='{self.name}', email='{self.email}', is_active={self.is_active})>"
