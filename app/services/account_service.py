# app/services/account_service.py

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_
from models.account import Account
from schemas.account_schema import AccountPublic, AccountProfile
from infrastructure.postgres_connection import store_operation
from exceptions.domain_exceptions import NotFoundException, BadRequestException
from config.settings import settings


class AccountService:
    """Read-only lookups over registered accounts"""

    @staticmethod
    async def search_users(
        session: AsyncSession,
        search_query: str,
        current_account_id: int,
        limit: Optional[int] = None
    ) -> List[AccountPublic]:
        """
        Search for accounts by name or email

        Args:
            session: Database session
            search_query: Case-insensitive substring of the name or email
            current_account_id: ID of the searching account (excluded from results)
            limit: Maximum number of results, defaults to SEARCH_RESULT_LIMIT

        Returns:
            Matching active accounts ordered by name

        Raises:
            BadRequestException: If the search query is blank or the limit is out of range
        """
        term = search_query.strip()
        if not term:
            raise BadRequestException(message="Search query cannot be empty")

        if limit is None:
            limit = settings.SEARCH_RESULT_LIMIT
        if not 1 <= limit <= settings.SEARCH_RESULT_MAX_LIMIT:
            raise BadRequestException(
                message="Invalid search limit",
                details={"limit": limit, "maximum": settings.SEARCH_RESULT_MAX_LIMIT}
            )

        query = (
            select(Account)
            .where(
                or_(
                    Account.name.icontains(term, autoescape=True),
                    Account.email.icontains(term, autoescape=True),
                ),
                Account.id != current_account_id,  # Exclude current account
                Account.is_active == True,
            )
            .order_by(Account.name, Account.id)
            .limit(limit)
        )

        async with store_operation(session, "search_users"):
            result = await session.execute(query)
            accounts = result.scalars().all()

        return [AccountPublic.model_validate(account) for account in accounts]

    @staticmethod
    async def get_account_by_id(session: AsyncSession, account_id: int) -> AccountProfile:
        """Public profile of an active account"""
        async with store_operation(session, "get_account_by_id"):
            result = await session.execute(
                select(Account).where(Account.id == account_id, Account.is_active == True)
            )
            account = result.scalar_one_or_none()

        if account is None:
            raise NotFoundException(
                message="User not found",
                details={"account_id": account_id}
            )
        return AccountProfile.model_validate(account)

