"""
Unit tests for AccountService

Tests cover:
- Searching accounts by name or email
- Looking up public profiles
"""
import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from models.account import Account
from services.account_service import AccountService
from exceptions.domain_exceptions import NotFoundException, BadRequestException


@pytest.mark.unit
class TestSearchUsers:
    """Test cases for search_users method"""

    async def test_search_by_name_case_insensitive(
        self,
        db_session: AsyncSession,
        account_ada: Account,
        account_grace: Account,
        account_linus: Account
    ):
        """Test matching a fragment of the name regardless of case"""
        results = await AccountService.search_users(
            session=db_session,
            search_query="HOPPER",
            current_account_id=account_ada.id
        )

        assert [account.id for account in results] == [account_grace.id]
        assert results[0].name == "Grace Hopper"

    async def test_search_by_email(
        self,
        db_session: AsyncSession,
        account_ada: Account,
        account_grace: Account,
        account_linus: Account
    ):
        """Test matching a fragment of the email"""
        results = await AccountService.search_users(
            session=db_session,
            search_query="example.org",
            current_account_id=account_ada.id
        )

        assert [account.id for account in results] == [account_linus.id]

    async def test_search_excludes_current_account(
        self,
        db_session: AsyncSession,
        account_ada: Account,
        account_grace: Account
    ):
        """Test the searching account never finds itself"""
        results = await AccountService.search_users(
            session=db_session,
            search_query="example.com",
            current_account_id=account_ada.id
        )

        assert account_ada.id not in [account.id for account in results]
        assert account_grace.id in [account.id for account in results]

    async def test_search_excludes_inactive_accounts(
        self,
        db_session: AsyncSession,
        account_ada: Account,
        inactive_account: Account
    ):
        """Test deactivated accounts are not returned"""
        results = await AccountService.search_users(
            session=db_session,
            search_query="gone",
            current_account_id=account_ada.id
        )

        assert results == []

    async def test_search_ordered_by_name_and_limited(
        self,
        db_session: AsyncSession,
        account_ada: Account,
        account_grace: Account,
        account_linus: Account
    ):
        """Test results are sorted by name and bounded by limit"""
        results = await AccountService.search_users(
            session=db_session,
            search_query="@",
            current_account_id=account_linus.id,
            limit=1
        )

        assert [account.name for account in results] == ["Ada Lovelace"]

    async def test_search_wildcards_are_literal(
        self,
        db_session: AsyncSession,
        account_ada: Account,
        account_grace: Account
    ):
        """Test LIKE wildcards in the query don't match everything"""
        results = await AccountService.search_users(
            session=db_session,
            search_query="%",
            current_account_id=account_ada.id
        )

        assert results == []

    async def test_search_blank_query(
        self,
        db_session: AsyncSession,
        account_ada: Account
    ):
        """Test a whitespace-only query is rejected"""
        with pytest.raises(BadRequestException) as exc_info:
            await AccountService.search_users(
                session=db_session,
                search_query="   ",
                current_account_id=account_ada.id
            )

        assert exc_info.value.message == "Search query cannot be empty"

    async def test_search_limit_out_of_range(
        self,
        db_session: AsyncSession,
        account_ada: Account
    ):
        """Test limits outside 1..SEARCH_RESULT_MAX_LIMIT are rejected"""
        with pytest.raises(BadRequestException) as exc_info:
            await AccountService.search_users(
                session=db_session,
                search_query="ada",
                current_account_id=account_ada.id,
                limit=1000
            )

        assert exc_info.value.details["limit"] == 1000


@pytest.mark.unit
class TestGetAccountById:
    """Test cases for get_account_by_id method"""

    async def test_get_account_profile(
        self,
        db_session: AsyncSession,
        account_ada: Account
    ):
        """Test reading a public profile"""
        profile = await AccountService.get_account_by_id(db_session, account_ada.id)

        assert profile.id == account_ada.id
        assert profile.name == "Ada Lovelace"
        assert profile.location == "London"
        assert profile.hobbies == ["chess"]
        assert profile.social_links == {}

    async def test_get_account_not_found(self, db_session: AsyncSession):
        """Test looking up an unknown account"""
        with pytest.raises(NotFoundException) as exc_info:
            await AccountService.get_account_by_id(db_session, 424242)

        assert exc_info.value.details["account_id"] == 424242

    async def test_get_inactive_account(
        self,
        db_session: AsyncSession,
        inactive_account: Account
    ):
        """Test deactivated accounts have no public profile"""
        with pytest.raises(NotFoundException):
            await AccountService.get_account_by_id(db_session, inactive_account.id)
