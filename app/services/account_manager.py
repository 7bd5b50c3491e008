# app/services/account_manager.py

from typing import Optional
from fastapi import Depends, Request
from fastapi_users import BaseUserManager, IntegerIDMixin
from sqlalchemy import select
from models.account import Account
from infrastructure.user_database import get_user_db
from schemas.account_schema import AccountCreate, AccountUpdate
import logging

logger = logging.getLogger(__name__)


class EmailAlreadyExists(Exception):
    """Exception raised when email is already registered"""
    pass


class AccountManager(IntegerIDMixin, BaseUserManager[Account, int]):
    """User manager for registered accounts with custom hooks"""

    async def validate_email_unique(self, email: str, exclude_account_id: Optional[int] = None):
        """
        Validate that email is unique in the database

        Args:
            email: The email to check
            exclude_account_id: Optional account ID to exclude from the check (for updates)

        Raises:
            EmailAlreadyExists: If email is already registered.
        """
        query = select(Account).where(Account.email == email)
        if exclude_account_id is not None:
            query = query.where(Account.id != exclude_account_id)

        result = await self.user_db.session.execute(query)
        existing = result.scalar_one_or_none()

        if existing is not None:
            raise EmailAlreadyExists(f"Email '{email}' is already registered")

    async def on_after_register(self, user: Account, request: Optional[Request] = None):
        """Hook called after account registration"""
        logger.info("Account %s (%s) has registered", user.id, user.email)

    async def on_after_login(
        self,
        user: Account,
        request: Optional[Request] = None,
        response=None
    ):
        """Hook called after successful login"""
        logger.info("Account %s has logged in", user.id)

    async def on_after_update(self, user: Account, update_dict: dict, request: Optional[Request] = None):
        """Hook called after a profile update"""
        logger.info("Account %s updated fields: %s", user.id, sorted(update_dict))

    async def create(self, user_create: AccountCreate, safe: bool = False, request: Optional[Request] = None) -> Account:
        """Override create to validate email uniqueness before creating the account"""
        await self.validate_email_unique(user_create.email)
        return await super().create(user_create, safe=safe, request=request)

    async def update(
        self,
        user_update: AccountUpdate,
        user: Account,
        safe: bool = False,
        request: Optional[Request] = None,
    ) -> Account:
        """Override update to validate email uniqueness when it is being changed"""
        if user_update.email is not None and user_update.email != user.email:
            await self.validate_email_unique(user_update.email, exclude_account_id=user.id)

        return await super().update(user_update, user, safe=safe, request=request)


async def get_user_manager(user_db=Depends(get_user_db)):
    """Dependency to get the account manager"""
    yield AccountManager(user_db)
