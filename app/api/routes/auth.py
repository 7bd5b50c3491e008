# app/api/routes/auth.py

from fastapi import APIRouter, Depends, Request, Response
from fastapi_users import FastAPIUsers
from sqlalchemy.ext.asyncio import AsyncSession
from models.account import Account
from schemas.account_schema import AccountRead, AccountCreate, AccountUpdate, AccountProfile
from services.account_manager import get_user_manager, AccountManager
from services.account_service import AccountService
from infrastructure.auth_config import auth_backends, cookie_backend, bearer_backend
from infrastructure.postgres_connection import get_db_session
from config.settings import settings


fastapi_users = FastAPIUsers[Account, int](
    get_user_manager=get_user_manager,
    auth_backends=auth_backends,
)

auth_router = APIRouter(prefix="/auth", tags=["Authentication"])
users_router = APIRouter(prefix="/users", tags=["Users"])

# Login / logout for browser sessions and for API clients
auth_router.include_router(fastapi_users.get_auth_router(cookie_backend), prefix="/cookie")
auth_router.include_router(fastapi_users.get_auth_router(bearer_backend), prefix="/jwt")


@auth_router.post("/register", response_model=AccountRead, status_code=201)
async def register(
    request: Request,
    account_create: AccountCreate,
    account_manager: AccountManager = Depends(get_user_manager),
):
    """Register a new account"""
    return await account_manager.create(account_create, safe=True, request=request)


# Dependency to get current active account
current_active_user = fastapi_users.current_user(active=True)


@users_router.get("/{account_id}/profile", response_model=AccountProfile)
async def get_profile(
    account_id: int,
    current_user: Account = Depends(current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Public profile of another account.

    Used by the profile page and to render friend lists and search results.
    """
    return await AccountService.get_account_by_id(session, account_id)


@users_router.delete("/me", status_code=204)
async def delete_current_user(
    response: Response,
    user: Account = Depends(current_active_user),
    account_manager: AccountManager = Depends(get_user_manager),
):
    """
    Permanently delete the current account and log out.

    Friendship edges touching the account are removed by the database
    (ON DELETE CASCADE).
    """
    await account_manager.delete(user)
    response.delete_cookie(key=settings.AUTH_COOKIE_NAME, httponly=True, samesite="lax")
    return None

# /users/me (GET, PATCH) and superuser /users/{id}
# Note: included AFTER the custom routes above to avoid conflicts
users_router.include_router(fastapi_users.get_users_router(AccountRead, AccountUpdate))
