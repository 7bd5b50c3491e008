# app/infrastructure/auth_config.py

from fastapi_users.authentication import (
    AuthenticationBackend,
    BearerTransport,
    CookieTransport,
    JWTStrategy,
)
from config.settings import settings


def get_jwt_strategy() -> JWTStrategy:
    """Both backends issue the same JWTs"""
    return JWTStrategy(
        secret=settings.SECRET_KEY,
        lifetime_seconds=settings.JWT_LIFETIME_SECONDS,
    )


# Browser sessions: httponly cookie set by /auth/cookie/login
cookie_backend = AuthenticationBackend(
    name="jwt-cookie",
    transport=CookieTransport(
        cookie_name=settings.AUTH_COOKIE_NAME,
        cookie_max_age=settings.JWT_LIFETIME_SECONDS,
        cookie_httponly=True,
        cookie_samesite="lax",
    ),
    get_strategy=get_jwt_strategy,
)

# Scripts and API clients: Authorization header from /auth/jwt/login
bearer_backend = AuthenticationBackend(
    name="jwt-bearer",
    transport=BearerTransport(tokenUrl="v1/auth/jwt/login"),
    get_strategy=get_jwt_strategy,
)

auth_backends = [cookie_backend, bearer_backend]
