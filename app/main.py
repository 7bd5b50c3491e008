# app/main.py

from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI
from api.routes import auth, friendship
from api.exception_handlers import register_exception_handlers
from infrastructure.postgres_connection import postgres_connection
from config.settings import settings
import logging

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events"""
    await postgres_connection.connect()
    logger.info("%s started", settings.APP_NAME)

    yield

    await postgres_connection.disconnect()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

register_exception_handlers(app)


@app.get("/health")
async def health_check():
    """Health check endpoint for Docker and monitoring"""
    return {"status": "healthy"}


# Can't use "*" with allow_credentials=True
app.add_middleware(
    middleware_class=CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,  # Required for the auth cookie
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.auth_router, prefix="/v1")
app.include_router(auth.users_router, prefix="/v1")
app.include_router(friendship.friendship_router, prefix="/v1")
