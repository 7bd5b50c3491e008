# app/api/exception_handlers.py

from typing import TYPE_CHECKING
from fastapi import Request, status
from fastapi.responses import JSONResponse
from exceptions.domain_exceptions import DomainException
from services.account_manager import EmailAlreadyExists

if TYPE_CHECKING:
    from fastapi import FastAPI


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """
    Global exception handler for domain exceptions in FastAPI

    Returns a consistent JSON response format for all domain exceptions
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.__class__.__name__,
            "message": exc.message,
            "details": exc.details,
            "path": request.url.path
        }
    )


async def email_already_exists_handler(request: Request, exc: EmailAlreadyExists) -> JSONResponse:
    """Handle email already exists exception raised during registration or profile update"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"field": "email", "message": str(exc)}}
    )


def register_exception_handlers(app: "FastAPI") -> None:
    """
    Register exception handlers with FastAPI app

    Subclasses of DomainException are dispatched to the base handler.
    """
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(EmailAlreadyExists, email_already_exists_handler)
