"""
FastAPI dependencies exposing the application context to route handlers.
"""
from fastapi import Depends, Header, Query, Request
from app.context import AppContext
from app.exceptions import AuthError
from app.services.upload_service import ImageUploadHandler
from typing import Optional


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_upload_handler(context: AppContext = Depends(get_context)) -> ImageUploadHandler:
    return context.uploads


def require_admin(
    x_admin_token: Optional[str] = Header(None, description="Admin secret"),
    token: Optional[str] = Query(None, description="Admin secret (the header takes precedence)"),
    context: AppContext = Depends(get_context),
) -> None:
    """
    Dependency guarding admin routes.

    Raises AuthError before the route handler runs when the token is
    missing or wrong.
    """
    if not context.admin_gate.allows(x_admin_token or token):
        raise AuthError()
