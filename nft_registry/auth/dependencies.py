"""
Authentication dependencies for FastAPI.
Resolves the identifier of the caller for update endpoints.
"""

from typing import Annotated

from fastapi import Depends, Header, Request

from nft_registry.config import get_settings
from nft_registry.core.exceptions import UnauthorizedException
from nft_registry.auth.jwt import extract_caller, validate_token

settings = get_settings()


async def get_caller(
    request: Request,
    authorization: str | None = Header(default=None),
    x_caller_id: str | None = Header(default=None),
) -> str:
    """
    Dependency to get the authenticated caller identifier.

    In development mode (DEV_MODE=true), the caller is taken from the
    X-Caller-Id header, defaulting to DEV_CALLER_ID.
    In production, validates the JWT from the Authorization header.

    Raises:
        UnauthorizedException: If authentication fails
    """
    if settings.DEV_MODE:
        caller = x_caller_id or settings.DEV_CALLER_ID
        request.state.caller = caller
        return caller

    if not authorization:
        raise UnauthorizedException("Authorization header required")

    # Extract token from "Bearer <token>" format
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise UnauthorizedException("Invalid authorization header format")

    payload = await validate_token(parts[1])
    caller = extract_caller(payload)

    request.state.caller = caller
    return caller


Caller = Annotated[str, Depends(get_caller)]
