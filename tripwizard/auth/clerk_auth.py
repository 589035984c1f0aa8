# tripwizard/auth/clerk_auth.py

import logging
from typing import Optional

from clerk_backend_api import authenticate_request
from clerk_backend_api.security.types import AuthenticateRequestOptions
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from tripwizard.core.config import settings
from tripwizard.core.errors import AuthenticationError, ErrorCode, USER_MESSAGES

logger = logging.getLogger(__name__)

# This tells FastAPI to look for an "Authorization: Bearer <token>" header.
# The tokenUrl is never called; FastAPI requires it for the OpenAPI schema.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token", auto_error=False)


class _BearerRequest:
    """Adapts a raw Bearer token to the request shape the Clerk SDK reads."""

    def __init__(self, token: str):
        self.headers = {"Authorization": f"Bearer {token}"}


def verify_token(token: str) -> str:
    """
    Verify a Clerk session token and return the user id ('sub' claim).
    Raises AuthenticationError when the token is rejected.
    """
    if not settings.CLERK_SECRET_KEY:
        raise AuthenticationError("CLERK_SECRET_KEY not configured")

    try:
        request_state = authenticate_request(
            _BearerRequest(token),
            AuthenticateRequestOptions(secret_key=settings.CLERK_SECRET_KEY),
        )
    except Exception as e:
        raise AuthenticationError(f"Token verification failed: {e}") from e

    if not request_state.is_signed_in or request_state.payload is None:
        raise AuthenticationError(f"Token verification failed: {request_state.message or 'unknown'}")

    user_id = request_state.payload.get("sub")
    if not user_id:
        raise AuthenticationError("Token verified, but 'sub' (user ID) claim is missing")
    return str(user_id)


async def get_current_user_id(token: Optional[str] = Depends(oauth2_scheme)) -> str:
    """
    Dependency returning the authenticated user's id.
    Raises HTTPException 401 if the token is invalid, expired, or missing.
    """
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": ErrorCode.AUTH_FAILED.value, "message": USER_MESSAGES[ErrorCode.AUTH_FAILED]},
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return verify_token(token)
    except AuthenticationError as e:
        logger.info("Rejected bearer token: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": e.code.value, "message": e.user_message},
            headers={"WWW-Authenticate": "Bearer"},
        )
