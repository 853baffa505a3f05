"""
Session credential dependencies.

Verification runs to completion before any guarded route body executes: the
dependency either returns an Identity or raises, and a raised error
short-circuits the request.
"""
import logging
from typing import Optional

from fastapi import Depends, Query
from fastapi.security import APIKeyCookie

from jobportal.core.config import settings
from jobportal.core.exceptions import ForbiddenError, InvalidCredentialError, MissingCredentialError
from jobportal.schemas.auth import Identity
from jobportal.services import auth as auth_service

logger = logging.getLogger(__name__)

session_cookie = APIKeyCookie(name=settings.cookie_name, auto_error=False)


def get_current_identity(token: Optional[str] = Depends(session_cookie)) -> Identity:
    """
    Extracts and validates the caller's identity from the session cookie.
    """
    if not token:
        logger.info("Authentication failed: no session cookie")
        raise MissingCredentialError()

    payload = auth_service.decode_session_token(token)

    email = payload.get("email")
    if not email:
        logger.warning("Authentication failed: session token carries no email")
        raise InvalidCredentialError()

    return Identity(email=email, role=payload.get("role"), claims=payload)


def require_owner_email(
    email: Optional[str] = Query(None),
    identity: Identity = Depends(get_current_identity),
) -> Identity:
    """
    For "my own records" endpoints: the ?email= target must be the caller.
    """
    if identity.email != email:
        logger.warning(f"Ownership check failed: {identity.email} requested records of {email}")
        raise ForbiddenError()
    return identity
