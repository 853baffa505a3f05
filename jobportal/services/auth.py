"""
Session credential issuing and verification.

Credentials are HS256 JWTs signed with settings.secret_key and carried in an
HTTP-only cookie. The claim is whatever identity the front end asserts after
its own login flow; it is signed verbatim.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError

from jobportal.core.config import settings
from jobportal.core.exceptions import InvalidCredentialError

logger = logging.getLogger(__name__)

SESSION_TOKEN_LIFETIME = timedelta(hours=settings.token_expire_hours)


def create_session_token(claim: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    to_encode = dict(claim)
    now = datetime.now(timezone.utc)
    to_encode.update({
        "iat": now,
        "exp": now + (expires_delta if expires_delta is not None else SESSION_TOKEN_LIFETIME),
    })
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_session_token(token: str) -> Dict[str, Any]:
    """Verify signature and expiry. Raises InvalidCredentialError, never returns None."""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError:
        logger.info("Session token expired")
        raise InvalidCredentialError("TOKEN_EXPIRED")
    except JWTError as e:
        logger.warning(f"Session token rejected: {e}")
        raise InvalidCredentialError()


def session_cookie_params() -> Dict[str, Any]:
    """
    Cookie attributes shared by issue and revoke.
    Browsers only delete a cookie when the clearing Set-Cookie repeats them.
    """
    return {
        "httponly": True,
        "secure": settings.is_production,
        "samesite": "none" if settings.is_production else "strict",
    }
