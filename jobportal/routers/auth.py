import logging

from fastapi import APIRouter, Request, Response

from jobportal.core.config import settings
from jobportal.core.limiter import limiter, token_rate_limit
from jobportal.schemas.auth import IdentityClaim, SessionResponse
from jobportal.services import auth as auth_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])

@router.post("/jwt", response_model=SessionResponse)
@limiter.limit(token_rate_limit)
def issue_session(request: Request, response: Response, claim: IdentityClaim):
    """
    Sign the identity claim and hand it back as an HTTP-only cookie.
    The claim is trusted as sent; the front end's login flow vouches for it.
    """
    token = auth_service.create_session_token(
        {**claim.model_dump(exclude_unset=True), **(claim.model_extra or {})}
    )
    response.set_cookie(
        settings.cookie_name,
        token,
        max_age=int(auth_service.SESSION_TOKEN_LIFETIME.total_seconds()),
        **auth_service.session_cookie_params()
    )
    logger.info(f"Issued session for {claim.email}")
    return {"success": True}

@router.post("/logout", response_model=SessionResponse)
def revoke_session(response: Response):
    response.delete_cookie(settings.cookie_name, **auth_service.session_cookie_params())
    return {"success": True}
