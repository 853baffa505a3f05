from slowapi import Limiter
from slowapi.util import get_remote_address

from jobportal.core.config import settings

limiter = Limiter(key_func=get_remote_address)

def token_rate_limit() -> str:
    """Per-client budget for credential issuance, read from settings on every request."""
    return f"{settings.rate_limit_per_minute}/minute"
