from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional

class IdentityClaim(BaseModel):
    """Identity asserted by the front end after its own login flow; signed verbatim."""
    model_config = ConfigDict(extra="allow")

    # Kept exactly as sent: ownership checks compare it byte-for-byte with applicant_email.
    email: str = Field(min_length=1)
    role: Optional[str] = None

class Identity(BaseModel):
    email: str
    role: Optional[str] = None
    claims: Dict[str, Any] = {}

class SessionResponse(BaseModel):
    success: bool
