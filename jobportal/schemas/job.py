from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class JobCreate(BaseModel):
    # Job postings are open documents: undeclared fields are stored as sent.
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    location: Optional[str] = None
    company: Optional[str] = None
    company_logo: Optional[str] = None
    hr_email: Optional[str] = None

class JobResponse(BaseModel):
    """Stored document as-is: only keys the job actually has are emitted."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(alias="_id")
    applicationCount: int = 0
