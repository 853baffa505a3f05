from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class JobApplicationCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    job_id: Optional[str] = None
    applicant_email: Optional[str] = None
    status: Optional[str] = None

class JobApplicationResponse(BaseModel):
    # job_id, applicant_email, status and the rest ride along as extras, present only when stored
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(alias="_id")

class EnrichedJobApplicationResponse(JobApplicationResponse):
    """
    Application plus title/location/company/company_logo joined from its job
    at read time, each present only when the job has it.
    """

class ApplicationStatusUpdate(BaseModel):
    status: str
