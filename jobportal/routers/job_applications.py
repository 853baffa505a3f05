from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from jobportal.database import get_db
from jobportal.routers.auth_deps import require_owner_email
from jobportal.schemas.auth import Identity
from jobportal.schemas.common import InsertResult, UpdateResult
from jobportal.schemas.job_application import (
    ApplicationStatusUpdate,
    EnrichedJobApplicationResponse,
    JobApplicationCreate,
    JobApplicationResponse,
)
from jobportal.services.applications import ApplicationService

router = APIRouter(tags=["Job Applications"])

@router.get("/job-application", response_model=List[EnrichedJobApplicationResponse])
def get_my_applications(
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_owner_email)
):
    """
    The caller's own applications, each with its job's title, location,
    company and company_logo.
    """
    return ApplicationService(db).list_for_applicant(identity.email)

# Open to any caller, unlike /job-application; recruiters' front end relies on it.
@router.get("/job-applications/jobs/{job_id}", response_model=List[JobApplicationResponse])
def get_applications_for_job(job_id: str, db: Session = Depends(get_db)):
    return ApplicationService(db).list_for_job(job_id)

@router.post("/job-applications", response_model=InsertResult)
def submit_application(application_in: JobApplicationCreate, db: Session = Depends(get_db)):
    """
    Submit an application and count it against its job.
    404 DANGLING_REFERENCE when job_id names no job.
    """
    return ApplicationService(db).submit_application(
        {**application_in.model_dump(exclude_unset=True), **(application_in.model_extra or {})}
    )

@router.patch("/job-applications/{application_id}", response_model=UpdateResult)
def update_application_status(
    application_id: str,
    update_in: ApplicationStatusUpdate,
    db: Session = Depends(get_db)
):
    return ApplicationService(db).update_status(application_id, update_in.status)
