from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from jobportal.database import get_db
from jobportal.schemas.common import InsertResult
from jobportal.schemas.job import JobCreate, JobResponse
from jobportal.services.jobs import JobService

router = APIRouter(
    prefix="/jobs",
    tags=["Jobs"],
)

@router.get("", response_model=List[JobResponse])
def get_jobs(
    email: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    List job postings, optionally only those owned by the recruiter ``email``.
    """
    return JobService(db).list_jobs(owner_email=email)

@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: str, db: Session = Depends(get_db)):
    return JobService(db).get_job(job_id)

@router.post("", response_model=InsertResult)
def create_job(job_in: JobCreate, db: Session = Depends(get_db)):
    """
    Create a job posting. Fields are stored as sent.
    """
    fields = {**job_in.model_dump(exclude_unset=True), **(job_in.model_extra or {})}
    return JobService(db).create_job(fields)
