from typing import Any, Dict, List, Optional

from jobportal.core.exceptions import NotFoundError, ValidationError
from jobportal.models.job import Job
from jobportal.services.base import BaseService

# Server-maintained keys a client may not supply
RESERVED_JOB_FIELDS = ("_id", "applicationCount")


class JobService(BaseService):
    """Thin create/list/fetch access to job postings."""

    def create_job(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        reserved = [key for key in RESERVED_JOB_FIELDS if key in fields]
        if reserved:
            raise ValidationError(
                f"Fields are server-maintained: {', '.join(reserved)}",
                details={"fields": reserved}
            )

        job = Job.from_document(fields)
        self.db.add(job)
        self._commit()
        self.log_info(f"Created job {job.id}", hr_email=job.hr_email)
        return {"acknowledged": True, "insertedId": job.id}

    def list_jobs(self, owner_email: Optional[str] = None) -> List[Dict[str, Any]]:
        query = self.db.query(Job)
        if owner_email:
            query = query.filter(Job.hr_email == owner_email)
        return [job.to_document() for job in query.order_by(Job.seq).all()]

    def get_job(self, job_id: str) -> Dict[str, Any]:
        job = self.db.query(Job).filter(Job.id == job_id).first()
        if not job:
            raise NotFoundError("Job not found", details={"job_id": job_id})
        return job.to_document()
