"""
Job application workflow.

Submission inserts the application and bumps the parent job's
applicationCount inside one transaction. The bump is a single
``UPDATE ... SET application_count = application_count + 1`` so concurrent
submissions against the same job never lose an increment, and its row count
doubles as the existence check for the referenced job.
"""
from typing import Any, Dict, List

from sqlalchemy import update

from jobportal.core.exceptions import DanglingReferenceError, ValidationError
from jobportal.models.job import Job
from jobportal.models.job_application import JobApplication
from jobportal.services.base import BaseService

RESERVED_APPLICATION_FIELDS = ("_id",)


class ApplicationService(BaseService):

    def submit_application(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Store an application and count it against its job.
        Raises DanglingReferenceError, with nothing persisted, when job_id
        does not reference an existing job.
        """
        reserved = [key for key in RESERVED_APPLICATION_FIELDS if key in fields]
        if reserved:
            raise ValidationError(
                f"Fields are server-maintained: {', '.join(reserved)}",
                details={"fields": reserved}
            )

        application = JobApplication.from_document(fields)
        job_id = application.job_id
        try:
            self.db.add(application)
            self.db.flush()

            matched = 0
            if job_id:
                result = self.db.execute(
                    update(Job)
                    .where(Job.id == job_id)
                    .values(application_count=Job.application_count + 1)
                    .execution_options(synchronize_session=False)
                )
                matched = result.rowcount

            if not matched:
                self.db.rollback()
                self.log_warning(f"Application rejected: job {job_id!r} does not exist")
                raise DanglingReferenceError(details={"job_id": job_id})

            self.db.commit()
        except DanglingReferenceError:
            raise
        except Exception as e:
            self.db.rollback()
            self.log_error(f"Application submission for job {job_id!r} failed: {e}")
            raise

        self.log_info(f"Application {application.id} submitted for job {job_id}")
        return {"acknowledged": True, "insertedId": application.id}

    def list_for_applicant(self, email: str) -> List[Dict[str, Any]]:
        """
        Applications owned by ``email``, each carrying the referenced job's
        display fields. Jobs are fetched in one IN query rather than one
        lookup per application; an application whose job is gone is returned
        without the fields.
        """
        applications = (
            self.db.query(JobApplication)
            .filter(JobApplication.applicant_email == email)
            .order_by(JobApplication.seq)
            .all()
        )

        job_ids = {a.job_id for a in applications if a.job_id}
        jobs_by_id = {}
        if job_ids:
            jobs = self.db.query(Job).filter(Job.id.in_(job_ids)).all()
            jobs_by_id = {job.id: job.to_document() for job in jobs}

        results = []
        for application in applications:
            doc = application.to_document()
            job = jobs_by_id.get(application.job_id)
            if job:
                for field in Job.ENRICHMENT_FIELDS:
                    if field in job:
                        doc[field] = job[field]
            results.append(doc)
        return results

    def list_for_job(self, job_id: str) -> List[Dict[str, Any]]:
        applications = (
            self.db.query(JobApplication)
            .filter(JobApplication.job_id == job_id)
            .order_by(JobApplication.seq)
            .all()
        )
        return [a.to_document() for a in applications]

    def update_status(self, application_id: str, status: str) -> Dict[str, Any]:
        """Overwrite status unconditionally. Unknown ids match nothing; not an error."""
        application = (
            self.db.query(JobApplication)
            .filter(JobApplication.id == application_id)
            .first()
        )
        if not application:
            return {"acknowledged": True, "matchedCount": 0, "modifiedCount": 0}

        previous = application.status
        modified = previous != status
        if modified:
            application.status = status
            self._commit()
            self.log_info(f"Application {application_id} status {previous!r} -> {status!r}")
        return {"acknowledged": True, "matchedCount": 1, "modifiedCount": int(modified)}
