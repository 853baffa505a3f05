from sqlalchemy import Column, Integer, String
from jobportal.database import Base
from jobportal.models.base import DocumentMixin

class Job(DocumentMixin, Base):
    __tablename__ = "jobs"
    __lifted_fields__ = (
        ("hr_email", "hr_email"),
        ("applicationCount", "application_count"),
    )

    hr_email = Column(String, index=True, nullable=True)
    # Derived: number of job_applications rows referencing this job.
    application_count = Column(Integer, nullable=False, default=0, server_default="0")

    # Fields copied onto an applicant's listed applications at read time
    ENRICHMENT_FIELDS = ("title", "location", "company", "company_logo")

    def __repr__(self):
        return f"<Job {self.id} ({self.document.get('title') if self.document else None})>"
