from sqlalchemy import Column, String
from jobportal.database import Base
from jobportal.models.base import DocumentMixin

class JobApplication(DocumentMixin, Base):
    __tablename__ = "job_applications"
    __lifted_fields__ = (
        ("job_id", "job_id"),
        ("applicant_email", "applicant_email"),
        ("status", "status"),
    )

    # Plain string reference to Job.id; no FK so dangling references are detectable, not rejected
    job_id = Column(String(32), index=True, nullable=True)
    applicant_email = Column(String, index=True, nullable=True)
    # Open set of workflow states (pending, reviewed, accepted, rejected, ...)
    status = Column(String, nullable=True)

    def __repr__(self):
        return f"<JobApplication {self.id} job={self.job_id} status={self.status}>"
