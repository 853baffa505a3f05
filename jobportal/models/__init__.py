# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import base, job, job_application

# Explicit class exports for cleaner imports
from .job import Job
from .job_application import JobApplication

__all__ = [
    "Job",
    "JobApplication",
]
