"""
Concurrent submissions against one job, each on its own session and
connection, as happens when requests run on the worker thread pool.
"""
import threading

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from jobportal.database import Base, configure_sqlite_locking
from jobportal.models.job import Job
from jobportal.models.job_application import JobApplication
from jobportal.services.applications import ApplicationService
from jobportal.services.jobs import JobService

@pytest.fixture
def file_session_factory(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'concurrency.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    configure_sqlite_locking(engine)
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()

def _submit_concurrently(session_factory, job_id, count):
    barrier = threading.Barrier(count)
    errors = []

    def worker(i):
        db = session_factory()
        try:
            barrier.wait()
            ApplicationService(db).submit_application(
                {"job_id": job_id, "applicant_email": f"user{i}@x.com"}
            )
        except Exception as e:
            errors.append(e)
        finally:
            db.close()

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return errors

@pytest.mark.parametrize("count", [2, 8])
def test_concurrent_submissions_never_lose_an_increment(file_session_factory, count):
    with file_session_factory() as db:
        job_id = JobService(db).create_job({"title": "Engineer", "hr_email": "hr@x.com"})["insertedId"]

    errors = _submit_concurrently(file_session_factory, job_id, count)
    assert errors == []

    with file_session_factory() as db:
        job = db.query(Job).filter(Job.id == job_id).one()
        applications = db.query(JobApplication).filter(JobApplication.job_id == job_id).count()
        assert applications == count
        assert job.application_count == applications
