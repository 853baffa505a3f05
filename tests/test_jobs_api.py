import pytest
from fastapi import status

def test_create_job_stores_open_document(client):
    """Undeclared fields are kept as sent."""
    payload = {
        "title": "Engineer",
        "hr_email": "hr@x.com",
        "company": "Acme",
        "salaryRange": {"min": 100, "max": 200, "currency": "usd"},
        "requirements": ["python", "sql"],
    }
    response = client.post("/jobs", json=payload)
    assert response.status_code == status.HTTP_200_OK
    result = response.json()
    assert result["acknowledged"] is True
    job_id = result["insertedId"]

    job = client.get(f"/jobs/{job_id}").json()
    assert job["_id"] == job_id
    assert job["title"] == "Engineer"
    assert job["salaryRange"] == {"min": 100, "max": 200, "currency": "usd"}
    assert job["requirements"] == ["python", "sql"]
    assert job["applicationCount"] == 0

def test_list_jobs_filters_by_owner(client, create_job):
    first = create_job(hr_email="hr@x.com")
    second = create_job(hr_email="other@x.com", title="Designer")

    all_jobs = client.get("/jobs").json()
    assert [j["_id"] for j in all_jobs] == [first, second]

    mine = client.get("/jobs", params={"email": "other@x.com"}).json()
    assert [j["_id"] for j in mine] == [second]
    assert mine[0]["title"] == "Designer"

def test_get_missing_job_is_not_found(client):
    response = client.get("/jobs/doesnotexist")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["errors"][0]["code"] == "NOT_FOUND"

def test_client_cannot_set_application_count(client):
    response = client.post("/jobs", json={"title": "Engineer", "applicationCount": 99})
    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "VALIDATION_ERROR"
    assert client.get("/jobs").json() == []

def test_create_job_rejects_non_object_body(client):
    response = client.post("/jobs", json=["not", "an", "object"])
    assert response.status_code == 422

def test_unstored_fields_are_absent_not_null(client, create_job):
    job_id = create_job(title="Engineer", hr_email="hr@x.com")

    job = client.get(f"/jobs/{job_id}").json()
    assert "location" not in job
    assert "company" not in job
    assert "company_logo" not in job

    listed = client.get("/jobs").json()
    assert "location" not in listed[0]
    assert listed[0]["title"] == "Engineer"
