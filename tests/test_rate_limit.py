import pytest
from fastapi import status

from jobportal.core.config import settings
from jobportal.core.limiter import limiter

@pytest.fixture
def throttled(monkeypatch):
    monkeypatch.setattr(limiter, "enabled", True)
    monkeypatch.setattr(settings, "rate_limit_per_minute", 2)
    limiter.reset()
    yield
    limiter.reset()

def test_session_issuance_is_throttled(client, throttled):
    for _ in range(2):
        assert client.post("/jwt", json={"email": "a@x.com"}).status_code == status.HTTP_200_OK

    response = client.post("/jwt", json={"email": "a@x.com"})
    assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS

def test_other_endpoints_are_not_throttled(client, throttled):
    for _ in range(3):
        client.post("/jwt", json={"email": "a@x.com"})

    for _ in range(5):
        assert client.get("/jobs").status_code == status.HTTP_200_OK
        assert client.post("/logout").status_code == status.HTTP_200_OK
