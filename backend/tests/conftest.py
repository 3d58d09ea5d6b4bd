import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_gateway
from app.main import app
from app.services.search_gateway import JobSearchGateway
from engine_double import InMemoryEngine


@pytest.fixture
def engine():
    return InMemoryEngine()


@pytest.fixture
def gateway(engine):
    return JobSearchGateway(engine, "jobs-test")


@pytest.fixture
def client(gateway):
    app.dependency_overrides[get_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def backend_job():
    return {
        "title": "Backend Engineer",
        "description": "Build APIs and data pipelines",
        "company": "Acme",
        "location": "Remote",
        "skills": ["go", "sql"],
        "salary": 120000,
    }
