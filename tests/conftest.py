import base64
import os

# Must be set before internmatch is imported: settings and the engine are module-level
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET_KEY"] = "test-secret"

import mongomock
import pytest
from fastapi.testclient import TestClient

from internmatch.db import mongodb, postgres
from internmatch.main import app

PDF_BYTES = b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\n%%EOF"
PDF_BASE64 = base64.b64encode(PDF_BYTES).decode()


@pytest.fixture
def mongo(monkeypatch):
    client = mongomock.MongoClient()
    monkeypatch.setattr(mongodb, "_client", client)
    monkeypatch.setattr(mongodb, "_db", None)
    mongodb.init_mongo_indexes()
    yield client
    client.close()


@pytest.fixture
def accounts_db():
    postgres.metadata.drop_all(postgres.engine)
    postgres.init_postgres_schema()
    yield postgres.engine


@pytest.fixture
def client(mongo, accounts_db):
    return TestClient(app)


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


def signup(client, email, user_type="intern", name="Test User", password="secret123"):
    resp = client.post("/auth/signup", json={
        "name": name, "email": email, "password": password, "userType": user_type,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()["token"]


def intern_payload(**overrides):
    payload = {
        "name": "Amara Okafor",
        "email": "amara@internmatch.io",
        "education": "undergraduate",
        "skills": ["JavaScript", "React", "Node.js"],
        "desiredRole": "Software Development",
        "openTo": "both",
    }
    payload.update(overrides)
    return payload


def role_payload(**overrides):
    payload = {
        "orgName": "TechCorp Solutions",
        "orgEmail": "Jobs@TechCorp.io",
        "roleTitle": "Frontend Intern",
        "jobDescription": "Build product features with React and TypeScript.",
        "requiredSkills": ["React", "TypeScript"],
        "internshipType": "paid",
        "location": "Remote",
        "duration": "3 months",
    }
    payload.update(overrides)
    return payload


def create_intern(client, email, skills, **overrides):
    """Sign up an intern account and submit its profile. Returns the account token."""
    token = signup(client, email, "intern")
    resp = client.post(
        "/intern/profile",
        json=intern_payload(email=email, skills=skills, **overrides),
        headers=auth_header(token),
    )
    assert resp.status_code == 201, resp.text
    return token
