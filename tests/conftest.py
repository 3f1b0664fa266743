import os
import sys
import tempfile
import uuid

# Point the app at a throwaway database before anything imports `database`
_tmp_dir = tempfile.mkdtemp(prefix="fitness_app_test_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmp_dir, 'test.db')}"

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from fastapi.testclient import TestClient

from database import get_db_session
from models_orm import UserORM
from main import app


@pytest.fixture(scope="session")
def client():
    # Entering the context runs the lifespan: tables + seed data
    with TestClient(app) as c:
        yield c


def _register_and_login(client, role="user"):
    username = f"user_{uuid.uuid4().hex[:8]}"
    password = "testpassword"
    res = client.post("/api/auth/register", json={
        "username": username,
        "password": password,
        "email": f"{username}@example.com",
        "full_name": "Test User"
    })
    assert res.status_code == 200, res.text
    user_id = res.json()["user_id"]

    if role != "user":
        db = get_db_session()
        try:
            db.query(UserORM).filter(UserORM.id == user_id).update({"role": role})
            db.commit()
        finally:
            db.close()

    res = client.post("/api/auth/login", data={"username": username, "password": password})
    assert res.status_code == 200, res.text
    token = res.json()["access_token"]
    return {
        "id": user_id,
        "username": username,
        "password": password,
        "headers": {"Authorization": f"Bearer {token}"}
    }


@pytest.fixture
def user(client):
    """A fresh regular user per test so data never leaks between tests."""
    return _register_and_login(client)


@pytest.fixture
def other_user(client):
    return _register_and_login(client)


@pytest.fixture
def admin(client):
    return _register_and_login(client, role="admin")
