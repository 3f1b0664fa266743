import uuid

from models_orm import UserORM
from database import get_db_session


def test_register_user(client):
    username = f"testuser_{uuid.uuid4().hex[:8]}"
    email = f"{username}@example.com"

    response = client.post("/api/auth/register", json={
        "username": username,
        "email": email,
        "password": "password123",
        "full_name": "Ana Test"
    })

    assert response.status_code == 200
    assert response.json()["status"] == "success"

    db = get_db_session()
    user = db.query(UserORM).filter(UserORM.username == username).first()
    assert user is not None
    assert user.email == email
    assert user.role == "user"
    assert user.hashed_password != "password123"
    db.close()


def test_register_existing_user(client):
    username = f"testuser_{uuid.uuid4().hex[:8]}"
    payload = {"username": username, "password": "password123"}

    assert client.post("/api/auth/register", json=payload).status_code == 200
    response = client.post("/api/auth/register", json=payload)

    assert response.status_code == 400
    assert "already registered" in response.json()["detail"]


def test_register_duplicate_email(client):
    email = f"{uuid.uuid4().hex[:8]}@example.com"
    client.post("/api/auth/register", json={"username": f"a_{uuid.uuid4().hex[:6]}", "password": "secret1", "email": email})
    response = client.post("/api/auth/register", json={"username": f"b_{uuid.uuid4().hex[:6]}", "password": "secret1", "email": email})
    assert response.status_code == 400


def test_register_rejects_short_password(client):
    response = client.post("/api/auth/register", json={"username": "shorty", "password": "123"})
    assert response.status_code == 422
