from database import get_db_session
from models_orm import UserORM


def test_login(client, user):
    response = client.post(
        "/api/auth/login",
        data={"username": user["username"], "password": user["password"]}
    )
    assert response.status_code == 200
    data = response.json()
    assert "access_token" in data
    assert data["token_type"] == "bearer"
    assert data["role"] == "user"
    assert data["user_id"] == user["id"]


def test_login_with_json_body(client, user):
    response = client.post(
        "/api/auth/login",
        json={"username": user["username"], "password": user["password"]}
    )
    assert response.status_code == 200
    assert response.json()["access_token"]


def test_login_wrong_password(client, user):
    response = client.post("/api/auth/login", data={"username": user["username"], "password": "nope"})
    assert response.status_code == 401


def test_login_disabled_account(client, user):
    db = get_db_session()
    db.query(UserORM).filter(UserORM.id == user["id"]).update({"is_active": False})
    db.commit()
    db.close()

    response = client.post("/api/auth/login", data={"username": user["username"], "password": user["password"]})
    assert response.status_code == 403


def test_access_protected_route(client, user):
    response = client.get("/api/auth/me", headers=user["headers"])
    assert response.status_code == 200
    assert response.json()["username"] == user["username"]


def test_token_from_cookie(client, user):
    token = user["headers"]["Authorization"].split(" ", 1)[1]
    client.cookies.set("access_token", token)
    try:
        response = client.get("/api/auth/me")
    finally:
        client.cookies.clear()
    assert response.status_code == 200


def test_protected_route_without_token(client):
    assert client.get("/api/auth/me").status_code == 401


def test_protected_route_with_bad_token(client):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
