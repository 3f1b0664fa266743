def test_requires_admin(client, user):
    assert client.get("/api/admin/users", headers=user["headers"]).status_code == 403
    assert client.get("/api/admin/stats", headers=user["headers"]).status_code == 403


def test_list_and_filter_users(client, admin, user):
    users = client.get("/api/admin/users", params={"search": user["username"]}, headers=admin["headers"]).json()
    assert [u["id"] for u in users] == [user["id"]]
    assert "hashed_password" not in users[0]

    admins = client.get("/api/admin/users", params={"role": "admin"}, headers=admin["headers"]).json()
    assert admin["id"] in {u["id"] for u in admins}
    assert all(u["role"] == "admin" for u in admins)


def test_get_unknown_user(client, admin):
    assert client.get("/api/admin/users/missing", headers=admin["headers"]).status_code == 404


def test_disable_user(client, admin, user):
    res = client.put(f"/api/admin/users/{user['id']}", json={"is_active": False}, headers=admin["headers"])
    assert res.status_code == 200
    assert res.json()["is_active"] is False
    assert client.get("/api/auth/me", headers=user["headers"]).status_code == 403


def test_promote_user(client, admin, user):
    res = client.put(f"/api/admin/users/{user['id']}", json={"role": "admin"}, headers=admin["headers"])
    assert res.json()["role"] == "admin"
    assert client.get("/api/admin/stats", headers=user["headers"]).status_code == 200


def test_cannot_demote_or_delete_self(client, admin):
    res = client.put(f"/api/admin/users/{admin['id']}", json={"role": "user"}, headers=admin["headers"])
    assert res.status_code == 400
    assert client.delete(f"/api/admin/users/{admin['id']}", headers=admin["headers"]).status_code == 400


def test_delete_user_with_data(client, admin, user):
    client.post("/api/sleep/entries", json={
        "date": "2026-10-10", "start_time": "23:00", "end_time": "07:00", "duration": 480, "quality": 7
    }, headers=user["headers"])
    client.post("/api/nutrition/goals", json={"calories": 2000}, headers=user["headers"])

    res = client.delete(f"/api/admin/users/{user['id']}", headers=admin["headers"])
    assert res.status_code == 200
    assert client.get(f"/api/admin/users/{user['id']}", headers=admin["headers"]).status_code == 404
    assert client.get("/api/auth/me", headers=user["headers"]).status_code == 401


def test_stats(client, admin, user):
    client.post("/api/workout-logs", json={
        "exercises": [{"name": "Row", "sets": [{"reps": 10, "weight": 50}]}]
    }, headers=user["headers"])
    stats = client.get("/api/admin/stats", headers=admin["headers"]).json()
    assert stats["users"] >= 2
    assert stats["templates"] >= 3
    assert stats["exercises"] >= 20
    assert stats["workout_logs"] >= 1
