def test_list_sorted_by_name(client, user):
    exercises = client.get("/api/exercises", headers=user["headers"]).json()
    names = [e["name"].lower() for e in exercises]
    assert names == sorted(names)


def test_filter_by_muscle_group_and_difficulty(client, user):
    res = client.get("/api/exercises", params={"muscle_group": "chest", "difficulty": "beginner"},
                     headers=user["headers"])
    assert res.status_code == 200
    exercises = res.json()
    assert exercises
    for ex in exercises:
        assert "chest" in ex["muscle_groups"]
        assert ex["difficulty"] == "beginner"


def test_search_matches_name_case_insensitive(client, user):
    exercises = client.get("/api/exercises", params={"search": "SQUAT"}, headers=user["headers"]).json()
    assert {"Back Squat", "Goblet Squat"} <= {e["name"] for e in exercises}


def test_filter_by_equipment(client, user):
    exercises = client.get("/api/exercises", params={"equipment": "pull-up bar"}, headers=user["headers"]).json()
    assert exercises
    assert all("pull-up bar" in e["equipment"] for e in exercises)


def test_sort_by_difficulty(client, user):
    exercises = client.get("/api/exercises", params={"sort": "difficulty"}, headers=user["headers"]).json()
    order = {"beginner": 0, "intermediate": 1, "advanced": 2}
    ranks = [order[e["difficulty"]] for e in exercises]
    assert ranks == sorted(ranks)


def test_invalid_sort(client, user):
    res = client.get("/api/exercises", params={"sort": "popularity"}, headers=user["headers"])
    assert res.status_code == 400


def test_filters(client, user):
    filters = client.get("/api/exercises/filters", headers=user["headers"]).json()
    assert "chest" in filters["muscle_groups"]
    assert "barbell" in filters["equipment"]
    assert filters["muscle_groups"] == sorted(filters["muscle_groups"])
    assert filters["difficulties"] == ["beginner", "intermediate", "advanced"]


def test_get_missing_exercise(client, user):
    assert client.get("/api/exercises/does-not-exist", headers=user["headers"]).status_code == 404


def test_admin_crud(client, admin, user):
    payload = {
        "name": "Cable Fly",
        "category": "strength",
        "muscle_groups": ["chest"],
        "difficulty": "beginner",
        "equipment": ["cable machine"]
    }
    res = client.post("/api/admin/exercises", json=payload, headers=admin["headers"])
    assert res.status_code == 200
    exercise = res.json()
    assert exercise["muscle_groups"] == ["chest"]

    res = client.put(f"/api/admin/exercises/{exercise['id']}", json={"difficulty": "intermediate"},
                     headers=admin["headers"])
    assert res.status_code == 200
    updated = res.json()
    assert updated["difficulty"] == "intermediate"
    assert updated["name"] == "Cable Fly"

    assert client.delete(f"/api/admin/exercises/{exercise['id']}", headers=admin["headers"]).status_code == 200
    assert client.get(f"/api/exercises/{exercise['id']}", headers=user["headers"]).status_code == 404


def test_regular_user_cannot_create(client, user):
    res = client.post("/api/admin/exercises", json={"name": "Nope"}, headers=user["headers"])
    assert res.status_code == 403


def test_invalid_difficulty_rejected(client, admin):
    res = client.post("/api/admin/exercises", json={"name": "X", "difficulty": "expert"}, headers=admin["headers"])
    assert res.status_code == 422


def test_update_cannot_clear_name_or_difficulty(client, admin, user):
    exercise = client.post("/api/admin/exercises", json={"name": "Landmine Press"}, headers=admin["headers"]).json()

    res = client.put(f"/api/admin/exercises/{exercise['id']}", json={"name": None}, headers=admin["headers"])
    assert res.status_code == 400
    res = client.put(f"/api/admin/exercises/{exercise['id']}", json={"difficulty": None}, headers=admin["headers"])
    assert res.status_code == 400
    res = client.put(f"/api/admin/exercises/{exercise['id']}", json={"name": ""}, headers=admin["headers"])
    assert res.status_code == 422

    assert client.get("/api/exercises", headers=user["headers"]).status_code == 200
    assert client.get(f"/api/exercises/{exercise['id']}", headers=user["headers"]).json()["name"] == "Landmine Press"
