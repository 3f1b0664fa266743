def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_api_responses_are_not_cached(client, user):
    response = client.get("/api/auth/me", headers=user["headers"])
    assert "no-store" in response.headers["cache-control"]


def test_seeded_content_available(client, user):
    exercises = client.get("/api/exercises", headers=user["headers"]).json()
    templates = client.get("/api/routines/templates", headers=user["headers"]).json()
    assert len(exercises) >= 20
    assert {t["name"] for t in templates} >= {"Push / Pull / Legs", "Upper / Lower", "Full Body Beginner"}
