from datetime import date, datetime, timedelta

import pytest
from fastapi import HTTPException

from service_modules.strength_service import strength_service


def _log(date, weight=100, reps=5, sets=3, rpe=7):
    return {
        "date": date,
        "rpe": rpe,
        "exercises": [{
            "name": "Back Squat",
            "muscle_groups": ["quadriceps"],
            "sets": [{"reps": reps, "weight": weight} for _ in range(sets)]
        }]
    }


# --- 1RM ---

def test_brzycki_and_epley():
    assert strength_service.estimate_one_rep_max(100, 5, "brzycki") == 112.5
    assert strength_service.estimate_one_rep_max(100, 10, "epley") == 133.3


def test_single_rep_is_the_weight():
    assert strength_service.estimate_one_rep_max(140, 1, "lander") == 140


@pytest.mark.parametrize("weight,reps,formula", [
    (0, 5, "brzycki"),
    (100, 0, "brzycki"),
    (100, 37, "brzycki"),
    (100, 5, "magic"),
])
def test_invalid_input(weight, reps, formula):
    with pytest.raises(HTTPException) as exc:
        strength_service.estimate_one_rep_max(weight, reps, formula)
    assert exc.value.status_code == 400


def test_rep_table_keeps_entered_weight():
    result = strength_service.rep_max_table(100, 5, "brzycki")
    table = {row["reps"]: row for row in result["table"]}
    assert len(table) == 12
    assert table[5]["weight"] == 100
    assert table[1]["weight"] == round(112.5)
    assert table[12]["weight"] == round(112.5 * 0.70)


def test_one_rep_max_endpoint(client, user):
    res = client.post("/api/strength/one-rep-max", json={"weight": 80, "reps": 8, "formula": "wathan"},
                      headers=user["headers"])
    assert res.status_code == 200
    assert res.json()["one_rep_max"] > 80
    bad = client.post("/api/strength/one-rep-max", json={"weight": 80, "reps": 8, "formula": "x"},
                      headers=user["headers"])
    assert bad.status_code == 400


# --- WORKOUT LOGS ---

def test_log_requires_exercises(client, user):
    res = client.post("/api/workout-logs", json={"exercises": []}, headers=user["headers"])
    assert res.status_code == 400


def test_log_requires_sets(client, user):
    payload = {"exercises": [{"name": "Back Squat", "sets": []}]}
    res = client.post("/api/workout-logs", json=payload, headers=user["headers"])
    assert res.status_code == 400


def test_log_and_list_newest_first(client, user):
    first = client.post("/api/workout-logs", json=_log("2026-10-01T10:00:00"), headers=user["headers"])
    second = client.post("/api/workout-logs", json=dict(_log("2026-10-05T10:00:00"), notes="  "),
                         headers=user["headers"])
    assert first.status_code == 200
    assert second.json()["notes"] is None

    logs = client.get("/api/workout-logs", headers=user["headers"]).json()
    assert [l["date"] for l in logs] == ["2026-10-05T10:00:00", "2026-10-01T10:00:00"]

    ranged = client.get("/api/workout-logs", params={"start": "2026-10-02", "end": "2026-10-05"},
                        headers=user["headers"]).json()
    assert len(ranged) == 1


def test_progress(client, user):
    client.post("/api/workout-logs", json=_log("2026-09-01T10:00:00", weight=100), headers=user["headers"])
    client.post("/api/workout-logs", json=_log("2026-09-08T10:00:00", weight=110), headers=user["headers"])

    progress = client.get("/api/workout-logs/progress", params={"exercise": "back squat"},
                          headers=user["headers"]).json()
    assert [p["date"] for p in progress] == ["2026-09-01T10:00:00", "2026-09-08T10:00:00"]
    assert progress[0]["volume"] == 1500
    assert progress[1]["estimated_one_rep_max"] > progress[0]["estimated_one_rep_max"]


def test_delete_log_owner_only(client, user, other_user):
    log = client.post("/api/workout-logs", json=_log("2026-10-01T10:00:00"), headers=user["headers"]).json()
    assert client.delete(f"/api/workout-logs/{log['id']}", headers=other_user["headers"]).status_code == 403
    assert client.delete(f"/api/workout-logs/{log['id']}", headers=user["headers"]).status_code == 200
    assert client.delete(f"/api/workout-logs/{log['id']}", headers=user["headers"]).status_code == 404


# --- FATIGUE ENDPOINTS ---

def test_fatigue_without_workouts(client, user):
    res = client.get("/api/training/fatigue", headers=user["headers"])
    assert res.status_code == 200
    assert res.json() is None
    assert client.get("/api/training/deload", headers=user["headers"]).json() == {"is_recommended": False}


def test_wellness_and_deload_history(client, user):
    res = client.post("/api/wellness/logs", json={"sleep_quality": 40, "readiness": 30},
                      headers=user["headers"])
    assert res.status_code == 200
    assert res.json()["readiness"] == 30

    res = client.post("/api/training/deload", json={"deload_type": "volume", "duration": 7},
                      headers=user["headers"])
    assert res.status_code == 200
    assert res.json()["date"]


def test_wellness_values_out_of_range(client, user):
    res = client.post("/api/wellness/logs", json={"soreness": 150}, headers=user["headers"])
    assert res.status_code == 422


def test_malformed_dates_rejected(client, user):
    res = client.post("/api/workout-logs", json=_log("yesterday"), headers=user["headers"])
    assert res.status_code == 422
    res = client.post("/api/training/deload", json={"deload_type": "volume", "duration": 7, "date": "last week"},
                      headers=user["headers"])
    assert res.status_code == 422
    res = client.post("/api/wellness/logs", json={"readiness": 60, "date": "soon"}, headers=user["headers"])
    assert res.status_code == 422


def test_fatigue_reads_dated_deloads(client, user):
    res = client.post("/api/workout-logs", json=_log(datetime.utcnow().isoformat()), headers=user["headers"])
    assert res.status_code == 200
    res = client.post("/api/wellness/logs", json={"readiness": 60, "date": date.today().isoformat()},
                      headers=user["headers"])
    assert res.status_code == 200
    deload_day = (date.today() - timedelta(days=14)).isoformat()
    res = client.post("/api/training/deload", json={"deload_type": "volume", "duration": 7, "date": deload_day},
                      headers=user["headers"])
    assert res.status_code == 200
    assert res.json()["date"] == deload_day

    res = client.get("/api/training/fatigue", headers=user["headers"])
    assert res.status_code == 200
    assert res.json() is not None
    assert client.get("/api/training/deload", headers=user["headers"]).status_code == 200
