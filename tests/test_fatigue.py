from datetime import datetime, timedelta

from service_modules.fatigue_service import (
    compute_fatigue_metrics, build_recommendation, muscle_group_fatigue, performance_decline,
    deload_type, deload_urgency, deload_duration, deload_necessary, fatigue_service
)

NOW = datetime(2026, 10, 19, 12, 0, 0)


def _session(days_ago, weight=100.0, reps=10, sets=5, rpe=8.0, groups=("chest",), rir=None):
    return {
        "date": (NOW - timedelta(days=days_ago)).isoformat(),
        "rpe": rpe,
        "rir": rir,
        "exercises": [{
            "name": "Bench",
            "muscle_groups": list(groups),
            "sets": [{"reps": reps, "weight": weight} for _ in range(sets)]
        }]
    }


def test_muscle_group_fatigue_formula():
    # volume 5000 -> 40, frequency 1/12 -> 2.5, rpe 8 -> 24
    fatigue = muscle_group_fatigue([_session(1)])
    assert fatigue == {"chest": 67}


def test_fatigue_capped_at_100():
    sessions = [_session(i, weight=500, rpe=10) for i in range(14)]
    assert muscle_group_fatigue(sessions)["chest"] == 100


def test_performance_decline_needs_four_sessions():
    assert performance_decline([_session(1), _session(8), _session(15)], NOW) == 0


def test_performance_decline_reports_drop():
    sessions = [
        _session(1, weight=80), _session(2, weight=80),
        _session(8, weight=100), _session(9, weight=100),
    ]
    # week 0: 8000, week 1: 10000 -> 20% drop
    assert round(performance_decline(sessions, NOW), 1) == 20.0


def test_performance_gain_is_zero():
    sessions = [
        _session(1, weight=120), _session(2, weight=120),
        _session(8, weight=100), _session(9, weight=100),
    ]
    assert performance_decline(sessions, NOW) == 0


def test_wellness_defaults_without_logs():
    metrics = compute_fatigue_metrics([_session(1)], None, [], NOW)
    assert metrics["sleep_quality"] == 70
    assert metrics["stress_level"] == 50
    assert metrics["soreness"] == 50
    assert metrics["readiness"] == 70
    assert metrics["weeks_since_last_deload"] == 12
    assert metrics["rir_average"] == 2


def test_tolerance_formulas():
    wellness = [{"sleep_quality": 60, "stress_level": 40, "soreness": 30, "readiness": 50}]
    metrics = compute_fatigue_metrics([_session(1)], None, wellness, NOW)
    overall = metrics["overall_fatigue"]
    assert metrics["volume_tolerance"] == 100 - overall * 0.5 - 30 * 0.3 - 40 * 0.2
    assert metrics["intensity_tolerance"] == 100 - overall * 0.4 - 60 * 0.3 - 50 * 0.3


def test_no_sessions_gives_none():
    assert compute_fatigue_metrics([], None, [], NOW) is None


def test_weeks_since_last_deload():
    metrics = compute_fatigue_metrics([_session(1)], (NOW - timedelta(days=22)).date().isoformat(), [], NOW)
    assert metrics["weeks_since_last_deload"] == 3


def test_deload_type_rules():
    assert deload_type(0, 5, 35, 70) == "volume"
    assert deload_type(0, 5, 70, 35) == "intensity"
    assert deload_type(0, 5, 20, 25) == "complete"
    assert deload_type(0, 9, 90, 90) == "complete"
    assert deload_type(0, 5, 50, 50) == "frequency"
    assert deload_type(15, 5, 70, 70) == "active_recovery"
    assert deload_type(0, 5, 70, 70) == "volume"


def test_urgency_levels():
    assert deload_urgency(50, 0, 2, 80) == "low"
    assert deload_urgency(75, 6, 2, 80) == "moderate"
    assert deload_urgency(85, 11, 2, 80) == "moderate"
    assert deload_urgency(85, 11, 9, 80) == "high"
    assert deload_urgency(95, 20, 13, 30) == "critical"


def test_duration():
    assert deload_duration(50, "low", "volume") == 7
    assert deload_duration(75, "high", "volume") == 12  # 10.5 + 1, rounded half up
    assert deload_duration(95, "critical", "active_recovery") == 13


def test_necessity_points():
    assert deload_necessary(75, 6, 2, 80, 20) is True
    assert deload_necessary(75, 0, 8, 80, 20) is False
    assert deload_necessary(75, 0, 8, 50, 20) is True


def test_recommendation_fields():
    sessions = [_session(i, weight=200, rpe=9.5, groups=("chest", "triceps")) for i in range(0, 24, 2)]
    wellness = [{"sleep_quality": 40, "stress_level": 80, "soreness": 80, "readiness": 40}]
    metrics = compute_fatigue_metrics(sessions, None, wellness, NOW)
    rec = build_recommendation(metrics)

    assert rec["is_recommended"] is True
    assert rec["type"] == metrics["deload_type"]
    assert set(rec["target_muscle_groups"]) == {"chest", "triceps"}
    assert rec["expected_recovery_time"] >= rec["duration"]
    assert len(rec["suggested_activities"]) == 3
    assert any("fatigue" in r for r in rec["reasoning"])
    assert "Most fatigued muscle groups" in rec["notes"]


def test_no_recommendation_when_fresh():
    metrics = compute_fatigue_metrics([_session(1, weight=20, rpe=3)], NOW.date().isoformat(),
                                      [{"sleep_quality": 90, "stress_level": 10, "soreness": 10, "readiness": 90}],
                                      NOW)
    assert build_recommendation(metrics) is None


def test_service_reads_history(client, user):
    today = datetime.utcnow()
    for days_ago in (1, 3):
        client.post("/api/workout-logs", json={
            "date": (today - timedelta(days=days_ago)).isoformat(),
            "rpe": 8,
            "exercises": [{"name": "Bench", "muscle_groups": ["chest"], "sets": [{"reps": 10, "weight": 100}]}]
        }, headers=user["headers"])
    client.post("/api/wellness/logs", json={"sleep_quality": 50, "stress_level": 60, "soreness": 40, "readiness": 55},
                headers=user["headers"])

    metrics = fatigue_service.calculate_fatigue_metrics(user["id"])
    assert metrics["user_id"] == user["id"]
    assert metrics["readiness"] == 55
    assert set(metrics["muscle_group_fatigue"]) == {"chest"}

    res = client.get("/api/training/fatigue", headers=user["headers"])
    assert res.json()["sleep_quality"] == 50
