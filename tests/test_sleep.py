from datetime import date

from service_modules.sleep_service import (
    sleep_service, time_to_minutes, sleep_debt, consistency_score, compute_sleep_stats, build_recommendations
)


def _entry(day, start="23:00", end="07:00", duration=480, quality=7, **extra):
    entry = {"date": day, "start_time": start, "end_time": end, "duration": duration, "quality": quality}
    entry.update(extra)
    return entry


def test_time_to_minutes():
    assert time_to_minutes("23:00") == 1380
    assert time_to_minutes("7:30") == 450
    assert time_to_minutes("abc") == 0
    assert time_to_minutes("12") == 0
    assert time_to_minutes(None) == 0


def test_sleep_debt_uses_last_seven():
    entries = [_entry(f"2026-10-{d:02d}", duration=300) for d in range(1, 9)]
    # the first entry is outside the window
    assert sleep_debt(entries) == 7 * 180
    assert sleep_debt([_entry("2026-10-01", duration=540)]) == 0


def test_consistency_needs_three_entries():
    assert consistency_score([_entry("2026-10-01"), _entry("2026-10-02")]) == 0
    regular = [_entry(f"2026-10-0{d}") for d in range(1, 4)]
    assert consistency_score(regular) == 100


def test_consistency_drops_with_spread():
    irregular = [
        _entry("2026-10-01", start="21:00", end="05:00"),
        _entry("2026-10-02", start="23:00", end="07:00"),
        _entry("2026-10-03", start="01:00", end="09:00"),
    ]
    # "01:00" counts as 60 minutes, so bedtimes spread widely
    assert consistency_score(irregular) < 70


def test_stats_empty():
    stats = compute_sleep_stats([])
    assert stats["average_duration"] == 0
    assert stats["dates"] == []


def test_stats_averages():
    stats = compute_sleep_stats([
        _entry("2026-10-01", duration=420, quality=6, hrv=40),
        _entry("2026-10-02", duration=480, quality=8),
    ])
    assert stats["average_duration"] == 450
    assert stats["average_quality"] == 7
    assert stats["average_hrv"] == 40
    assert stats["average_deep_sleep"] is None
    assert stats["trends"]["duration"] == [420, 480]
    assert stats["trends"]["rem_sleep"] is None
    assert stats["sleep_debt"] == 60


def test_recommendations_without_data():
    recs = build_recommendations(compute_sleep_stats([]))
    assert [r["id"] for r in recs] == ["general-1", "general-3", "general-4", "general-5", "general-2"]


def test_recommendations_from_stats_and_factors():
    stats = compute_sleep_stats([_entry("2026-10-01", duration=400, quality=5, hrv=35)])
    latest = {"factors": {"caffeine": True, "alcohol": False}}
    recs = build_recommendations(stats, latest)
    ids = [r["id"] for r in recs]
    assert {"duration-1", "quality-1", "factors-2", "hrv-1"} <= set(ids)
    assert "factors-1" not in ids
    priorities = [r["priority"] for r in recs]
    assert priorities == sorted(priorities, key=["high", "medium", "low"].index)


def test_recommendations_category_filter():
    recs = build_recommendations(compute_sleep_stats([]), {"factors": {"caffeine": True}}, "habits")
    assert [r["id"] for r in recs] == ["factors-2", "general-3", "general-2"]


# --- API ---

def test_save_and_update_entry(client, user):
    res = client.post("/api/sleep/entries", json=_entry("2026-10-10", factors={"alcohol": True}),
                      headers=user["headers"])
    assert res.status_code == 200
    entry = res.json()
    assert entry["device_source"] == "manual"
    assert entry["factors"]["alcohol"] is True
    assert entry["factors"]["noise"] is False

    res = client.post("/api/sleep/entries", json=_entry("2026-10-10", quality=9, id=entry["id"]),
                      headers=user["headers"])
    assert res.json()["id"] == entry["id"]
    assert res.json()["quality"] == 9
    assert len(client.get("/api/sleep/entries", headers=user["headers"]).json()) == 1


def test_entry_of_other_user(client, user, other_user):
    entry = client.post("/api/sleep/entries", json=_entry("2026-10-10"), headers=user["headers"]).json()
    res = client.post("/api/sleep/entries", json=_entry("2026-10-10", id=entry["id"]), headers=other_user["headers"])
    assert res.status_code == 403
    assert client.delete(f"/api/sleep/entries/{entry['id']}", headers=other_user["headers"]).status_code == 403
    assert client.delete(f"/api/sleep/entries/{entry['id']}", headers=user["headers"]).status_code == 200


def test_quality_range(client, user):
    res = client.post("/api/sleep/entries", json=_entry("2026-10-10", quality=11), headers=user["headers"])
    assert res.status_code == 422


def test_entries_newest_first_with_paging(client, user):
    for day in ("2026-10-01", "2026-10-03", "2026-10-02"):
        client.post("/api/sleep/entries", json=_entry(day), headers=user["headers"])
    entries = client.get("/api/sleep/entries", params={"limit": 2}, headers=user["headers"]).json()
    assert [e["date"] for e in entries] == ["2026-10-03", "2026-10-02"]
    rest = client.get("/api/sleep/entries", params={"limit": 2, "offset": 2}, headers=user["headers"]).json()
    assert [e["date"] for e in rest] == ["2026-10-01"]


def test_default_goal_then_update(client, user):
    goal = client.get("/api/sleep/goal", headers=user["headers"]).json()
    assert goal["target_duration"] == 480
    assert goal["target_bedtime"] == "23:00"

    res = client.post("/api/sleep/goal", json={"target_duration": 450, "target_bedtime": "22:30"},
                      headers=user["headers"])
    assert res.json()["id"] == goal["id"]
    assert client.get("/api/sleep/goal", headers=user["headers"]).json()["target_duration"] == 450


def test_stats_window(client, user):
    sleep_service.save_entry(user["id"], _entry("2026-10-18", duration=400))
    sleep_service.save_entry(user["id"], _entry("2026-10-17", duration=440))
    sleep_service.save_entry(user["id"], _entry("2026-08-01", duration=200))

    stats = sleep_service.get_stats(user["id"], days=30, today=date(2026, 10, 19))
    assert stats["dates"] == ["2026-10-17", "2026-10-18"]
    assert stats["average_duration"] == 420
    assert stats["sleep_debt"] == 120


def test_recommendations_endpoint(client, user):
    res = client.get("/api/sleep/recommendations", params={"category": "routine"}, headers=user["headers"])
    assert [r["id"] for r in res.json()] == ["general-4", "general-5"]
