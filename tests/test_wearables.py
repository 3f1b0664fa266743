import uuid
from datetime import date, timedelta

from service_modules.wearable_service import wearable_service, fetch_device_sleep, activity_view


def _connect(client, user, device_type="oura", **extra):
    payload = {"device_type": device_type, "auth_token": "token-123"}
    payload.update(extra)
    res = client.post("/api/wearables", json=payload, headers=user["headers"])
    assert res.status_code == 200, res.text
    return res.json()


def test_fetch_stubbed_devices():
    entries = fetch_device_sleep("oura", date(2026, 10, 19))
    assert len(entries) == 1
    assert entries[0]["date"] == "2026-10-18"
    assert entries[0]["device_source"] == "oura"
    assert entries[0]["factors"]["screens"] is True
    assert entries[0]["factors"]["alcohol"] is False
    assert fetch_device_sleep("garmin", date(2026, 10, 19)) == []


def test_connect_device(client, user):
    device = _connect(client, user, expires_in=3600, battery_level=80)
    assert device["device_name"] == "Oura Ring"
    assert device["is_connected"] is True
    assert device["token_expires_at"]
    assert device["settings"]["sync_frequency"] == "daily"
    assert "auth_token" not in device

    devices = client.get("/api/wearables", headers=user["headers"]).json()
    assert [d["id"] for d in devices] == [device["id"]]


def test_unknown_device_type(client, user):
    res = client.post("/api/wearables", json={"device_type": "pebble", "auth_token": "x"}, headers=user["headers"])
    assert res.status_code == 422


def test_reconnect_same_device_id(client, user):
    first = _connect(client, user, device_id="ring-1")
    client.post(f"/api/wearables/{first['id']}/disconnect", headers=user["headers"])
    second = _connect(client, user, device_id="ring-1", device_name="My Ring")
    assert second["id"] == first["id"]
    assert second["is_connected"] is True
    assert second["device_name"] == "My Ring"


def test_sync_creates_sleep_entry_once(client, user):
    device = _connect(client, user)
    res = client.post(f"/api/wearables/{device['id']}/sync", headers=user["headers"])
    assert res.status_code == 200
    body = res.json()
    assert body["synced_entries"] == 1
    assert body["device"]["last_sync"]
    yesterday = (date.today() - timedelta(days=1)).isoformat()
    assert body["entries"][0]["date"] == yesterday

    client.post(f"/api/wearables/{device['id']}/sync", headers=user["headers"])
    entries = client.get("/api/sleep/entries", headers=user["headers"]).json()
    assert len(entries) == 1
    assert entries[0]["device_source"] == "oura"
    assert entries[0]["hrv"] == 65


def test_sync_device_without_sample_data(client, user):
    device = _connect(client, user, device_type="garmin")
    body = client.post(f"/api/wearables/{device['id']}/sync", headers=user["headers"]).json()
    assert body["synced_entries"] == 0
    assert body["device"]["device_name"] == "Garmin"


def test_disconnected_device_cannot_sync(client, user):
    device = _connect(client, user, device_type="whoop")
    res = client.post(f"/api/wearables/{device['id']}/disconnect", headers=user["headers"])
    assert res.json()["status"] == "disconnected"
    assert client.post(f"/api/wearables/{device['id']}/sync", headers=user["headers"]).status_code == 400


def test_other_users_device(client, user, other_user):
    device = _connect(client, user)
    assert client.post(f"/api/wearables/{device['id']}/sync", headers=other_user["headers"]).status_code == 403
    assert client.post("/api/wearables/missing/sync", headers=user["headers"]).status_code == 404


def test_activity_view_defaults():
    view = activity_view(None)
    assert view["steps"] == 0
    assert view["heart_rate"]["current"] == 0
    assert view["heart_rate"]["zones"]["fat_burn"] == 40
    assert view["blood_oxygen"] == 98


def test_record_and_read_activity(client, user):
    empty = client.get("/api/wearables/activity", headers=user["headers"]).json()
    assert empty["steps"] == 0
    assert empty["last_updated"] is None

    client.post("/api/wearables/activity", json={
        "date": date.today().isoformat(),
        "steps": 8500,
        "calories_burned": 2300,
        "heart_rate": {"average": 72, "resting": 55},
        "sleep": {"duration": 7.5, "score": 82}
    }, headers=user["headers"])

    activity = client.get("/api/wearables/activity", headers=user["headers"]).json()
    assert activity["steps"] == 8500
    assert activity["heart_rate"]["current"] == 72
    assert activity["sleep"]["quality"] == 82
    assert activity["sleep"]["breathing_rate"] == 14
    assert activity["stress"] == 42


def test_history_window(client, user):
    today = date(2026, 10, 19)
    wearable_service.record_activity(user["id"], {"date": "2026-10-18", "steps": 5000,
                                                  "heart_rate": {"average": 70}})
    wearable_service.record_activity(user["id"], {"date": "2026-10-15", "steps": 7000})
    wearable_service.record_activity(user["id"], {"date": "2026-09-01", "steps": 9000})

    history = wearable_service.get_history(user["id"], days=7, today=today)
    assert [h["date"] for h in history] == ["2026-10-15", "2026-10-18"]
    assert history[1]["heart_rate"] == 70
    assert history[0]["heart_rate"] == 0


def test_manual_entry_cannot_take_a_sync_id(client, user, other_user):
    device = _connect(client, user)
    yesterday = (date.today() - timedelta(days=1)).isoformat()
    sync_id = str(uuid.uuid5(uuid.NAMESPACE_URL, f"{user['id']}/oura/{yesterday}"))

    res = client.post("/api/sleep/entries", json={
        "id": sync_id, "date": yesterday, "start_time": "23:00", "end_time": "07:00", "duration": 480, "quality": 7
    }, headers=other_user["headers"])
    assert res.status_code == 200
    assert res.json()["id"] != sync_id

    res = client.post(f"/api/wearables/{device['id']}/sync", headers=user["headers"])
    assert res.status_code == 200
    assert res.json()["synced_entries"] == 1
    assert res.json()["entries"][0]["id"] == sync_id
