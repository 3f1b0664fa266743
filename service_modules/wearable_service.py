"""
Wearable Service - connected devices, simulated device sync and daily activity data.

No vendor API is called: `fetch_device_sleep` returns the canned night each
vendor integration is stubbed with, and syncing saves it through the sleep service.
"""
import json
from .base import (
    HTTPException, uuid, logging, date, datetime, timedelta,
    get_db_session, ConnectedWearableORM, WearableDataORM, load_json, now_iso, to_iso
)
from .sleep_service import sleep_service

logger = logging.getLogger("fitness_app")

DEVICE_NAMES = {
    "oura": "Oura Ring",
    "whoop": "WHOOP",
    "garmin": "Garmin",
    "apple_watch": "Apple Watch",
    "fitbit": "Fitbit",
    "polar": "Polar",
}

DEFAULT_SETTINGS = {
    "sync_frequency": "daily",
    "sync_time": "04:00",
    "metrics": {
        "sleep": True,
        "hrv": True,
        "resting_heart_rate": True,
        "body_temperature": True,
    },
}

# Sample night returned by the stubbed vendor integrations
SAMPLE_SLEEP = {
    "oura": {
        "start_time": "23:30", "end_time": "07:30", "duration": 480, "quality": 8,
        "deep_sleep": 120, "rem_sleep": 120, "light_sleep": 240, "awake_time": 0,
        "hrv": 65, "resting_heart_rate": 52,
        "factors": {"screens": True, "exercise": True},
    },
    "whoop": {
        "start_time": "23:15", "end_time": "07:00", "duration": 465, "quality": 7,
        "deep_sleep": 100, "rem_sleep": 115, "light_sleep": 250, "awake_time": 0,
        "hrv": 58, "resting_heart_rate": 54,
        "factors": {"screens": True, "stress": True, "exercise": True},
    },
}

# Shown when a device has not reported the metric
DISPLAY_DEFAULTS = {
    "zones": {"easy": 25, "fat_burn": 40, "cardio": 25, "peak": 10},
    "stages": {"deep": 1.5, "light": 4, "rem": 1.5, "awake": 0.5},
    "breathing_rate": 14,
    "snoring": 10,
    "hydration": 65,
    "stress_level": 42,
    "blood_oxygen": 98,
}

_FACTOR_KEYS = ("alcohol", "caffeine", "screens", "stress", "exercise", "late_meal", "noise", "temperature")


def fetch_device_sleep(device_type: str, today: date) -> list:
    """Sleep entries the device reports for last night. Only oura and whoop are stubbed."""
    sample = SAMPLE_SLEEP.get(device_type)
    if not sample:
        return []
    entry = dict(sample)
    entry["factors"] = {key: sample["factors"].get(key, False) for key in _FACTOR_KEYS}
    entry["date"] = (today - timedelta(days=1)).isoformat()
    entry["device_source"] = device_type
    return [entry]


def activity_view(row: dict = None) -> dict:
    """Latest activity with the display defaults filled in; a zeroed record without data."""
    row = row or {}
    heart_rate = row.get("heart_rate") or {}
    sleep = row.get("sleep") or {}
    return {
        "date": row.get("date"),
        "device_id": row.get("device_id"),
        "steps": row.get("steps") or 0,
        "calories_burned": row.get("calories_burned") or 0,
        "active_minutes": row.get("active_minutes") or 0,
        "heart_rate": {
            "current": heart_rate.get("average") or 0,
            "resting": heart_rate.get("resting") or 0,
            "max": heart_rate.get("max") or 0,
            "variability": heart_rate.get("variability") or 0,
            "zones": heart_rate.get("zones") or dict(DISPLAY_DEFAULTS["zones"]),
        },
        "sleep": {
            "duration": sleep.get("duration") or 0,
            "quality": sleep.get("score") or 0,
            "stages": sleep.get("stages") or dict(DISPLAY_DEFAULTS["stages"]),
            "breathing_rate": sleep.get("breathing_rate") or DISPLAY_DEFAULTS["breathing_rate"],
            "snoring": sleep.get("snoring") or DISPLAY_DEFAULTS["snoring"],
        },
        "hydration": row.get("hydration") or DISPLAY_DEFAULTS["hydration"],
        "stress": row.get("stress_level") or DISPLAY_DEFAULTS["stress_level"],
        "blood_oxygen": row.get("blood_oxygen") or DISPLAY_DEFAULTS["blood_oxygen"],
        "last_updated": row.get("created_at"),
    }


class WearableService:
    """Service for connected wearables and their data."""

    def _device_to_dict(self, d: ConnectedWearableORM) -> dict:
        # Tokens stay server side
        return {
            "id": d.id,
            "device_id": d.device_id,
            "device_name": d.device_name,
            "device_type": d.device_type,
            "status": d.status,
            "is_connected": d.status == "active",
            "token_expires_at": d.token_expires_at,
            "last_sync": d.last_sync,
            "battery_level": d.battery_level,
            "settings": load_json(d.settings_json, DEFAULT_SETTINGS),
            "created_at": d.created_at,
            "updated_at": d.updated_at
        }

    def _data_to_dict(self, r: WearableDataORM) -> dict:
        return {
            "id": r.id,
            "date": r.date,
            "device_id": r.device_id,
            "steps": r.steps,
            "calories_burned": r.calories_burned,
            "active_minutes": r.active_minutes,
            "heart_rate": load_json(r.heart_rate_json),
            "sleep": load_json(r.sleep_json),
            "stress_level": r.stress_level,
            "blood_oxygen": r.blood_oxygen,
            "hydration": r.hydration,
            "created_at": r.created_at
        }

    def _get_owned(self, db, connection_id: str, user_id: str) -> ConnectedWearableORM:
        device = db.query(ConnectedWearableORM).filter(ConnectedWearableORM.id == connection_id).first()
        if not device:
            raise HTTPException(status_code=404, detail="Device not found")
        if device.user_id != user_id:
            raise HTTPException(status_code=403, detail="Not your device")
        return device

    # --- DEVICES ---

    def list_devices(self, user_id: str) -> list:
        db = get_db_session()
        try:
            devices = db.query(ConnectedWearableORM).filter(
                ConnectedWearableORM.user_id == user_id
            ).order_by(ConnectedWearableORM.created_at.desc()).all()
            return [self._device_to_dict(d) for d in devices]
        finally:
            db.close()

    def connect_device(self, user_id: str, payload: dict) -> dict:
        """Store the OAuth tokens for a device; reconnecting a known device_id reactivates it."""
        device_type = payload["device_type"]
        device_id = payload.get("device_id") or f"{device_type}-{uuid.uuid4().hex[:8]}"
        expires_at = None
        if payload.get("expires_in"):
            expires_at = (datetime.utcnow() + timedelta(seconds=payload["expires_in"])).isoformat()

        db = get_db_session()
        try:
            device = db.query(ConnectedWearableORM).filter(
                ConnectedWearableORM.user_id == user_id,
                ConnectedWearableORM.device_id == device_id
            ).first()
            if not device:
                device = ConnectedWearableORM(
                    id=str(uuid.uuid4()),
                    user_id=user_id,
                    device_id=device_id,
                    device_type=device_type,
                    settings_json=json.dumps(DEFAULT_SETTINGS)
                )
                db.add(device)

            device.device_name = payload.get("device_name") or DEVICE_NAMES[device_type]
            device.status = "active"
            device.auth_token = payload["auth_token"]
            device.refresh_token = payload.get("refresh_token")
            device.token_expires_at = expires_at
            if payload.get("battery_level") is not None:
                device.battery_level = payload["battery_level"]
            device.updated_at = now_iso()

            db.commit()
            db.refresh(device)
            logger.info(f"Connected {device_type} device {device_id} for {user_id}")
            return self._device_to_dict(device)
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to connect {device_type} for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to connect device: {str(e)}")
        finally:
            db.close()

    def disconnect_device(self, user_id: str, connection_id: str) -> dict:
        db = get_db_session()
        try:
            device = self._get_owned(db, connection_id, user_id)
            device.status = "disconnected"
            device.auth_token = None
            device.refresh_token = None
            device.token_expires_at = None
            device.updated_at = now_iso()
            db.commit()
            db.refresh(device)
            logger.info(f"Disconnected device {device.device_id} for {user_id}")
            return self._device_to_dict(device)
        finally:
            db.close()

    def sync_device(self, user_id: str, connection_id: str, today: date = None) -> dict:
        db = get_db_session()
        try:
            device = self._get_owned(db, connection_id, user_id)
            if device.status != "active":
                raise HTTPException(status_code=400, detail="Device is not connected")
            device_type = device.device_type
        finally:
            db.close()

        today = today or date.today()
        saved = []
        for entry in fetch_device_sleep(device_type, today):
            # Same night from the same device maps to the same id, so re-syncing updates in place
            entry["id"] = str(uuid.uuid5(uuid.NAMESPACE_URL, f"{user_id}/{device_type}/{entry['date']}"))
            saved.append(sleep_service.save_entry(user_id, entry, keep_id=True))

        db = get_db_session()
        try:
            device = self._get_owned(db, connection_id, user_id)
            device.last_sync = now_iso()
            device.updated_at = device.last_sync
            db.commit()
            db.refresh(device)
            logger.info(f"Synced {len(saved)} sleep entries from {device_type} for {user_id}")
            return {"device": self._device_to_dict(device), "synced_entries": len(saved), "entries": saved}
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to update sync time for {connection_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to sync device: {str(e)}")
        finally:
            db.close()

    # --- ACTIVITY DATA ---

    def record_activity(self, user_id: str, payload: dict) -> dict:
        db = get_db_session()
        try:
            row = WearableDataORM(
                id=str(uuid.uuid4()),
                user_id=user_id,
                date=to_iso(payload.get("date")) or date.today().isoformat(),
                device_id=payload.get("device_id"),
                steps=payload.get("steps", 0),
                calories_burned=payload.get("calories_burned", 0),
                active_minutes=payload.get("active_minutes", 0),
                heart_rate_json=json.dumps(payload["heart_rate"]) if payload.get("heart_rate") else None,
                sleep_json=json.dumps(payload["sleep"]) if payload.get("sleep") else None,
                stress_level=payload.get("stress_level"),
                blood_oxygen=payload.get("blood_oxygen"),
                hydration=payload.get("hydration")
            )
            db.add(row)
            db.commit()
            db.refresh(row)
            return self._data_to_dict(row)
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to record activity for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to record activity: {str(e)}")
        finally:
            db.close()

    def get_activity(self, user_id: str) -> dict:
        db = get_db_session()
        try:
            row = db.query(WearableDataORM).filter(
                WearableDataORM.user_id == user_id
            ).order_by(WearableDataORM.date.desc(), WearableDataORM.created_at.desc()).first()
            return activity_view(self._data_to_dict(row) if row else None)
        finally:
            db.close()

    def get_history(self, user_id: str, days: int = 7, today: date = None) -> list:
        today = today or date.today()
        start = (today - timedelta(days=days)).isoformat()
        db = get_db_session()
        try:
            rows = db.query(WearableDataORM).filter(
                WearableDataORM.user_id == user_id,
                WearableDataORM.date >= start
            ).order_by(WearableDataORM.date.asc()).all()
        finally:
            db.close()
        return [
            {
                "date": r.date,
                "steps": r.steps or 0,
                "calories": r.calories_burned or 0,
                "active_minutes": r.active_minutes or 0,
                "heart_rate": (load_json(r.heart_rate_json, {}) or {}).get("average") or 0,
                "stress": r.stress_level or 0,
                "blood_oxygen": r.blood_oxygen or 0
            }
            for r in rows
        ]


# Singleton instance
wearable_service = WearableService()

def get_wearable_service() -> WearableService:
    """Dependency injection helper."""
    return wearable_service
