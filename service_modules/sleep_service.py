"""
Sleep Service - sleep entries, goals, statistics and rule-based recommendations.
"""
import json
import math
from .base import (
    HTTPException, uuid, logging, date, timedelta,
    get_db_session, SleepEntryORM, SleepGoalORM, load_json, now_iso, to_iso
)
from data import GENERAL_SLEEP_RECOMMENDATIONS

logger = logging.getLogger("fitness_app")

TARGET_DURATION = 480  # minutes
MAX_STD_DEV = 120  # minutes; a spread this wide scores 0 consistency

DEFAULT_GOAL = {
    "target_duration": 480,
    "target_bedtime": "23:00",
    "target_wake_time": "07:00",
    "target_deep_sleep_percentage": 20,
    "target_rem_sleep_percentage": 25,
    "target_hrv": None,
}

PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}

_ENTRY_FIELDS = (
    "date", "start_time", "end_time", "duration", "quality",
    "deep_sleep", "rem_sleep", "light_sleep", "awake_time",
    "hrv", "resting_heart_rate", "body_temperature", "notes", "device_source"
)


def time_to_minutes(value: str) -> int:
    """'HH:MM' to minutes after midnight. Anything unparsable counts as 0."""
    if not value or not isinstance(value, str):
        logger.warning(f"time_to_minutes: invalid time {value!r}")
        return 0
    parts = value.split(":")
    if len(parts) != 2:
        logger.warning(f"time_to_minutes: invalid format {value!r}")
        return 0
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError:
        logger.warning(f"time_to_minutes: non-numeric time {value!r}")
        return 0
    return hours * 60 + minutes


def std_dev(values: list) -> float:
    n = len(values)
    if n == 0:
        return 0.0
    mean = sum(values) / n
    return math.sqrt(sum((v - mean) ** 2 for v in values) / n)


def sleep_debt(entries: list) -> int:
    """Minutes short of the target over the last seven entries (entries oldest first)."""
    return sum(max(TARGET_DURATION - e["duration"], 0) for e in entries[-7:])


def consistency_score(entries: list) -> float:
    if len(entries) < 3:
        return 0.0
    bed = std_dev([time_to_minutes(e["start_time"]) for e in entries])
    wake = std_dev([time_to_minutes(e["end_time"]) for e in entries])
    bed_score = max(0.0, 100 - bed / MAX_STD_DEV * 100)
    wake_score = max(0.0, 100 - wake / MAX_STD_DEV * 100)
    return (bed_score + wake_score) / 2


def _optional_mean(entries: list, key: str):
    values = [e[key] for e in entries if e.get(key) is not None]
    return sum(values) / len(values) if values else None


def compute_sleep_stats(entries: list) -> dict:
    """Statistics over entries sorted oldest first."""
    if not entries:
        return {
            "average_duration": 0,
            "average_quality": 0,
            "trends": {"duration": [], "quality": []},
            "dates": []
        }

    def series(key):
        values = [e[key] for e in entries if e.get(key) is not None]
        return values or None

    return {
        "average_duration": sum(e["duration"] for e in entries) / len(entries),
        "average_quality": sum(e["quality"] for e in entries) / len(entries),
        "average_deep_sleep": _optional_mean(entries, "deep_sleep"),
        "average_rem_sleep": _optional_mean(entries, "rem_sleep"),
        "average_light_sleep": _optional_mean(entries, "light_sleep"),
        "average_hrv": _optional_mean(entries, "hrv"),
        "average_resting_heart_rate": _optional_mean(entries, "resting_heart_rate"),
        "sleep_debt": sleep_debt(entries),
        "consistency_score": consistency_score(entries),
        "trends": {
            "duration": [e["duration"] for e in entries],
            "quality": [e["quality"] for e in entries],
            "deep_sleep": series("deep_sleep"),
            "rem_sleep": series("rem_sleep"),
            "hrv": series("hrv"),
        },
        "dates": [e["date"] for e in entries]
    }


def build_recommendations(stats: dict, latest: dict = None, category: str = None) -> list:
    recs = []
    if stats and stats.get("dates") and stats["average_duration"] < 420:
        recs.append({
            "id": "duration-1", "title": "Sleep longer",
            "description": "Your average sleep is below the recommended amount. Try going to bed 30 minutes earlier each night.",
            "priority": "high", "category": "duration"
        })
    if stats and stats.get("dates") and stats["average_quality"] < 6:
        recs.append({
            "id": "quality-1", "title": "Improve your sleep quality",
            "description": "Your sleep quality is low. Build a relaxing evening ritual and keep the bedroom at 18-20°C.",
            "priority": "high", "category": "quality"
        })
    if stats and stats.get("consistency_score") and stats["consistency_score"] < 70:
        recs.append({
            "id": "consistency-1", "title": "Keep a regular schedule",
            "description": "Your sleep schedule is irregular. Go to bed and get up at the same time every day, weekends included.",
            "priority": "medium", "category": "consistency"
        })

    factors = (latest or {}).get("factors") or {}
    if factors.get("alcohol"):
        recs.append({
            "id": "factors-1", "title": "Limit alcohol",
            "description": "Alcohol may help you fall asleep but clearly lowers sleep quality. Avoid it for at least 3 hours before bed.",
            "priority": "medium", "category": "habits"
        })
    if factors.get("caffeine"):
        recs.append({
            "id": "factors-2", "title": "Cut afternoon caffeine",
            "description": "Caffeine can stay in your system for up to 8 hours. Skip coffee, tea and energy drinks after noon.",
            "priority": "high", "category": "habits"
        })
    if factors.get("screens"):
        recs.append({
            "id": "factors-3", "title": "Limit screen time",
            "description": "Blue light from screens suppresses melatonin. Put away phones, tablets and computers at least 1 hour before bed.",
            "priority": "high", "category": "habits"
        })

    recs.extend(dict(r) for r in GENERAL_SLEEP_RECOMMENDATIONS)

    if stats and stats.get("average_hrv") and stats["average_hrv"] < 50:
        recs.append({
            "id": "hrv-1", "title": "Support your recovery",
            "description": "Your average HRV is low, which can point to stress or poor recovery. Try deep breathing or meditation before bed.",
            "priority": "high", "category": "recovery"
        })

    if category and category != "all":
        recs = [r for r in recs if r["category"] == category]
    return sorted(recs, key=lambda r: PRIORITY_ORDER[r["priority"]])


class SleepService:
    """Service for sleep tracking."""

    def _entry_to_dict(self, e: SleepEntryORM) -> dict:
        return {
            "id": e.id,
            "user_id": e.user_id,
            "date": e.date,
            "start_time": e.start_time,
            "end_time": e.end_time,
            "duration": e.duration,
            "quality": e.quality,
            "deep_sleep": e.deep_sleep,
            "rem_sleep": e.rem_sleep,
            "light_sleep": e.light_sleep,
            "awake_time": e.awake_time,
            "hrv": e.hrv,
            "resting_heart_rate": e.resting_heart_rate,
            "body_temperature": e.body_temperature,
            "factors": load_json(e.factors_json),
            "notes": e.notes,
            "device_source": e.device_source,
            "created_at": e.created_at,
            "updated_at": e.updated_at
        }

    def _goal_to_dict(self, g: SleepGoalORM) -> dict:
        return {
            "id": g.id,
            "user_id": g.user_id,
            "target_duration": g.target_duration,
            "target_bedtime": g.target_bedtime,
            "target_wake_time": g.target_wake_time,
            "target_deep_sleep_percentage": g.target_deep_sleep_percentage,
            "target_rem_sleep_percentage": g.target_rem_sleep_percentage,
            "target_hrv": g.target_hrv,
            "is_active": g.is_active,
            "created_at": g.created_at,
            "updated_at": g.updated_at
        }

    # --- ENTRIES ---

    def get_entries(self, user_id: str, start: str = None, end: str = None, limit: int = 30,
                    offset: int = 0, ascending: bool = False) -> list:
        db = get_db_session()
        try:
            query = db.query(SleepEntryORM).filter(SleepEntryORM.user_id == user_id)
            if start:
                query = query.filter(SleepEntryORM.date >= start)
            if end:
                query = query.filter(SleepEntryORM.date <= end)
            order = SleepEntryORM.date.asc() if ascending else SleepEntryORM.date.desc()
            query = query.order_by(order).offset(offset)
            if limit:
                query = query.limit(limit)
            return [self._entry_to_dict(e) for e in query.all()]
        finally:
            db.close()

    def save_entry(self, user_id: str, entry: dict, keep_id: bool = False) -> dict:
        """Insert, or update when an entry with this id already exists for the user.

        New rows get a server-generated id unless `keep_id` is set (device sync).
        """
        db = get_db_session()
        try:
            existing = None
            if entry.get("id"):
                existing = db.query(SleepEntryORM).filter(SleepEntryORM.id == entry["id"]).first()
                if existing and existing.user_id != user_id:
                    raise HTTPException(status_code=403, detail="Not your sleep entry")

            new_id = entry["id"] if keep_id and entry.get("id") else str(uuid.uuid4())
            row = existing or SleepEntryORM(id=new_id, user_id=user_id)
            for field in _ENTRY_FIELDS:
                if field in entry:
                    setattr(row, field, to_iso(entry[field]))
            if "factors" in entry:
                row.factors_json = json.dumps(entry["factors"]) if entry["factors"] is not None else None
            row.device_source = row.device_source or "manual"
            row.updated_at = now_iso()

            if not existing:
                db.add(row)
            db.commit()
            db.refresh(row)
            return self._entry_to_dict(row)
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to save sleep entry for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to save sleep entry: {str(e)}")
        finally:
            db.close()

    def delete_entry(self, entry_id: str, user_id: str) -> dict:
        db = get_db_session()
        try:
            row = db.query(SleepEntryORM).filter(SleepEntryORM.id == entry_id).first()
            if not row:
                raise HTTPException(status_code=404, detail="Sleep entry not found")
            if row.user_id != user_id:
                raise HTTPException(status_code=403, detail="Not your sleep entry")
            db.delete(row)
            db.commit()
            return {"status": "success", "message": "Sleep entry deleted"}
        finally:
            db.close()

    # --- GOALS ---

    def get_goal(self, user_id: str) -> dict:
        db = get_db_session()
        try:
            goal = db.query(SleepGoalORM).filter(
                SleepGoalORM.user_id == user_id,
                SleepGoalORM.is_active == True
            ).first()
            if goal:
                return self._goal_to_dict(goal)
        finally:
            db.close()
        return self.save_goal(user_id, DEFAULT_GOAL)

    def save_goal(self, user_id: str, payload: dict) -> dict:
        db = get_db_session()
        try:
            goal = db.query(SleepGoalORM).filter(
                SleepGoalORM.user_id == user_id,
                SleepGoalORM.is_active == True
            ).first()
            if not goal:
                goal = SleepGoalORM(id=str(uuid.uuid4()), user_id=user_id, is_active=True)
                db.add(goal)
            for key in DEFAULT_GOAL:
                if key in payload:
                    setattr(goal, key, payload[key])
            goal.updated_at = now_iso()
            db.commit()
            db.refresh(goal)
            return self._goal_to_dict(goal)
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to save sleep goal for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to save sleep goal: {str(e)}")
        finally:
            db.close()

    # --- STATS & RECOMMENDATIONS ---

    def get_stats(self, user_id: str, days: int = 30, today: date = None) -> dict:
        today = today or date.today()
        entries = self.get_entries(
            user_id,
            start=(today - timedelta(days=days)).isoformat(),
            end=today.isoformat(),
            limit=None,
            ascending=True
        )
        return compute_sleep_stats(entries)

    def get_recommendations(self, user_id: str, category: str = None) -> list:
        stats = self.get_stats(user_id)
        latest = self.get_entries(user_id, limit=1)
        return build_recommendations(stats, latest[0] if latest else None, category)


# Singleton instance
sleep_service = SleepService()

def get_sleep_service() -> SleepService:
    """Dependency injection helper."""
    return sleep_service
