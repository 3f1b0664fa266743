"""
Fatigue Service - fatigue metrics over recent training and the deload recommendation built on them.

The scoring is a set of weighted averages and thresholds:

* per muscle group, fatigue mixes average volume (40%), weekly frequency (30%)
  and session RPE (30%);
* performance decline compares the latest week's volume with the mean of
  the previous weeks;
* wellness logs (sleep, stress, soreness, readiness) feed the volume and
  intensity tolerances that pick the deload type.
"""
import math
from .base import (
    HTTPException, uuid, logging, datetime, timedelta,
    get_db_session, DeloadHistoryORM, WellnessLogORM, to_iso
)
from .workout_log_service import workout_log_service, exercise_volume

logger = logging.getLogger("fitness_app")

LOOKBACK_DAYS = 28
WELLNESS_WINDOW = 7
DEFAULT_WEEKS_SINCE_DELOAD = 12

WELLNESS_DEFAULTS = {
    "sleep_quality": 70.0,
    "stress_level": 50.0,
    "soreness": 50.0,
    "readiness": 70.0,
}

# volume / intensity / frequency reduction in %
REDUCTIONS = {
    "volume": (50, 0, 0),
    "intensity": (0, 30, 0),
    "frequency": (0, 0, 30),
    "complete": (70, 50, 30),
    "active_recovery": (50, 30, 0),
}

URGENCY_MULTIPLIER = {"low": 1, "moderate": 1, "high": 1.5, "critical": 2}

TYPE_GUIDANCE = {
    "volume": [
        "Deload type: volume reduction",
        "- Cut total volume by 40-50%",
        "- Keep intensity (load) about the same",
        "- Reduce the number of sets per exercise",
    ],
    "intensity": [
        "Deload type: intensity reduction",
        "- Reduce intensity (load) by 20-30%",
        "- Keep volume about the same",
        "- Focus on technique and mind-muscle connection",
    ],
    "frequency": [
        "Deload type: frequency reduction",
        "- Reduce the number of weekly sessions",
        "- Keep intensity and volume per session",
        "- Prioritise rest and recovery",
    ],
    "complete": [
        "Deload type: complete rest",
        "- Significantly reduce both volume and intensity",
        "- Consider a few days of complete rest",
        "- Focus on recovery, nutrition and sleep",
    ],
    "active_recovery": [
        "Deload type: active recovery",
        "- Replace some workouts with low-intensity activities",
        "- Add more mobility and flexibility work",
        "- Keep moving without adding fatigue",
    ],
}

SUGGESTED_ACTIVITIES = {
    "volume": [
        "Reduce the number of sets per exercise",
        "Keep intensity (load) about the same",
        "Drop isolation sets",
    ],
    "intensity": [
        "Reduce the load on every exercise",
        "Focus on perfect technique",
        "Increase time under tension",
    ],
    "frequency": [
        "Reduce the number of weekly sessions",
        "Add rest days between workouts",
        "Combine muscle groups to train less often",
    ],
    "complete": [
        "Take 2-3 days of complete rest",
        "Keep the remaining sessions very light",
        "Prioritise sleep and nutrition",
    ],
    "active_recovery": [
        "Replace workouts with walking, swimming or easy cycling",
        "Do mobility and flexibility sessions",
        "Practise relaxation and recovery techniques",
    ],
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _parse_datetime(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return parsed.replace(tzinfo=None)


def _mean(values: list, default: float) -> float:
    return sum(values) / len(values) if values else default


def muscle_group_fatigue(sessions: list) -> dict:
    """Fatigue score 0-100 for every muscle group touched by the sessions."""
    sessions_by_group = {}
    for session in sessions:
        groups = set()
        for ex in session.get("exercises") or []:
            groups.update(ex.get("muscle_groups") or [])
        for group in groups:
            sessions_by_group.setdefault(group, []).append(session)

    fatigue = {}
    for group, group_sessions in sessions_by_group.items():
        frequency = len(group_sessions)
        average_volume = sum(
            sum(exercise_volume(ex) for ex in s.get("exercises") or [] if group in (ex.get("muscle_groups") or []))
            for s in group_sessions
        ) / frequency
        average_rpe = sum(s.get("rpe") or 0 for s in group_sessions) / frequency

        volume_factor = min(average_volume / 5000, 1) * 40
        frequency_factor = min(frequency / 12, 1) * 30
        intensity_factor = (average_rpe / 10) * 30
        fatigue[group] = min(_round_half_up(volume_factor + frequency_factor + intensity_factor), 100)
    return fatigue


def performance_decline(sessions: list, now: datetime) -> float:
    """Percentage drop of the latest week's volume against the previous weeks' mean (0 on a gain)."""
    if len(sessions) < 4:
        return 0.0

    weekly = {}
    for session in sessions:
        weeks_ago = math.floor((now - _parse_datetime(session["date"])).total_seconds() / (7 * 24 * 3600))
        if 0 <= weeks_ago < 4:
            weekly[weeks_ago] = weekly.get(weeks_ago, 0) + sum(
                exercise_volume(ex) for ex in session.get("exercises") or []
            )

    weeks = sorted(weekly)
    if len(weeks) < 2:
        return 0.0

    current = weekly[weeks[0]]
    previous_avg = sum(weekly[w] for w in weeks[1:]) / (len(weeks) - 1)
    if previous_avg == 0:
        return 0.0

    change = (current - previous_avg) / previous_avg * 100
    return abs(change) if change < 0 else 0.0


def deload_necessary(overall: float, decline: float, weeks: int, readiness: float, soreness: float) -> bool:
    points = 0
    if overall > 70:
        points += 2
    if decline > 5:
        points += 3
    if weeks > 6:
        points += 1
    if readiness < 60:
        points += 1
    if soreness > 70:
        points += 1
    return points >= 4


def deload_urgency(overall: float, decline: float, weeks: int, readiness: float) -> str:
    points = 0
    if overall > 90:
        points += 4
    elif overall > 80:
        points += 3
    elif overall > 70:
        points += 2
    elif overall > 60:
        points += 1

    if decline > 15:
        points += 4
    elif decline > 10:
        points += 3
    elif decline > 5:
        points += 2
    elif decline > 2:
        points += 1

    if weeks > 12:
        points += 3
    elif weeks > 8:
        points += 2
    elif weeks > 6:
        points += 1

    if readiness < 40:
        points += 3
    elif readiness < 50:
        points += 2
    elif readiness < 60:
        points += 1

    if points >= 10:
        return "critical"
    if points >= 7:
        return "high"
    if points >= 4:
        return "moderate"
    return "low"


def deload_type(decline: float, rpe_average: float, volume_tolerance: float, intensity_tolerance: float) -> str:
    if volume_tolerance < 40 and intensity_tolerance > 60:
        return "volume"
    if intensity_tolerance < 40 and volume_tolerance > 60:
        return "intensity"
    # Checked before "frequency" so that very low tolerances still reach it
    if (volume_tolerance < 30 and intensity_tolerance < 30) or rpe_average > 8.5:
        return "complete"
    if volume_tolerance < 60 and intensity_tolerance < 60:
        return "frequency"
    if decline > 10 and volume_tolerance > 40 and intensity_tolerance > 40:
        return "active_recovery"
    return "volume"


def deload_duration(overall: float, urgency: str, kind: str) -> int:
    base = 5 if kind == "active_recovery" else 7
    adjustment = 0
    if overall > 90:
        adjustment = 3
    elif overall > 80:
        adjustment = 2
    elif overall > 70:
        adjustment = 1
    return _round_half_up(base * URGENCY_MULTIPLIER[urgency] + adjustment)


def deload_notes(group_fatigue: dict, decline: float, weeks: int, kind: str) -> str:
    top = sorted(group_fatigue.items(), key=lambda item: item[1], reverse=True)[:3]
    lines = [
        "Deload recommendation based on:",
        f"- Most fatigued muscle groups: {', '.join(f'{g} ({v}%)' for g, v in top)}",
        f"- Performance decline: {decline:.1f}%",
        f"- Weeks since last deload: {weeks}",
        "",
    ]
    lines.extend(TYPE_GUIDANCE[kind])
    return "\n".join(lines)


def compute_fatigue_metrics(sessions: list, last_deload_date: str = None, wellness: list = None,
                            now: datetime = None):
    """Build the fatigue metrics dict from plain session / wellness dicts. None without sessions."""
    if not sessions:
        return None
    now = now or datetime.utcnow()
    wellness = wellness or []

    if last_deload_date:
        weeks_since = math.floor((now - _parse_datetime(last_deload_date)).total_seconds() / (7 * 24 * 3600))
    else:
        weeks_since = DEFAULT_WEEKS_SINCE_DELOAD

    group_fatigue = muscle_group_fatigue(sessions)
    overall = _mean(list(group_fatigue.values()), 0.0)
    decline = performance_decline(sessions, now)

    averages = {}
    for key, default in WELLNESS_DEFAULTS.items():
        averages[key] = _mean([row.get(key) or 0 for row in wellness], default) if wellness else default

    rpe_average = sum(s.get("rpe") or 0 for s in sessions) / len(sessions)
    rir_average = sum(s.get("rir") if s.get("rir") is not None else 2 for s in sessions) / len(sessions)

    volume_tolerance = 100 - overall * 0.5 - averages["soreness"] * 0.3 - averages["stress_level"] * 0.2
    intensity_tolerance = 100 - overall * 0.4 - averages["sleep_quality"] * 0.3 - averages["readiness"] * 0.3

    urgency = deload_urgency(overall, decline, weeks_since, averages["readiness"])
    kind = deload_type(decline, rpe_average, volume_tolerance, intensity_tolerance)
    duration = deload_duration(overall, urgency, kind)

    return {
        "overall_fatigue": overall,
        "muscle_group_fatigue": group_fatigue,
        "performance_decline": decline,
        "recovery_quality": 100 - overall,
        "sleep_quality": averages["sleep_quality"],
        "stress_level": averages["stress_level"],
        "soreness": averages["soreness"],
        "readiness": averages["readiness"],
        "rpe_average": rpe_average,
        "rir_average": rir_average,
        "volume_tolerance": volume_tolerance,
        "intensity_tolerance": intensity_tolerance,
        "last_deload_date": last_deload_date,
        "weeks_since_last_deload": weeks_since,
        "recommended_deload": deload_necessary(overall, decline, weeks_since, averages["readiness"],
                                               averages["soreness"]),
        "deload_urgency": urgency,
        "deload_type": kind,
        "deload_duration": duration,
        "notes": deload_notes(group_fatigue, decline, weeks_since, kind),
    }


def build_recommendation(metrics: dict):
    """Turn fatigue metrics into a deload recommendation, or None when no deload is needed."""
    if not metrics or not metrics["recommended_deload"]:
        return None

    kind = metrics["deload_type"]
    volume_reduction, intensity_reduction, frequency_reduction = REDUCTIONS[kind]

    reasoning = []
    if metrics["overall_fatigue"] > 70:
        reasoning.append(f"High overall fatigue ({metrics['overall_fatigue']:.1f}%)")
    if metrics["performance_decline"] > 5:
        reasoning.append(f"Performance decline ({metrics['performance_decline']:.1f}%)")
    if metrics["weeks_since_last_deload"] > 6:
        reasoning.append(f"{metrics['weeks_since_last_deload']} weeks since the last deload")
    if metrics["readiness"] < 60:
        reasoning.append(f"Low readiness ({metrics['readiness']:.1f}%)")
    if metrics["soreness"] > 70:
        reasoning.append(f"High muscle soreness ({metrics['soreness']:.1f}%)")

    return {
        "is_recommended": True,
        "urgency": metrics["deload_urgency"],
        "type": kind,
        "duration": metrics["deload_duration"],
        "volume_reduction": volume_reduction,
        "intensity_reduction": intensity_reduction,
        "frequency_reduction": frequency_reduction,
        "target_muscle_groups": [g for g, v in metrics["muscle_group_fatigue"].items() if v > 70],
        "reasoning": reasoning,
        "suggested_activities": list(SUGGESTED_ACTIVITIES[kind]),
        "expected_recovery_time": metrics["deload_duration"] + _round_half_up(metrics["overall_fatigue"] / 20),
        "expected_performance_improvement": _round_half_up(5 + metrics["performance_decline"] / 2),
        "notes": metrics["notes"],
    }


class FatigueService:
    """Loads training and wellness history and runs the fatigue scoring on it."""

    def _last_deload_date(self, db, user_id: str):
        row = db.query(DeloadHistoryORM).filter(
            DeloadHistoryORM.user_id == user_id
        ).order_by(DeloadHistoryORM.date.desc()).first()
        return row.date if row else None

    def _recent_wellness(self, db, user_id: str) -> list:
        rows = db.query(WellnessLogORM).filter(
            WellnessLogORM.user_id == user_id
        ).order_by(WellnessLogORM.date.desc()).limit(WELLNESS_WINDOW).all()
        return [
            {
                "sleep_quality": r.sleep_quality,
                "stress_level": r.stress_level,
                "soreness": r.soreness,
                "readiness": r.readiness,
            }
            for r in rows
        ]

    def calculate_fatigue_metrics(self, user_id: str, now: datetime = None):
        now = now or datetime.utcnow()
        since = (now - timedelta(days=LOOKBACK_DAYS)).isoformat()
        sessions = workout_log_service.get_logs_since(user_id, since)
        if not sessions:
            logger.debug(f"No recent workouts for {user_id}, skipping fatigue metrics")
            return None

        db = get_db_session()
        try:
            last_deload = self._last_deload_date(db, user_id)
            wellness = self._recent_wellness(db, user_id)
        finally:
            db.close()

        metrics = compute_fatigue_metrics(sessions, last_deload, wellness, now)
        metrics["user_id"] = user_id
        return metrics

    def generate_deload_recommendation(self, user_id: str, now: datetime = None):
        return build_recommendation(self.calculate_fatigue_metrics(user_id, now))

    def record_deload(self, user_id: str, payload: dict) -> dict:
        db = get_db_session()
        try:
            row = DeloadHistoryORM(
                id=str(uuid.uuid4()),
                user_id=user_id,
                date=to_iso(payload.get("date")) or datetime.utcnow().date().isoformat(),
                deload_type=payload.get("deload_type"),
                duration=payload.get("duration"),
                notes=payload.get("notes")
            )
            db.add(row)
            db.commit()
            logger.info(f"Recorded {row.deload_type or 'unspecified'} deload for {user_id} on {row.date}")
            return {
                "id": row.id,
                "date": row.date,
                "deload_type": row.deload_type,
                "duration": row.duration,
                "notes": row.notes
            }
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to record deload for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to record deload: {str(e)}")
        finally:
            db.close()

    def log_wellness(self, user_id: str, payload: dict) -> dict:
        db = get_db_session()
        try:
            row = WellnessLogORM(
                id=str(uuid.uuid4()),
                user_id=user_id,
                date=to_iso(payload.get("date")) or datetime.utcnow().date().isoformat(),
                sleep_quality=payload.get("sleep_quality"),
                stress_level=payload.get("stress_level"),
                soreness=payload.get("soreness"),
                readiness=payload.get("readiness"),
                notes=payload.get("notes")
            )
            db.add(row)
            db.commit()
            return {
                "id": row.id,
                "date": row.date,
                "sleep_quality": row.sleep_quality,
                "stress_level": row.stress_level,
                "soreness": row.soreness,
                "readiness": row.readiness,
                "notes": row.notes
            }
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to save wellness log for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to save wellness log: {str(e)}")
        finally:
            db.close()


# Singleton instance
fatigue_service = FatigueService()

def get_fatigue_service() -> FatigueService:
    """Dependency injection helper."""
    return fatigue_service
