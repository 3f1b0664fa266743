"""
Base service utilities and shared imports.
All services should import from here for common functionality.
"""
from fastapi import HTTPException
import uuid
import json
import logging
from datetime import date, datetime, timedelta, timezone

from database import get_db_session, Base, engine
from models_orm import (
    UserORM, ExerciseORM, WorkoutRoutineORM, WorkoutLogORM,
    DeloadHistoryORM, WellnessLogORM,
    NutritionEntryORM, NutritionGoalORM, WaterLogORM, MealPlanORM,
    SleepEntryORM, SleepGoalORM,
    RecoverySessionORM, UserAssessmentORM,
    ConnectedWearableORM, WearableDataORM
)

# Re-export for convenience
__all__ = [
    'HTTPException', 'uuid', 'json', 'logging', 'date', 'datetime', 'timedelta',
    'get_db_session', 'Base', 'engine',
    'UserORM', 'ExerciseORM', 'WorkoutRoutineORM', 'WorkoutLogORM',
    'DeloadHistoryORM', 'WellnessLogORM',
    'NutritionEntryORM', 'NutritionGoalORM', 'WaterLogORM', 'MealPlanORM',
    'SleepEntryORM', 'SleepGoalORM',
    'RecoverySessionORM', 'UserAssessmentORM',
    'ConnectedWearableORM', 'WearableDataORM',
    'load_json', 'now_iso', 'to_iso'
]

logger = logging.getLogger("fitness_app")


def load_json(raw, default=None):
    """Decode a *_json column, falling back to `default` on empty or corrupt values."""
    if not raw:
        return default
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        logger.warning(f"Could not decode stored JSON: {raw[:80]!r}")
        return default


def now_iso() -> str:
    return datetime.utcnow().isoformat()


def to_iso(value):
    """Store dates and datetimes as ISO strings; aware datetimes become naive UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value
