"""
Training Routes - workout logs, 1RM calculator, fatigue metrics, deloads and wellness logs.
"""
from typing import Optional
from fastapi import APIRouter, Depends
from auth import get_current_user
from models import WorkoutLogCreate, OneRepMaxRequest, WellnessLogCreate, DeloadRecord
from models_orm import UserORM
from service_modules.workout_log_service import WorkoutLogService, get_workout_log_service
from service_modules.strength_service import StrengthService, get_strength_service
from service_modules.fatigue_service import FatigueService, get_fatigue_service

router = APIRouter()


# --- WORKOUT LOGS ---

@router.get("/api/workout-logs")
async def get_workout_logs(
    start: Optional[str] = None,
    end: Optional[str] = None,
    limit: int = 50,
    service: WorkoutLogService = Depends(get_workout_log_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_logs(current_user.id, start, end, limit)


@router.post("/api/workout-logs")
async def log_workout(
    payload: WorkoutLogCreate,
    service: WorkoutLogService = Depends(get_workout_log_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.log_workout(current_user.id, payload.model_dump())


@router.get("/api/workout-logs/progress")
async def get_progress(
    exercise: str,
    service: WorkoutLogService = Depends(get_workout_log_service),
    current_user: UserORM = Depends(get_current_user)
):
    """Best estimated 1RM and volume per session for one exercise."""
    return service.get_progress(current_user.id, exercise)


@router.delete("/api/workout-logs/{log_id}")
async def delete_workout_log(
    log_id: str,
    service: WorkoutLogService = Depends(get_workout_log_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.delete_log(log_id, current_user.id)


# --- STRENGTH ---

@router.post("/api/strength/one-rep-max")
async def one_rep_max(
    payload: OneRepMaxRequest,
    service: StrengthService = Depends(get_strength_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.rep_max_table(payload.weight, payload.reps, payload.formula)


# --- FATIGUE & DELOAD ---

@router.get("/api/training/fatigue")
async def get_fatigue(
    service: FatigueService = Depends(get_fatigue_service),
    current_user: UserORM = Depends(get_current_user)
):
    """Fatigue metrics over the last four weeks, null without recent workouts."""
    return service.calculate_fatigue_metrics(current_user.id)


@router.get("/api/training/deload")
async def get_deload_recommendation(
    service: FatigueService = Depends(get_fatigue_service),
    current_user: UserORM = Depends(get_current_user)
):
    recommendation = service.generate_deload_recommendation(current_user.id)
    return recommendation or {"is_recommended": False}


@router.post("/api/training/deload")
async def record_deload(
    payload: DeloadRecord,
    service: FatigueService = Depends(get_fatigue_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.record_deload(current_user.id, payload.model_dump())


@router.post("/api/wellness/logs")
async def log_wellness(
    payload: WellnessLogCreate,
    service: FatigueService = Depends(get_fatigue_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.log_wellness(current_user.id, payload.model_dump())
