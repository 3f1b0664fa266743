"""
Exercise Routes - exercise library browsing and admin management.
"""
from typing import Optional
from fastapi import APIRouter, Depends
from auth import get_current_user, require_admin
from models import ExerciseCreate, ExerciseUpdate
from models_orm import UserORM
from service_modules.exercise_service import ExerciseService, get_exercise_service

router = APIRouter()


@router.get("/api/exercises")
async def list_exercises(
    search: Optional[str] = None,
    muscle_group: Optional[str] = None,
    difficulty: Optional[str] = None,
    equipment: Optional[str] = None,
    sort: str = "name",
    service: ExerciseService = Depends(get_exercise_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.list_exercises(search, muscle_group, difficulty, equipment, sort)


@router.get("/api/exercises/filters")
async def get_exercise_filters(
    service: ExerciseService = Depends(get_exercise_service),
    current_user: UserORM = Depends(get_current_user)
):
    """Values for the filter dropdowns."""
    return service.get_filters()


@router.get("/api/exercises/{exercise_id}")
async def get_exercise(
    exercise_id: str,
    service: ExerciseService = Depends(get_exercise_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_exercise(exercise_id)


# --- ADMIN ---

@router.post("/api/admin/exercises")
async def create_exercise(
    exercise: ExerciseCreate,
    service: ExerciseService = Depends(get_exercise_service),
    current_user: UserORM = Depends(get_current_user)
):
    require_admin(current_user)
    return service.create_exercise(exercise.model_dump())


@router.put("/api/admin/exercises/{exercise_id}")
async def update_exercise(
    exercise_id: str,
    exercise: ExerciseUpdate,
    service: ExerciseService = Depends(get_exercise_service),
    current_user: UserORM = Depends(get_current_user)
):
    require_admin(current_user)
    return service.update_exercise(exercise_id, exercise.model_dump(exclude_unset=True))


@router.delete("/api/admin/exercises/{exercise_id}")
async def delete_exercise(
    exercise_id: str,
    service: ExerciseService = Depends(get_exercise_service),
    current_user: UserORM = Depends(get_current_user)
):
    require_admin(current_user)
    return service.delete_exercise(exercise_id)
