"""
Routine Routes - workout routines, their days and templates.
"""
from fastapi import APIRouter, Depends
from auth import get_current_user
from models import WorkoutRoutine, WorkoutDay, WorkoutDayUpdate
from models_orm import UserORM
from service_modules.routine_service import RoutineService, get_routine_service

router = APIRouter()


@router.get("/api/routines")
async def get_routines(
    service: RoutineService = Depends(get_routine_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_user_routines(current_user.id)


@router.post("/api/routines")
async def save_routine(
    routine: WorkoutRoutine,
    service: RoutineService = Depends(get_routine_service),
    current_user: UserORM = Depends(get_current_user)
):
    """Create a routine, or update it when the id already exists."""
    return service.save_routine(routine.model_dump(), current_user.id)


# Declared before /{routine_id} so "templates" is not taken for an id
@router.get("/api/routines/templates")
async def get_templates(
    service: RoutineService = Depends(get_routine_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_templates()


@router.post("/api/routines/templates/{template_id}/use")
async def use_template(
    template_id: str,
    service: RoutineService = Depends(get_routine_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.create_from_template(template_id, current_user.id)


@router.get("/api/routines/{routine_id}")
async def get_routine(
    routine_id: str,
    service: RoutineService = Depends(get_routine_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_routine(routine_id, current_user.id)


@router.put("/api/routines/{routine_id}")
async def update_routine(
    routine_id: str,
    routine: WorkoutRoutine,
    service: RoutineService = Depends(get_routine_service),
    current_user: UserORM = Depends(get_current_user)
):
    data = routine.model_dump()
    data["id"] = routine_id
    return service.save_routine(data, current_user.id)


@router.delete("/api/routines/{routine_id}")
async def delete_routine(
    routine_id: str,
    service: RoutineService = Depends(get_routine_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.delete_routine(routine_id, current_user.id)


# --- DAYS ---

@router.post("/api/routines/{routine_id}/days")
async def add_day(
    routine_id: str,
    day: WorkoutDay,
    service: RoutineService = Depends(get_routine_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.add_day(routine_id, day.model_dump(), current_user.id)


@router.put("/api/routines/{routine_id}/days/{day_id}")
async def update_day(
    routine_id: str,
    day_id: str,
    day: WorkoutDayUpdate,
    service: RoutineService = Depends(get_routine_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.update_day(routine_id, day_id, day.model_dump(exclude_unset=True), current_user.id)


@router.delete("/api/routines/{routine_id}/days/{day_id}")
async def delete_day(
    routine_id: str,
    day_id: str,
    service: RoutineService = Depends(get_routine_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.delete_day(routine_id, day_id, current_user.id)
