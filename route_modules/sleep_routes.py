"""
Sleep Routes - sleep entries, goal, statistics and recommendations.
"""
from typing import Optional
from fastapi import APIRouter, Depends
from auth import get_current_user
from models import SleepEntryCreate, SleepGoalUpdate
from models_orm import UserORM
from service_modules.sleep_service import SleepService, get_sleep_service

router = APIRouter()


@router.get("/api/sleep/entries")
async def get_sleep_entries(
    start: Optional[str] = None,
    end: Optional[str] = None,
    limit: int = 30,
    offset: int = 0,
    service: SleepService = Depends(get_sleep_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_entries(current_user.id, start, end, limit, offset)


@router.post("/api/sleep/entries")
async def save_sleep_entry(
    entry: SleepEntryCreate,
    service: SleepService = Depends(get_sleep_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.save_entry(current_user.id, entry.model_dump())


@router.delete("/api/sleep/entries/{entry_id}")
async def delete_sleep_entry(
    entry_id: str,
    service: SleepService = Depends(get_sleep_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.delete_entry(entry_id, current_user.id)


@router.get("/api/sleep/goal")
async def get_sleep_goal(
    service: SleepService = Depends(get_sleep_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_goal(current_user.id)


@router.post("/api/sleep/goal")
async def save_sleep_goal(
    goal: SleepGoalUpdate,
    service: SleepService = Depends(get_sleep_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.save_goal(current_user.id, goal.model_dump())


@router.get("/api/sleep/stats")
async def get_sleep_stats(
    days: int = 30,
    service: SleepService = Depends(get_sleep_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_stats(current_user.id, days)


@router.get("/api/sleep/recommendations")
async def get_sleep_recommendations(
    category: Optional[str] = None,
    service: SleepService = Depends(get_sleep_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_recommendations(current_user.id, category)
