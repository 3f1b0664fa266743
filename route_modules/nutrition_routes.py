"""
Nutrition Routes - food diary, stats, goals, water and the food catalog.
"""
from typing import Optional
from fastapi import APIRouter, Depends
from auth import get_current_user
from models import NutritionEntryCreate, NutritionEntryUpdate, NutritionGoalCreate, WaterEntryCreate
from models_orm import UserORM
from service_modules.nutrition_service import NutritionService, get_nutrition_service
from service_modules.food_service import FoodService, get_food_service

router = APIRouter()


# --- DIARY ---

@router.get("/api/nutrition/entries")
async def get_entries(
    date: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    meal_type: Optional[str] = None,
    service: NutritionService = Depends(get_nutrition_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_entries(current_user.id, date, start, end, meal_type)


@router.post("/api/nutrition/entries")
async def add_entry(
    entry: NutritionEntryCreate,
    service: NutritionService = Depends(get_nutrition_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.add_entry(current_user.id, entry.model_dump())


@router.put("/api/nutrition/entries/{entry_id}")
async def update_entry(
    entry_id: str,
    entry: NutritionEntryUpdate,
    service: NutritionService = Depends(get_nutrition_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.update_entry(entry_id, current_user.id, entry.model_dump(exclude_unset=True))


@router.delete("/api/nutrition/entries/{entry_id}")
async def delete_entry(
    entry_id: str,
    service: NutritionService = Depends(get_nutrition_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.delete_entry(entry_id, current_user.id)


# --- STATS ---

@router.get("/api/nutrition/daily")
async def get_daily_stats(
    date: str,
    service: NutritionService = Depends(get_nutrition_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_daily_stats(current_user.id, date)


@router.get("/api/nutrition/stats")
async def get_nutrition_stats(
    days: int = 7,
    service: NutritionService = Depends(get_nutrition_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_nutrition_stats(current_user.id, days)


# --- GOALS ---

@router.get("/api/nutrition/goals")
async def get_goals(
    service: NutritionService = Depends(get_nutrition_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_goals(current_user.id)


@router.post("/api/nutrition/goals")
async def set_goals(
    goals: NutritionGoalCreate,
    service: NutritionService = Depends(get_nutrition_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.set_goals(current_user.id, goals.model_dump())


# --- WATER ---

@router.get("/api/nutrition/water")
async def get_water(
    date: str,
    service: NutritionService = Depends(get_nutrition_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_water(current_user.id, date)


@router.post("/api/nutrition/water")
async def add_water(
    entry: WaterEntryCreate,
    service: NutritionService = Depends(get_nutrition_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.add_water(current_user.id, entry.model_dump())


@router.delete("/api/nutrition/water/{entry_id}")
async def delete_water(
    entry_id: str,
    service: NutritionService = Depends(get_nutrition_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.delete_water(entry_id, current_user.id)


# --- FOOD CATALOG ---

@router.get("/api/foods")
async def search_foods(
    q: Optional[str] = None,
    category: Optional[str] = None,
    region: Optional[str] = None,
    supermarket: Optional[str] = None,
    vegan: Optional[bool] = None,
    gluten_free: Optional[bool] = None,
    limit: int = 20,
    service: FoodService = Depends(get_food_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.search_foods(q, category, region, supermarket, vegan, gluten_free, limit)


@router.get("/api/foods/categories")
async def get_food_categories(
    service: FoodService = Depends(get_food_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_categories()


@router.get("/api/foods/{food_id}")
async def get_food(
    food_id: str,
    service: FoodService = Depends(get_food_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_food(food_id)
