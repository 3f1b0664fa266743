"""
Meal Plan Routes - weekly plan generation and shopping list.
"""
from fastapi import APIRouter, Depends
from auth import get_current_user
from models import MealPlanPreferences, ShoppingItemUpdate
from models_orm import UserORM
from service_modules.meal_plan_service import MealPlanService, get_meal_plan_service

router = APIRouter()


@router.post("/api/meal-plans/generate")
async def generate_meal_plan(
    preferences: MealPlanPreferences,
    service: MealPlanService = Depends(get_meal_plan_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.generate_meal_plan(current_user.id, preferences.model_dump())


@router.get("/api/meal-plans")
async def list_meal_plans(
    service: MealPlanService = Depends(get_meal_plan_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.list_plans(current_user.id)


@router.get("/api/meal-plans/current")
async def get_current_meal_plan(
    service: MealPlanService = Depends(get_meal_plan_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_current_plan(current_user.id)


@router.get("/api/meal-plans/{plan_id}")
async def get_meal_plan(
    plan_id: str,
    service: MealPlanService = Depends(get_meal_plan_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_plan(plan_id, current_user.id)


@router.delete("/api/meal-plans/{plan_id}")
async def delete_meal_plan(
    plan_id: str,
    service: MealPlanService = Depends(get_meal_plan_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.delete_plan(plan_id, current_user.id)


@router.put("/api/meal-plans/{plan_id}/shopping/{index}")
async def toggle_shopping_item(
    plan_id: str,
    index: int,
    update: ShoppingItemUpdate,
    service: MealPlanService = Depends(get_meal_plan_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.toggle_shopping_item(plan_id, index, update.checked, current_user.id)
