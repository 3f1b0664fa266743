"""
Routes package - organized API routes.

This package provides modular route definitions.
Import the combined router for use in main.py.
"""
from fastapi import APIRouter

from .auth_routes import router as auth_router
from .exercise_routes import router as exercise_router
from .routine_routes import router as routine_router
from .training_routes import router as training_router
from .nutrition_routes import router as nutrition_router
from .meal_plan_routes import router as meal_plan_router
from .sleep_routes import router as sleep_router
from .recovery_routes import router as recovery_router
from .wearable_routes import router as wearable_router
from .insights_routes import router as insights_router
from .admin_routes import router as admin_router

# Combined router that includes all sub-routers
combined_router = APIRouter()
combined_router.include_router(auth_router, tags=["auth"])
combined_router.include_router(exercise_router, tags=["exercises"])
combined_router.include_router(routine_router, tags=["routines"])
combined_router.include_router(training_router, tags=["training"])
combined_router.include_router(nutrition_router, tags=["nutrition"])
combined_router.include_router(meal_plan_router, tags=["meal-plans"])
combined_router.include_router(sleep_router, tags=["sleep"])
combined_router.include_router(recovery_router, tags=["recovery"])
combined_router.include_router(wearable_router, tags=["wearables"])
combined_router.include_router(insights_router, tags=["insights"])
combined_router.include_router(admin_router, tags=["admin"])

__all__ = [
    'combined_router', 'auth_router', 'exercise_router', 'routine_router', 'training_router',
    'nutrition_router', 'meal_plan_router', 'sleep_router', 'recovery_router',
    'wearable_router', 'insights_router', 'admin_router'
]
