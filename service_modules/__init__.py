"""
Services package - one service class per feature area.

Each module exposes the class, a module-level singleton and a
`get_<name>_service` dependency helper for the route modules.
"""
from .base import *
from .auth_service import AuthService, auth_service, get_auth_service
from .exercise_service import ExerciseService, exercise_service, get_exercise_service
from .routine_service import RoutineService, routine_service, get_routine_service
from .workout_log_service import WorkoutLogService, workout_log_service, get_workout_log_service
from .strength_service import StrengthService, strength_service, get_strength_service
from .fatigue_service import FatigueService, fatigue_service, get_fatigue_service
from .nutrition_service import NutritionService, nutrition_service, get_nutrition_service
from .food_service import FoodService, food_service, get_food_service
from .meal_plan_service import MealPlanService, meal_plan_service, get_meal_plan_service
from .sleep_service import SleepService, sleep_service, get_sleep_service
from .recovery_service import RecoveryService, recovery_service, get_recovery_service
from .wearable_service import WearableService, wearable_service, get_wearable_service
from .insights_service import InsightsService, insights_service, get_insights_service
from .admin_service import AdminService, admin_service, get_admin_service

__all__ = [
    'AuthService', 'auth_service', 'get_auth_service',
    'ExerciseService', 'exercise_service', 'get_exercise_service',
    'RoutineService', 'routine_service', 'get_routine_service',
    'WorkoutLogService', 'workout_log_service', 'get_workout_log_service',
    'StrengthService', 'strength_service', 'get_strength_service',
    'FatigueService', 'fatigue_service', 'get_fatigue_service',
    'NutritionService', 'nutrition_service', 'get_nutrition_service',
    'FoodService', 'food_service', 'get_food_service',
    'MealPlanService', 'meal_plan_service', 'get_meal_plan_service',
    'SleepService', 'sleep_service', 'get_sleep_service',
    'RecoveryService', 'recovery_service', 'get_recovery_service',
    'WearableService', 'wearable_service', 'get_wearable_service',
    'InsightsService', 'insights_service', 'get_insights_service',
    'AdminService', 'admin_service', 'get_admin_service',
]
