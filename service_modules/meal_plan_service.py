"""
Meal Plan Service - weekly meal plans drawn at random from the Spanish food catalog.
"""
import json
import random
from .base import (
    HTTPException, uuid, logging, date, timedelta,
    get_db_session, MealPlanORM, load_json
)
from data import SPANISH_FOODS, MEAL_CATEGORIES, WEEK_DAYS

logger = logging.getLogger("fitness_app")

MIN_AVAILABLE_FOODS = 14

_rng = random.Random()


def filter_foods(foods: list, preferences: dict) -> list:
    """Drop foods that clash with the diet type or match an allergy (name or category substring)."""
    diet = preferences.get("diet_type", "omnivore")
    allergies = [a.lower() for a in preferences.get("allergies") or [] if a]
    available = []
    for food in foods:
        if diet == "vegetarian" and not food["is_vegetarian"]:
            continue
        if diet == "vegan" and not food["is_vegan"]:
            continue
        if any(a in food["name"].lower() or a in food["category"].lower() for a in allergies):
            continue
        available.append(food)
    return available


def pick_food(foods: list, meal: str, used: set, rng: random.Random):
    """Random unused food from the meal's categories, else any unused food, else None."""
    categories = MEAL_CATEGORIES[meal]
    candidates = [f for f in foods if f["id"] not in used and f["category"] in categories]
    if not candidates:
        candidates = [f for f in foods if f["id"] not in used]
        if not candidates:
            return None
    food = rng.choice(candidates)
    used.add(food["id"])
    return food


def build_week(foods: list, rng: random.Random) -> dict:
    used = set()
    return {
        day: {meal: pick_food(foods, meal, used, rng) for meal in MEAL_CATEGORIES}
        for day in WEEK_DAYS
    }


def build_shopping_list(meals: dict) -> list:
    """One unchecked item per distinct food name, in first-seen order."""
    items = {}
    for day in WEEK_DAYS:
        for food in (meals.get(day) or {}).values():
            if not food:
                continue
            key = food["name"].strip().lower()
            if key not in items:
                items[key] = food["category"]
    return [
        {"ingredient": name[:1].upper() + name[1:], "quantity": "1 serving", "category": category, "checked": False}
        for name, category in items.items()
    ]


def week_start_for(today: date) -> date:
    return today - timedelta(days=today.weekday())


def plan_nutrition_summary(plan: dict) -> dict:
    """Per-day totals of the per-100 g nutrition values of the planned foods."""
    summary = {}
    for day in WEEK_DAYS:
        totals = {"calories": 0.0, "protein": 0.0, "carbs": 0.0, "fat": 0.0}
        for food in (plan["meals"].get(day) or {}).values():
            if not food:
                continue
            nutrition = food.get("nutrition_per_100g") or {}
            for key in totals:
                totals[key] += nutrition.get(key) or 0
        summary[day] = {k: round(v, 1) for k, v in totals.items()}
    return summary


class MealPlanService:
    """Service for weekly meal plans."""

    def _plan_to_dict(self, plan: MealPlanORM) -> dict:
        return {
            "id": plan.id,
            "user_id": plan.user_id,
            "name": plan.name,
            "week_start": plan.week_start,
            "meals": load_json(plan.meals_json, {}),
            "preferences": load_json(plan.preferences_json, {}),
            "shopping_list": load_json(plan.shopping_list_json, []),
            "created_at": plan.created_at
        }

    def _get_owned(self, db, plan_id: str, user_id: str) -> MealPlanORM:
        plan = db.query(MealPlanORM).filter(MealPlanORM.id == plan_id).first()
        if not plan:
            raise HTTPException(status_code=404, detail="Meal plan not found")
        if plan.user_id != user_id:
            raise HTTPException(status_code=403, detail="Not your meal plan")
        return plan

    def generate_meal_plan(self, user_id: str, preferences: dict, today: date = None,
                           rng: random.Random = None) -> dict:
        foods = filter_foods(SPANISH_FOODS, preferences)
        if len(foods) < MIN_AVAILABLE_FOODS:
            raise HTTPException(
                status_code=400,
                detail="Not enough foods match these preferences. Try relaxing the diet type or allergies."
            )

        meals = build_week(foods, rng or _rng)
        week_start = week_start_for(today or date.today()).isoformat()

        db = get_db_session()
        try:
            plan = MealPlanORM(
                id=str(uuid.uuid4()),
                user_id=user_id,
                name=f"Weekly Plan - {week_start}",
                week_start=week_start,
                meals_json=json.dumps(meals),
                preferences_json=json.dumps(preferences),
                shopping_list_json=json.dumps(build_shopping_list(meals))
            )
            db.add(plan)
            db.commit()
            db.refresh(plan)
            logger.info(f"Generated meal plan {plan.id} for {user_id} ({preferences.get('diet_type')})")
            result = self._plan_to_dict(plan)
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to save meal plan for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to save meal plan: {str(e)}")
        finally:
            db.close()

        result["nutrition_summary"] = plan_nutrition_summary(result)
        return result

    def get_current_plan(self, user_id: str) -> dict:
        db = get_db_session()
        try:
            plan = db.query(MealPlanORM).filter(
                MealPlanORM.user_id == user_id
            ).order_by(MealPlanORM.created_at.desc()).first()
            if not plan:
                raise HTTPException(status_code=404, detail="No meal plan yet")
            result = self._plan_to_dict(plan)
        finally:
            db.close()
        result["nutrition_summary"] = plan_nutrition_summary(result)
        return result

    def list_plans(self, user_id: str) -> list:
        db = get_db_session()
        try:
            plans = db.query(MealPlanORM).filter(
                MealPlanORM.user_id == user_id
            ).order_by(MealPlanORM.created_at.desc()).all()
            return [
                {"id": p.id, "name": p.name, "week_start": p.week_start, "created_at": p.created_at}
                for p in plans
            ]
        finally:
            db.close()

    def get_plan(self, plan_id: str, user_id: str) -> dict:
        db = get_db_session()
        try:
            result = self._plan_to_dict(self._get_owned(db, plan_id, user_id))
        finally:
            db.close()
        result["nutrition_summary"] = plan_nutrition_summary(result)
        return result

    def delete_plan(self, plan_id: str, user_id: str) -> dict:
        db = get_db_session()
        try:
            db.delete(self._get_owned(db, plan_id, user_id))
            db.commit()
            return {"status": "success", "message": "Meal plan deleted"}
        finally:
            db.close()

    def toggle_shopping_item(self, plan_id: str, index: int, checked: bool, user_id: str) -> dict:
        db = get_db_session()
        try:
            plan = self._get_owned(db, plan_id, user_id)
            items = load_json(plan.shopping_list_json, [])
            if index < 0 or index >= len(items):
                raise HTTPException(status_code=400, detail="Shopping list index out of range")
            items[index]["checked"] = checked
            plan.shopping_list_json = json.dumps(items)
            db.commit()
            return {"shopping_list": items}
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to update shopping list of plan {plan_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to update shopping list: {str(e)}")
        finally:
            db.close()


# Singleton instance
meal_plan_service = MealPlanService()

def get_meal_plan_service() -> MealPlanService:
    """Dependency injection helper."""
    return meal_plan_service
