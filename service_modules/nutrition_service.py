"""
Nutrition Service - food diary, daily totals, multi-day statistics, goals and water intake.
"""
from .base import (
    HTTPException, uuid, logging, date, datetime, timedelta,
    get_db_session, NutritionEntryORM, NutritionGoalORM, WaterLogORM, now_iso, to_iso
)

logger = logging.getLogger("fitness_app")

MEAL_TYPES = ["breakfast", "lunch", "dinner", "snack"]

# kcal per gram
KCAL_PER_GRAM = {"protein": 4, "carbs": 4, "fat": 9}


def _pct(part: float, total: float) -> float:
    return round(part / total * 100, 1) if total > 0 else 0.0


class NutritionService:
    """Service for the nutrition diary, goals and water log."""

    def _entry_to_dict(self, e: NutritionEntryORM) -> dict:
        return {
            "id": e.id,
            "date": e.date,
            "meal_type": e.meal_type,
            "food_name": e.food_name,
            "food_id": e.food_id,
            "quantity": e.quantity,
            "unit": e.unit,
            "calories": e.calories or 0,
            "protein": e.protein or 0,
            "carbs": e.carbs or 0,
            "fat": e.fat or 0,
            "created_at": e.created_at
        }

    def _goal_to_dict(self, g: NutritionGoalORM) -> dict:
        return {
            "id": g.id,
            "calories": g.calories,
            "protein": g.protein,
            "carbs": g.carbs,
            "fat": g.fat,
            "water_ml": g.water_ml,
            "is_active": g.is_active,
            "created_at": g.created_at,
            "updated_at": g.updated_at
        }

    # --- DIARY ---

    def get_entries(self, user_id: str, date_str: str = None, start: str = None, end: str = None,
                    meal_type: str = None) -> list:
        db = get_db_session()
        try:
            query = db.query(NutritionEntryORM).filter(NutritionEntryORM.user_id == user_id)
            if date_str:
                query = query.filter(NutritionEntryORM.date == date_str)
            if start:
                query = query.filter(NutritionEntryORM.date >= start)
            if end:
                query = query.filter(NutritionEntryORM.date <= end)
            if meal_type:
                query = query.filter(NutritionEntryORM.meal_type == meal_type)
            entries = query.order_by(NutritionEntryORM.date.desc(), NutritionEntryORM.created_at).all()
            return [self._entry_to_dict(e) for e in entries]
        finally:
            db.close()

    def add_entry(self, user_id: str, payload: dict) -> dict:
        if not (payload.get("food_name") or "").strip():
            raise HTTPException(status_code=400, detail="Food name is required")

        db = get_db_session()
        try:
            entry = NutritionEntryORM(
                id=str(uuid.uuid4()),
                user_id=user_id,
                date=to_iso(payload["date"]),
                meal_type=payload["meal_type"],
                food_name=payload["food_name"].strip(),
                food_id=payload.get("food_id"),
                quantity=payload.get("quantity", 100),
                unit=payload.get("unit", "g"),
                calories=payload.get("calories", 0),
                protein=payload.get("protein", 0),
                carbs=payload.get("carbs", 0),
                fat=payload.get("fat", 0)
            )
            db.add(entry)
            db.commit()
            db.refresh(entry)
            return self._entry_to_dict(entry)
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to add nutrition entry for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to add entry: {str(e)}")
        finally:
            db.close()

    def update_entry(self, entry_id: str, user_id: str, updates: dict) -> dict:
        db = get_db_session()
        try:
            entry = db.query(NutritionEntryORM).filter(NutritionEntryORM.id == entry_id).first()
            if not entry:
                raise HTTPException(status_code=404, detail="Entry not found")
            if entry.user_id != user_id:
                raise HTTPException(status_code=403, detail="Not your entry")
            for key in ("date", "meal_type", "food_name"):
                if key in updates and updates[key] is None:
                    raise HTTPException(status_code=400, detail=f"{key} cannot be null")
            for key, value in updates.items():
                if hasattr(entry, key) and key not in ("id", "user_id"):
                    setattr(entry, key, to_iso(value))
            db.commit()
            db.refresh(entry)
            return self._entry_to_dict(entry)
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to update nutrition entry {entry_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to update entry: {str(e)}")
        finally:
            db.close()

    def delete_entry(self, entry_id: str, user_id: str) -> dict:
        db = get_db_session()
        try:
            entry = db.query(NutritionEntryORM).filter(NutritionEntryORM.id == entry_id).first()
            if not entry:
                raise HTTPException(status_code=404, detail="Entry not found")
            if entry.user_id != user_id:
                raise HTTPException(status_code=403, detail="Not your entry")
            db.delete(entry)
            db.commit()
            return {"status": "success", "message": "Entry deleted"}
        finally:
            db.close()

    # --- STATISTICS ---

    def get_daily_stats(self, user_id: str, date_str: str) -> dict:
        entries = self.get_entries(user_id, date_str=date_str)
        totals = {"calories": 0.0, "protein": 0.0, "carbs": 0.0, "fat": 0.0}
        by_meal = {meal: [] for meal in MEAL_TYPES}
        for e in entries:
            for key in totals:
                totals[key] += e[key]
            by_meal.setdefault(e["meal_type"], []).append(e)
        return {
            "date": date_str,
            "totals": {k: round(v, 1) for k, v in totals.items()},
            "entry_count": len(entries),
            "meals": by_meal
        }

    def get_nutrition_stats(self, user_id: str, days: int = 7, today: date = None) -> dict:
        """Averages, macro/meal distribution and goal progress over the last `days` days."""
        if days < 1:
            raise HTTPException(status_code=400, detail="days must be at least 1")
        today = today or date.today()
        start = (today - timedelta(days=days - 1)).isoformat()
        entries = self.get_entries(user_id, start=start, end=today.isoformat())

        daily = {}
        meal_calories = {meal: 0.0 for meal in MEAL_TYPES}
        for e in entries:
            day = daily.setdefault(e["date"], {"date": e["date"], "calories": 0.0, "protein": 0.0,
                                              "carbs": 0.0, "fat": 0.0})
            for key in ("calories", "protein", "carbs", "fat"):
                day[key] += e[key]
            meal_calories[e["meal_type"]] = meal_calories.get(e["meal_type"], 0.0) + e["calories"]

        day_rows = sorted(daily.values(), key=lambda d: d["date"])
        n = len(day_rows)
        averages = {
            key: round(sum(d[key] for d in day_rows) / n, 1) if n else 0.0
            for key in ("calories", "protein", "carbs", "fat")
        }

        macro_kcal = {k: averages[k] * KCAL_PER_GRAM[k] for k in KCAL_PER_GRAM}
        macro_total = sum(macro_kcal.values())
        total_meal_calories = sum(meal_calories.values())

        goal = self._active_goal(user_id)
        progress = None
        if goal:
            progress = {
                "calories": _pct(averages["calories"], goal["calories"] or 0),
                "protein": _pct(averages["protein"], goal["protein"] or 0),
                "carbs": _pct(averages["carbs"], goal["carbs"] or 0),
                "fat": _pct(averages["fat"], goal["fat"] or 0),
            }

        return {
            "days": days,
            "days_logged": n,
            "daily": [{k: (round(v, 1) if k != "date" else v) for k, v in d.items()} for d in day_rows],
            "averages": averages,
            "macro_distribution": {k: _pct(v, macro_total) for k, v in macro_kcal.items()},
            "meal_distribution": {k: _pct(v, total_meal_calories) for k, v in meal_calories.items()},
            "goal": goal,
            "goal_progress": progress
        }

    # --- GOALS ---

    def _active_goal(self, user_id: str):
        db = get_db_session()
        try:
            goal = db.query(NutritionGoalORM).filter(
                NutritionGoalORM.user_id == user_id,
                NutritionGoalORM.is_active == True
            ).order_by(NutritionGoalORM.created_at.desc()).first()
            return self._goal_to_dict(goal) if goal else None
        finally:
            db.close()

    def get_goals(self, user_id: str) -> dict:
        goal = self._active_goal(user_id)
        if not goal:
            raise HTTPException(status_code=404, detail="No nutrition goals set")
        return goal

    def set_goals(self, user_id: str, payload: dict) -> dict:
        """Store new goals; the previously active row is kept as history but deactivated."""
        db = get_db_session()
        try:
            db.query(NutritionGoalORM).filter(
                NutritionGoalORM.user_id == user_id,
                NutritionGoalORM.is_active == True
            ).update({"is_active": False, "updated_at": now_iso()})

            goal = NutritionGoalORM(
                id=str(uuid.uuid4()),
                user_id=user_id,
                calories=payload["calories"],
                protein=payload.get("protein"),
                carbs=payload.get("carbs"),
                fat=payload.get("fat"),
                water_ml=payload.get("water_ml"),
                is_active=True
            )
            db.add(goal)
            db.commit()
            db.refresh(goal)
            return self._goal_to_dict(goal)
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to set nutrition goals for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to set goals: {str(e)}")
        finally:
            db.close()

    # --- WATER ---

    def add_water(self, user_id: str, payload: dict) -> dict:
        if payload.get("amount_ml", 0) <= 0:
            raise HTTPException(status_code=400, detail="Amount must be greater than 0")
        db = get_db_session()
        try:
            row = WaterLogORM(
                id=str(uuid.uuid4()),
                user_id=user_id,
                date=to_iso(payload["date"]),
                amount_ml=payload["amount_ml"]
            )
            db.add(row)
            db.commit()
            return {"id": row.id, "date": row.date, "amount_ml": row.amount_ml, "created_at": row.created_at}
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to log water for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to log water: {str(e)}")
        finally:
            db.close()

    def get_water(self, user_id: str, date_str: str) -> dict:
        db = get_db_session()
        try:
            rows = db.query(WaterLogORM).filter(
                WaterLogORM.user_id == user_id,
                WaterLogORM.date == date_str
            ).order_by(WaterLogORM.created_at).all()
            entries = [{"id": r.id, "date": r.date, "amount_ml": r.amount_ml, "created_at": r.created_at}
                       for r in rows]
        finally:
            db.close()

        goal = self._active_goal(user_id)
        return {
            "date": date_str,
            "entries": entries,
            "total_ml": sum(e["amount_ml"] for e in entries),
            "goal_ml": goal["water_ml"] if goal else None
        }

    def delete_water(self, entry_id: str, user_id: str) -> dict:
        db = get_db_session()
        try:
            row = db.query(WaterLogORM).filter(WaterLogORM.id == entry_id).first()
            if not row:
                raise HTTPException(status_code=404, detail="Water entry not found")
            if row.user_id != user_id:
                raise HTTPException(status_code=403, detail="Not your entry")
            db.delete(row)
            db.commit()
            return {"status": "success", "message": "Water entry deleted"}
        finally:
            db.close()


# Singleton instance
nutrition_service = NutritionService()

def get_nutrition_service() -> NutritionService:
    """Dependency injection helper."""
    return nutrition_service
