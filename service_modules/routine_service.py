"""
Routine Service - handles workout routines, their days and the built-in templates.
"""
import json
import copy
from .base import (
    HTTPException, uuid, logging,
    get_db_session, WorkoutRoutineORM, load_json, now_iso
)
from data import ROUTINE_TEMPLATES

logger = logging.getLogger("fitness_app")


class RoutineService:
    """Service for managing workout routines."""

    def _routine_to_dict(self, routine: WorkoutRoutineORM) -> dict:
        return {
            "id": routine.id,
            "user_id": routine.user_id,
            "name": routine.name,
            "description": routine.description,
            "level": routine.level,
            "goal": routine.goal,
            "frequency": routine.frequency,
            "days": load_json(routine.days_json, []),
            "is_active": bool(routine.is_active),
            "is_template": bool(routine.is_template),
            "created_at": routine.created_at,
            "updated_at": routine.updated_at
        }

    def _with_day_ids(self, days: list) -> list:
        for day in days:
            if not day.get("id"):
                day["id"] = str(uuid.uuid4())
        return days

    def _get_owned(self, db, routine_id: str, user_id: str) -> WorkoutRoutineORM:
        routine = db.query(WorkoutRoutineORM).filter(WorkoutRoutineORM.id == routine_id).first()
        if not routine:
            raise HTTPException(status_code=404, detail="Routine not found")
        if routine.user_id != user_id:
            raise HTTPException(status_code=403, detail="Not your routine")
        return routine

    def get_user_routines(self, user_id: str) -> list:
        db = get_db_session()
        try:
            routines = db.query(WorkoutRoutineORM).filter(
                WorkoutRoutineORM.user_id == user_id,
                WorkoutRoutineORM.is_template == False
            ).order_by(WorkoutRoutineORM.created_at.desc()).all()
            return [self._routine_to_dict(r) for r in routines]
        finally:
            db.close()

    def get_routine(self, routine_id: str, user_id: str) -> dict:
        """Owners can read their routines; anyone can read a template."""
        db = get_db_session()
        try:
            routine = db.query(WorkoutRoutineORM).filter(WorkoutRoutineORM.id == routine_id).first()
            if not routine:
                raise HTTPException(status_code=404, detail="Routine not found")
            if not routine.is_template and routine.user_id != user_id:
                raise HTTPException(status_code=403, detail="Not your routine")
            return self._routine_to_dict(routine)
        finally:
            db.close()

    def save_routine(self, routine: dict, user_id: str) -> dict:
        """Insert a new routine or update an existing one the caller owns."""
        if not (routine.get("name") or "").strip():
            raise HTTPException(status_code=400, detail="Routine name is required")

        db = get_db_session()
        try:
            days = self._with_day_ids(routine.get("days") or [])
            existing = None
            if routine.get("id"):
                existing = db.query(WorkoutRoutineORM).filter(WorkoutRoutineORM.id == routine["id"]).first()

            if existing:
                if existing.user_id != user_id:
                    raise HTTPException(status_code=403, detail="Not your routine")
                existing.name = routine["name"]
                existing.description = routine.get("description")
                existing.level = routine.get("level") or existing.level
                existing.goal = routine.get("goal") or existing.goal
                existing.frequency = routine.get("frequency") or existing.frequency
                existing.days_json = json.dumps(days)
                existing.is_active = routine.get("is_active", True)
                existing.updated_at = now_iso()
                db_routine = existing
            else:
                db_routine = WorkoutRoutineORM(
                    id=routine.get("id") or str(uuid.uuid4()),
                    user_id=user_id,
                    name=routine["name"],
                    description=routine.get("description"),
                    level=routine.get("level") or "beginner",
                    goal=routine.get("goal") or "general",
                    frequency=routine.get("frequency") or "3-4 days per week",
                    days_json=json.dumps(days),
                    is_active=routine.get("is_active", True),
                    is_template=False
                )
                db.add(db_routine)

            db.commit()
            db.refresh(db_routine)
            return self._routine_to_dict(db_routine)
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to save routine: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to save routine: {str(e)}")
        finally:
            db.close()

    def delete_routine(self, routine_id: str, user_id: str) -> dict:
        db = get_db_session()
        try:
            routine = self._get_owned(db, routine_id, user_id)
            db.delete(routine)
            db.commit()
            return {"status": "success", "message": "Routine deleted"}
        finally:
            db.close()

    # --- DAYS ---

    def _update_days(self, routine_id: str, user_id: str, mutate) -> dict:
        db = get_db_session()
        try:
            routine = self._get_owned(db, routine_id, user_id)
            days = load_json(routine.days_json, [])
            result = mutate(days)
            routine.days_json = json.dumps(days)
            routine.updated_at = now_iso()
            db.commit()
            return result
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to update days of routine {routine_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to update routine: {str(e)}")
        finally:
            db.close()

    def add_day(self, routine_id: str, day: dict, user_id: str) -> dict:
        new_day = dict(day, id=str(uuid.uuid4()))

        def mutate(days):
            days.append(new_day)
            return new_day

        return self._update_days(routine_id, user_id, mutate)

    def update_day(self, routine_id: str, day_id: str, updates: dict, user_id: str) -> dict:
        def mutate(days):
            for day in days:
                if day.get("id") == day_id:
                    day.update({k: v for k, v in updates.items() if k != "id"})
                    return day
            raise HTTPException(status_code=404, detail="Day not found")

        return self._update_days(routine_id, user_id, mutate)

    def delete_day(self, routine_id: str, day_id: str, user_id: str) -> dict:
        def mutate(days):
            for i, day in enumerate(days):
                if day.get("id") == day_id:
                    days.pop(i)
                    return {"status": "success", "message": "Day deleted"}
            raise HTTPException(status_code=404, detail="Day not found")

        return self._update_days(routine_id, user_id, mutate)

    # --- TEMPLATES ---

    def get_templates(self) -> list:
        db = get_db_session()
        try:
            templates = db.query(WorkoutRoutineORM).filter(
                WorkoutRoutineORM.is_template == True
            ).order_by(WorkoutRoutineORM.name).all()
            return [self._routine_to_dict(t) for t in templates]
        finally:
            db.close()

    def create_from_template(self, template_id: str, user_id: str) -> dict:
        """Copy a template into the user's routines with fresh ids."""
        db = get_db_session()
        try:
            template = db.query(WorkoutRoutineORM).filter(
                WorkoutRoutineORM.id == template_id,
                WorkoutRoutineORM.is_template == True
            ).first()
            if not template:
                raise HTTPException(status_code=404, detail="Template not found")

            days = load_json(template.days_json, [])
            for day in days:
                day["id"] = str(uuid.uuid4())

            routine = WorkoutRoutineORM(
                id=str(uuid.uuid4()),
                user_id=user_id,
                name=template.name,
                description=template.description,
                level=template.level,
                goal=template.goal,
                frequency=template.frequency,
                days_json=json.dumps(days),
                is_active=True,
                is_template=False
            )
            db.add(routine)
            db.commit()
            db.refresh(routine)
            logger.info(f"User {user_id} created routine from template {template.name}")
            return self._routine_to_dict(routine)
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to copy template {template_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to create routine: {str(e)}")
        finally:
            db.close()

    def seed_templates(self) -> int:
        db = get_db_session()
        try:
            if db.query(WorkoutRoutineORM).filter(WorkoutRoutineORM.is_template == True).count() > 0:
                return 0
            for template in ROUTINE_TEMPLATES:
                days = self._with_day_ids(copy.deepcopy(template["days"]))
                db.add(WorkoutRoutineORM(
                    id=str(uuid.uuid4()),
                    user_id=None,
                    name=template["name"],
                    description=template["description"],
                    level=template["level"],
                    goal=template["goal"],
                    frequency=template["frequency"],
                    days_json=json.dumps(days),
                    is_active=True,
                    is_template=True
                ))
            db.commit()
            logger.info(f"Seeded {len(ROUTINE_TEMPLATES)} routine templates")
            return len(ROUTINE_TEMPLATES)
        except Exception as e:
            db.rollback()
            logger.error(f"Template seed failed: {e}")
            raise
        finally:
            db.close()


# Singleton instance
routine_service = RoutineService()

def get_routine_service() -> RoutineService:
    """Dependency injection helper."""
    return routine_service
