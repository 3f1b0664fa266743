"""
Exercise Service - handles the exercise library: search, filters and admin CRUD.
"""
import json
from .base import (
    HTTPException, uuid, logging,
    get_db_session, ExerciseORM, load_json, now_iso
)
from data import EXERCISE_LIBRARY

logger = logging.getLogger("fitness_app")

DIFFICULTY_ORDER = {"beginner": 0, "intermediate": 1, "advanced": 2}
SORT_FIELDS = ("name", "difficulty", "created_at")

# Fields stored as JSON arrays
_LIST_FIELDS = ("muscle_groups", "secondary_muscle_groups", "equipment")


class ExerciseService:
    """Service for managing the exercise library."""

    def _exercise_to_dict(self, ex: ExerciseORM) -> dict:
        return {
            "id": ex.id,
            "name": ex.name,
            "description": ex.description,
            "category": ex.category,
            "muscle_groups": load_json(ex.muscle_groups_json, []),
            "secondary_muscle_groups": load_json(ex.secondary_muscle_groups_json, []),
            "difficulty": ex.difficulty or "intermediate",
            "equipment": load_json(ex.equipment_json, []),
            "is_compound": bool(ex.is_compound),
            "image_url": ex.image_url,
            "video_url": ex.video_url,
            "instructions": ex.instructions,
            "tips": ex.tips,
            "created_at": ex.created_at,
            "updated_at": ex.updated_at
        }

    def list_exercises(self, search: str = None, muscle_group: str = None, difficulty: str = None,
                       equipment: str = None, sort: str = "name") -> list:
        """List exercises matching every given filter."""
        if sort not in SORT_FIELDS:
            raise HTTPException(status_code=400, detail=f"Invalid sort field. Use one of: {', '.join(SORT_FIELDS)}")

        db = get_db_session()
        try:
            query = db.query(ExerciseORM)
            if difficulty:
                query = query.filter(ExerciseORM.difficulty == difficulty)
            exercises = [self._exercise_to_dict(ex) for ex in query.all()]
        finally:
            db.close()

        # List membership and free-text matching are done in Python since
        # the groups live in JSON columns
        if search:
            term = search.lower()
            exercises = [
                ex for ex in exercises
                if term in ex["name"].lower() or term in (ex["description"] or "").lower()
            ]
        if muscle_group:
            group = muscle_group.lower()
            exercises = [ex for ex in exercises if group in [m.lower() for m in ex["muscle_groups"]]]
        if equipment:
            item = equipment.lower()
            exercises = [ex for ex in exercises if item in [e.lower() for e in ex["equipment"]]]

        if sort == "difficulty":
            exercises.sort(key=lambda ex: (DIFFICULTY_ORDER.get(ex["difficulty"], 1), ex["name"].lower()))
        elif sort == "created_at":
            exercises.sort(key=lambda ex: ex["created_at"] or "", reverse=True)
        else:
            exercises.sort(key=lambda ex: ex["name"].lower())
        return exercises

    def get_exercise(self, exercise_id: str) -> dict:
        db = get_db_session()
        try:
            ex = db.query(ExerciseORM).filter(ExerciseORM.id == exercise_id).first()
            if not ex:
                raise HTTPException(status_code=404, detail="Exercise not found")
            return self._exercise_to_dict(ex)
        finally:
            db.close()

    def get_filters(self) -> dict:
        """Distinct muscle groups, equipment and categories for the filter dropdowns."""
        exercises = self.list_exercises()
        muscle_groups, equipment, categories = set(), set(), set()
        for ex in exercises:
            muscle_groups.update(ex["muscle_groups"])
            equipment.update(ex["equipment"])
            if ex["category"]:
                categories.add(ex["category"])
        return {
            "muscle_groups": sorted(muscle_groups),
            "equipment": sorted(equipment),
            "categories": sorted(categories),
            "difficulties": list(DIFFICULTY_ORDER.keys())
        }

    def create_exercise(self, exercise: dict) -> dict:
        db = get_db_session()
        try:
            db_ex = ExerciseORM(
                id=str(uuid.uuid4()),
                name=exercise["name"],
                description=exercise.get("description"),
                category=exercise.get("category"),
                muscle_groups_json=json.dumps(exercise.get("muscle_groups") or []),
                secondary_muscle_groups_json=json.dumps(exercise.get("secondary_muscle_groups") or []),
                difficulty=exercise.get("difficulty") or "intermediate",
                equipment_json=json.dumps(exercise.get("equipment") or []),
                is_compound=exercise.get("is_compound", False),
                image_url=exercise.get("image_url"),
                video_url=exercise.get("video_url"),
                instructions=exercise.get("instructions"),
                tips=exercise.get("tips")
            )
            db.add(db_ex)
            db.commit()
            db.refresh(db_ex)
            logger.info(f"Created exercise {db_ex.name} ({db_ex.id})")
            return self._exercise_to_dict(db_ex)
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to create exercise: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to create exercise: {str(e)}")
        finally:
            db.close()

    def update_exercise(self, exercise_id: str, updates: dict) -> dict:
        """Partial update: only the keys present in `updates` are written."""
        db = get_db_session()
        try:
            ex = db.query(ExerciseORM).filter(ExerciseORM.id == exercise_id).first()
            if not ex:
                raise HTTPException(status_code=404, detail="Exercise not found")
            for key in ("name", "difficulty"):
                if key in updates and not updates[key]:
                    raise HTTPException(status_code=400, detail=f"Exercise {key} cannot be empty")

            for key, value in updates.items():
                if key in _LIST_FIELDS:
                    setattr(ex, f"{key}_json", json.dumps(value or []))
                elif hasattr(ex, key):
                    setattr(ex, key, value)
            ex.updated_at = now_iso()
            db.commit()
            db.refresh(ex)
            return self._exercise_to_dict(ex)
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to update exercise {exercise_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to update exercise: {str(e)}")
        finally:
            db.close()

    def delete_exercise(self, exercise_id: str) -> dict:
        db = get_db_session()
        try:
            ex = db.query(ExerciseORM).filter(ExerciseORM.id == exercise_id).first()
            if not ex:
                raise HTTPException(status_code=404, detail="Exercise not found")

            db.delete(ex)
            db.commit()
            return {"status": "success", "message": "Exercise deleted"}
        finally:
            db.close()

    def seed_default_exercises(self) -> int:
        """Insert the built-in library into an empty table. Returns the number inserted."""
        db = get_db_session()
        try:
            if db.query(ExerciseORM).count() > 0:
                return 0
            for item in EXERCISE_LIBRARY:
                db.add(ExerciseORM(
                    id=str(uuid.uuid4()),
                    name=item["name"],
                    description=item.get("description"),
                    category=item.get("category"),
                    muscle_groups_json=json.dumps(item["muscle_groups"]),
                    secondary_muscle_groups_json=json.dumps(item.get("secondary_muscle_groups", [])),
                    difficulty=item["difficulty"],
                    equipment_json=json.dumps(item["equipment"]),
                    is_compound=item.get("is_compound", False),
                    instructions=item.get("instructions"),
                    tips=item.get("tips")
                ))
            db.commit()
            logger.info(f"Seeded {len(EXERCISE_LIBRARY)} exercises")
            return len(EXERCISE_LIBRARY)
        except Exception as e:
            db.rollback()
            logger.error(f"Exercise seed failed: {e}")
            raise
        finally:
            db.close()


# Singleton instance
exercise_service = ExerciseService()

def get_exercise_service() -> ExerciseService:
    """Dependency injection helper."""
    return exercise_service
