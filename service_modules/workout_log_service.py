"""
Workout Log Service - records training sessions and derives progress per exercise.
"""
import json
from .base import (
    HTTPException, uuid, logging, datetime,
    get_db_session, WorkoutLogORM, load_json, to_iso
)
from .strength_service import strength_service

logger = logging.getLogger("fitness_app")


def exercise_volume(exercise: dict) -> float:
    """Sum of reps x weight over every set of a logged exercise."""
    return sum((s.get("reps") or 0) * (s.get("weight") or 0) for s in exercise.get("sets") or [])


class WorkoutLogService:
    """Service for the training log."""

    def _log_to_dict(self, log: WorkoutLogORM) -> dict:
        return {
            "id": log.id,
            "user_id": log.user_id,
            "routine_id": log.routine_id,
            "date": log.date,
            "duration": log.duration,
            "exercises": load_json(log.exercises_json, []),
            "notes": log.notes,
            "rating": log.rating,
            "fatigue_level": log.fatigue_level,
            "rpe": log.rpe,
            "rir": log.rir,
            "created_at": log.created_at
        }

    def log_workout(self, user_id: str, payload: dict) -> dict:
        exercises = payload.get("exercises") or []
        if not exercises:
            raise HTTPException(status_code=400, detail="A workout needs at least one exercise")
        for ex in exercises:
            if not ex.get("sets"):
                raise HTTPException(status_code=400, detail=f"Exercise '{ex.get('name')}' needs at least one set")

        db = get_db_session()
        try:
            log = WorkoutLogORM(
                id=str(uuid.uuid4()),
                user_id=user_id,
                routine_id=payload.get("routine_id"),
                date=to_iso(payload.get("date")) or datetime.utcnow().isoformat(),
                duration=payload.get("duration"),
                exercises_json=json.dumps(exercises),
                notes=(payload.get("notes") or "").strip() or None,
                rating=payload.get("rating"),
                fatigue_level=payload.get("fatigue_level"),
                rpe=payload.get("rpe"),
                rir=payload.get("rir")
            )
            db.add(log)
            db.commit()
            db.refresh(log)
            return self._log_to_dict(log)
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to save workout log for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to save workout: {str(e)}")
        finally:
            db.close()

    def get_logs(self, user_id: str, start: str = None, end: str = None, limit: int = 50) -> list:
        db = get_db_session()
        try:
            query = db.query(WorkoutLogORM).filter(WorkoutLogORM.user_id == user_id)
            if start:
                query = query.filter(WorkoutLogORM.date >= start)
            if end:
                # Dates are ISO strings; a bare YYYY-MM-DD end should include that whole day
                query = query.filter(WorkoutLogORM.date <= (end + "T23:59:59" if len(end) == 10 else end))
            logs = query.order_by(WorkoutLogORM.date.desc()).limit(limit).all()
            return [self._log_to_dict(log) for log in logs]
        finally:
            db.close()

    def get_logs_since(self, user_id: str, since: str) -> list:
        db = get_db_session()
        try:
            logs = db.query(WorkoutLogORM).filter(
                WorkoutLogORM.user_id == user_id,
                WorkoutLogORM.date >= since
            ).order_by(WorkoutLogORM.date.desc()).all()
            return [self._log_to_dict(log) for log in logs]
        finally:
            db.close()

    def get_progress(self, user_id: str, exercise_name: str) -> list:
        """Per-session best estimated 1RM and total volume for one exercise, oldest first."""
        name = exercise_name.strip().lower()
        db = get_db_session()
        try:
            logs = db.query(WorkoutLogORM).filter(
                WorkoutLogORM.user_id == user_id
            ).order_by(WorkoutLogORM.date.asc()).all()
            entries = [(log.date, load_json(log.exercises_json, [])) for log in logs]
        finally:
            db.close()

        progress = []
        for log_date, exercises in entries:
            matching = [ex for ex in exercises if (ex.get("name") or "").strip().lower() == name]
            if not matching:
                continue
            sets = [s for ex in matching for s in ex.get("sets") or []]
            progress.append({
                "date": log_date,
                "estimated_one_rep_max": strength_service.best_set_estimate(sets),
                "volume": sum(exercise_volume(ex) for ex in matching),
                "sets": len(sets)
            })
        return progress

    def delete_log(self, log_id: str, user_id: str) -> dict:
        db = get_db_session()
        try:
            log = db.query(WorkoutLogORM).filter(WorkoutLogORM.id == log_id).first()
            if not log:
                raise HTTPException(status_code=404, detail="Workout log not found")
            if log.user_id != user_id:
                raise HTTPException(status_code=403, detail="Not your workout log")
            db.delete(log)
            db.commit()
            return {"status": "success", "message": "Workout log deleted"}
        finally:
            db.close()


# Singleton instance
workout_log_service = WorkoutLogService()

def get_workout_log_service() -> WorkoutLogService:
    """Dependency injection helper."""
    return workout_log_service
