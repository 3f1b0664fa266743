"""
Admin Service - user management and content counts for the admin screens.
"""
from sqlalchemy import or_
from .base import (
    HTTPException, logging,
    get_db_session, UserORM, ExerciseORM, WorkoutRoutineORM, WorkoutLogORM,
    DeloadHistoryORM, WellnessLogORM, NutritionEntryORM, NutritionGoalORM, WaterLogORM,
    MealPlanORM, SleepEntryORM, SleepGoalORM, RecoverySessionORM, UserAssessmentORM,
    ConnectedWearableORM, WearableDataORM
)
from .auth_service import auth_service

logger = logging.getLogger("fitness_app")

USER_OWNED_TABLES = [
    WorkoutRoutineORM, WorkoutLogORM, DeloadHistoryORM, WellnessLogORM,
    NutritionEntryORM, NutritionGoalORM, WaterLogORM, MealPlanORM,
    SleepEntryORM, SleepGoalORM, RecoverySessionORM, UserAssessmentORM,
    ConnectedWearableORM, WearableDataORM,
]


class AdminService:
    """Service for administrator endpoints."""

    def list_users(self, search: str = None, role: str = None) -> list:
        db = get_db_session()
        try:
            query = db.query(UserORM)
            if search:
                pattern = f"%{search}%"
                query = query.filter(or_(
                    UserORM.username.ilike(pattern),
                    UserORM.email.ilike(pattern),
                    UserORM.full_name.ilike(pattern)
                ))
            if role:
                query = query.filter(UserORM.role == role)
            users = query.order_by(UserORM.created_at.desc()).all()
            return [auth_service.user_to_dict(u) for u in users]
        finally:
            db.close()

    def get_user(self, user_id: str) -> dict:
        db = get_db_session()
        try:
            user = db.query(UserORM).filter(UserORM.id == user_id).first()
            if not user:
                raise HTTPException(status_code=404, detail="User not found")
            return auth_service.user_to_dict(user)
        finally:
            db.close()

    def update_user(self, user_id: str, updates: dict, admin_id: str) -> dict:
        db = get_db_session()
        try:
            user = db.query(UserORM).filter(UserORM.id == user_id).first()
            if not user:
                raise HTTPException(status_code=404, detail="User not found")
            if user_id == admin_id and (updates.get("role") == "user" or updates.get("is_active") is False):
                raise HTTPException(status_code=400, detail="You cannot demote or disable your own account")

            for key in ("role", "is_active", "full_name"):
                if key in updates and updates[key] is not None:
                    setattr(user, key, updates[key])
            db.commit()
            db.refresh(user)
            logger.info(f"Admin {admin_id} updated user {user.username}: {updates}")
            return auth_service.user_to_dict(user)
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to update user {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to update user: {str(e)}")
        finally:
            db.close()

    def delete_user(self, user_id: str, admin_id: str) -> dict:
        if user_id == admin_id:
            raise HTTPException(status_code=400, detail="You cannot delete your own account")
        db = get_db_session()
        try:
            user = db.query(UserORM).filter(UserORM.id == user_id).first()
            if not user:
                raise HTTPException(status_code=404, detail="User not found")

            # Owned rows first so PostgreSQL foreign keys are satisfied
            for orm in USER_OWNED_TABLES:
                db.query(orm).filter(orm.user_id == user_id).delete(synchronize_session=False)
            db.delete(user)
            db.commit()
            logger.info(f"Admin {admin_id} deleted user {user_id}")
            return {"status": "success", "message": "User deleted"}
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to delete user {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to delete user: {str(e)}")
        finally:
            db.close()

    def get_stats(self) -> dict:
        db = get_db_session()
        try:
            return {
                "users": db.query(UserORM).count(),
                "active_users": db.query(UserORM).filter(UserORM.is_active == True).count(),
                "exercises": db.query(ExerciseORM).count(),
                "routines": db.query(WorkoutRoutineORM).filter(WorkoutRoutineORM.is_template == False).count(),
                "templates": db.query(WorkoutRoutineORM).filter(WorkoutRoutineORM.is_template == True).count(),
                "workout_logs": db.query(WorkoutLogORM).count(),
                "meal_plans": db.query(MealPlanORM).count(),
                "sleep_entries": db.query(SleepEntryORM).count(),
                "connected_devices": db.query(ConnectedWearableORM).filter(
                    ConnectedWearableORM.status == "active"
                ).count()
            }
        finally:
            db.close()


# Singleton instance
admin_service = AdminService()

def get_admin_service() -> AdminService:
    """Dependency injection helper."""
    return admin_service
