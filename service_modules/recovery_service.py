"""
Recovery Service - guided recovery sessions (meditation, yoga, stretching, breathing)
and the onboarding assessment questionnaire.
"""
import json
from .base import (
    HTTPException, uuid, logging,
    get_db_session, RecoverySessionORM, UserAssessmentORM, load_json
)
from data import RECOVERY_SESSIONS

logger = logging.getLogger("fitness_app")


class RecoveryService:
    """Service for recovery sessions and user assessments."""

    def list_sessions(self, session_type: str = None, level: str = None) -> list:
        sessions = RECOVERY_SESSIONS
        if session_type:
            sessions = [s for s in sessions if s["type"] == session_type]
        if level:
            sessions = [s for s in sessions if s["level"] == level]
        return sessions

    def complete_session(self, user_id: str, session_id: str) -> dict:
        catalog_entry = next((s for s in RECOVERY_SESSIONS if s["id"] == session_id), None)
        if not catalog_entry:
            raise HTTPException(status_code=404, detail="Recovery session not found")

        db = get_db_session()
        try:
            row = RecoverySessionORM(
                id=str(uuid.uuid4()),
                user_id=user_id,
                session_id=session_id,
                type=catalog_entry["type"],
                duration=catalog_entry["duration"],
                completed=True
            )
            db.add(row)
            db.commit()
            db.refresh(row)
            return {
                "id": row.id,
                "session_id": row.session_id,
                "title": catalog_entry["title"],
                "type": row.type,
                "duration": row.duration,
                "created_at": row.created_at
            }
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to record recovery session for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to record session: {str(e)}")
        finally:
            db.close()

    def get_completed(self, user_id: str) -> dict:
        db = get_db_session()
        try:
            rows = db.query(RecoverySessionORM).filter(
                RecoverySessionORM.user_id == user_id,
                RecoverySessionORM.completed == True
            ).order_by(RecoverySessionORM.created_at.desc()).all()
            sessions = [
                {
                    "id": r.id,
                    "session_id": r.session_id,
                    "type": r.type,
                    "duration": r.duration,
                    "created_at": r.created_at
                }
                for r in rows
            ]
        finally:
            db.close()
        return {
            "sessions": sessions,
            "total_sessions": len(sessions),
            "total_minutes": sum(s["duration"] or 0 for s in sessions)
        }

    # --- ASSESSMENTS ---

    def save_assessment(self, user_id: str, data: dict) -> dict:
        if not data:
            raise HTTPException(status_code=400, detail="Assessment answers are required")
        db = get_db_session()
        try:
            row = UserAssessmentORM(
                id=str(uuid.uuid4()),
                user_id=user_id,
                assessment_json=json.dumps(data)
            )
            db.add(row)
            db.commit()
            db.refresh(row)
            return {"id": row.id, "assessment_data": data, "created_at": row.created_at}
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to save assessment for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to save assessment: {str(e)}")
        finally:
            db.close()

    def get_latest_assessment(self, user_id: str) -> dict:
        db = get_db_session()
        try:
            row = db.query(UserAssessmentORM).filter(
                UserAssessmentORM.user_id == user_id
            ).order_by(UserAssessmentORM.created_at.desc()).first()
            if not row:
                raise HTTPException(status_code=404, detail="No assessment found")
            return {"id": row.id, "assessment_data": load_json(row.assessment_json, {}), "created_at": row.created_at}
        finally:
            db.close()


# Singleton instance
recovery_service = RecoveryService()

def get_recovery_service() -> RecoveryService:
    """Dependency injection helper."""
    return recovery_service
