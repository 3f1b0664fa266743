"""
Recovery Routes - guided recovery sessions and the assessment questionnaire.
"""
from typing import Optional
from fastapi import APIRouter, Depends
from auth import get_current_user
from models import AssessmentCreate
from models_orm import UserORM
from service_modules.recovery_service import RecoveryService, get_recovery_service

router = APIRouter()


@router.get("/api/recovery/sessions")
async def list_recovery_sessions(
    type: Optional[str] = None,
    level: Optional[str] = None,
    service: RecoveryService = Depends(get_recovery_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.list_sessions(type, level)


@router.get("/api/recovery/completed")
async def get_completed_sessions(
    service: RecoveryService = Depends(get_recovery_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_completed(current_user.id)


@router.post("/api/recovery/sessions/{session_id}/complete")
async def complete_recovery_session(
    session_id: str,
    service: RecoveryService = Depends(get_recovery_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.complete_session(current_user.id, session_id)


# --- ASSESSMENTS ---

@router.get("/api/assessments")
async def get_latest_assessment(
    service: RecoveryService = Depends(get_recovery_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_latest_assessment(current_user.id)


@router.post("/api/assessments")
async def save_assessment(
    payload: AssessmentCreate,
    service: RecoveryService = Depends(get_recovery_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.save_assessment(current_user.id, payload.assessment_data)
