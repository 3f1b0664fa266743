"""
Insights Routes - simulated wellness score and form analysis.
"""
from fastapi import APIRouter, Depends
from auth import get_current_user
from models import FormAnalysisRequest
from models_orm import UserORM
from service_modules.insights_service import InsightsService, get_insights_service

router = APIRouter()


@router.get("/api/insights/wellness-score")
async def get_wellness_score(
    service: InsightsService = Depends(get_insights_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.wellness_score()


@router.post("/api/insights/form-analysis")
async def analyze_form(
    payload: FormAnalysisRequest,
    service: InsightsService = Depends(get_insights_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.analyze_form(payload.exercise_id, payload.exercise_name)
