"""
Wearable Routes - device connections, sync and activity data.
"""
from fastapi import APIRouter, Depends
from auth import get_current_user
from models import WearableConnect, ActivityRecord
from models_orm import UserORM
from service_modules.wearable_service import WearableService, get_wearable_service

router = APIRouter()


@router.get("/api/wearables")
async def list_devices(
    service: WearableService = Depends(get_wearable_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.list_devices(current_user.id)


@router.post("/api/wearables")
async def connect_device(
    payload: WearableConnect,
    service: WearableService = Depends(get_wearable_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.connect_device(current_user.id, payload.model_dump())


# Activity routes come before /{connection_id}/... so "activity" is not read as an id
@router.get("/api/wearables/activity")
async def get_activity(
    service: WearableService = Depends(get_wearable_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_activity(current_user.id)


@router.post("/api/wearables/activity")
async def record_activity(
    payload: ActivityRecord,
    service: WearableService = Depends(get_wearable_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.record_activity(current_user.id, payload.model_dump(exclude_none=True))


@router.get("/api/wearables/history")
async def get_history(
    days: int = 7,
    service: WearableService = Depends(get_wearable_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.get_history(current_user.id, days)


@router.post("/api/wearables/{connection_id}/disconnect")
async def disconnect_device(
    connection_id: str,
    service: WearableService = Depends(get_wearable_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.disconnect_device(current_user.id, connection_id)


@router.post("/api/wearables/{connection_id}/sync")
async def sync_device(
    connection_id: str,
    service: WearableService = Depends(get_wearable_service),
    current_user: UserORM = Depends(get_current_user)
):
    return service.sync_device(current_user.id, connection_id)
