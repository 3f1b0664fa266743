"""
Admin Routes - user management and platform counts. Admin role required.
"""
from typing import Optional
from fastapi import APIRouter, Depends
from auth import get_current_user, require_admin
from models import AdminUserUpdate
from models_orm import UserORM
from service_modules.admin_service import AdminService, get_admin_service

router = APIRouter()


@router.get("/api/admin/stats")
async def get_admin_stats(
    service: AdminService = Depends(get_admin_service),
    current_user: UserORM = Depends(get_current_user)
):
    require_admin(current_user)
    return service.get_stats()


@router.get("/api/admin/users")
async def list_users(
    search: Optional[str] = None,
    role: Optional[str] = None,
    service: AdminService = Depends(get_admin_service),
    current_user: UserORM = Depends(get_current_user)
):
    require_admin(current_user)
    return service.list_users(search, role)


@router.get("/api/admin/users/{user_id}")
async def get_user(
    user_id: str,
    service: AdminService = Depends(get_admin_service),
    current_user: UserORM = Depends(get_current_user)
):
    require_admin(current_user)
    return service.get_user(user_id)


@router.put("/api/admin/users/{user_id}")
async def update_user(
    user_id: str,
    updates: AdminUserUpdate,
    service: AdminService = Depends(get_admin_service),
    current_user: UserORM = Depends(get_current_user)
):
    require_admin(current_user)
    return service.update_user(user_id, updates.model_dump(exclude_unset=True), current_user.id)


@router.delete("/api/admin/users/{user_id}")
async def delete_user(
    user_id: str,
    service: AdminService = Depends(get_admin_service),
    current_user: UserORM = Depends(get_current_user)
):
    require_admin(current_user)
    return service.delete_user(user_id, current_user.id)
