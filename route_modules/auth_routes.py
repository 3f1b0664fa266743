"""
Auth Routes - registration, login and the current user's profile.
"""
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError
from auth import get_current_user
from models import RegisterRequest, LoginRequest, TokenResponse
from models_orm import UserORM
from service_modules.auth_service import AuthService, get_auth_service

router = APIRouter()


@router.post("/api/auth/register")
async def register(
    payload: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    return service.register_user(payload.model_dump())


@router.post("/api/auth/login", response_model=TokenResponse)
async def login(
    request: Request,
    service: AuthService = Depends(get_auth_service)
):
    """Accepts an OAuth2 form post or a JSON body."""
    content_type = request.headers.get("content-type", "")
    try:
        if "application/json" in content_type:
            raw = await request.json()
        else:
            raw = dict(await request.form())
        credentials = LoginRequest(**raw)
    except (ValidationError, TypeError, ValueError):
        raise HTTPException(status_code=422, detail="username and password are required")

    return service.login(credentials.username, credentials.password)


@router.get("/api/auth/me")
async def me(
    current_user: UserORM = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service)
):
    return service.user_to_dict(current_user)
