"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from . import dependencies, schemas, service

router = APIRouter(prefix="/auth")


# Plain `def` so bcrypt runs on the thread pool instead of the event loop.
@router.post(
    "/register",
    response_model=schemas.AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(request: schemas.RegisterRequest) -> schemas.AuthResponse:
    return service.register(request)


@router.post("/login", response_model=schemas.AuthResponse)
def login(request: schemas.LoginRequest) -> schemas.AuthResponse:
    return service.login(request)


@router.get("/me", response_model=schemas.UserResponse)
async def me(current_user: dict = Depends(dependencies.get_current_user)) -> schemas.UserResponse:
    return service.me(current_user)
