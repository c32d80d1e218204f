"""User routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from app.routes.dependencies import get_authenticated_principal, get_user_service
from app.schemas.auth import AuthPrincipal
from app.schemas.error import ErrorResponse
from app.schemas.user import (
    ChangeAvatarRequest,
    LoginRequest,
    LoginResponse,
    RegisterUserRequest,
    RegisterUserResponse,
    User,
)
from app.services.users import UserService

router = APIRouter(prefix="/users", tags=["Users"])


# Password routes are sync so bcrypt runs in the threadpool.
@router.post(
    "/register",
    response_model=RegisterUserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
)
def register_user(
    payload: RegisterUserRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> RegisterUserResponse:
    message = service.register(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        confirm_password=payload.confirm_password,
    )
    return RegisterUserResponse(message=message)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={422: {"model": ErrorResponse}},
)
def login_user(
    payload: LoginRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> LoginResponse:
    return service.login(email=payload.email, password=payload.password)


@router.get("/authors", response_model=list[User])
async def list_authors(
    service: Annotated[UserService, Depends(get_user_service)],
) -> list[User]:
    return service.list_authors()


@router.post(
    "/change-avatar",
    response_model=User,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def change_avatar(
    payload: ChangeAvatarRequest,
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    return service.change_avatar(principal=principal, avatar=payload.avatar)


@router.get(
    "/{userId}",
    response_model=User,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_user(
    user_id: Annotated[str, Path(alias="userId")],
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    return service.get_user(user_id=user_id)
