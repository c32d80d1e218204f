"""Post routes."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path, status

from app.routes.dependencies import get_authenticated_principal, get_post_service
from app.schemas.auth import AuthPrincipal
from app.schemas.error import ErrorResponse
from app.schemas.post import (
    CreatePostRequest,
    CreatePostResponse,
    DeletePostResponse,
    Post,
)
from app.services.posts import PostService

router = APIRouter(prefix="/posts", tags=["Posts"])


@router.post(
    "",
    response_model=CreatePostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={401: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def create_post(
    payload: CreatePostRequest,
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[PostService, Depends(get_post_service)],
) -> CreatePostResponse:
    post = service.create_post(
        principal=principal,
        title=payload.title,
        content=payload.content,
        category=payload.category,
    )
    return CreatePostResponse(id=post.id, message=f"New post created with ID: {post.id}")


@router.get("", response_model=list[Post])
async def list_posts(
    service: Annotated[PostService, Depends(get_post_service)],
) -> list[Post]:
    return service.list_posts()


@router.get("/category/{category}", response_model=list[Post])
async def list_posts_by_category(
    category: Annotated[str, Path()],
    service: Annotated[PostService, Depends(get_post_service)],
) -> list[Post]:
    return service.list_posts_by_category(category=category)


@router.get("/user/{userId}", response_model=list[Post])
async def list_posts_by_author(
    user_id: Annotated[str, Path(alias="userId")],
    service: Annotated[PostService, Depends(get_post_service)],
) -> list[Post]:
    return service.list_posts_by_author(author_id=user_id)


@router.get(
    "/{postId}",
    response_model=Post,
    responses={404: {"model": ErrorResponse}},
)
async def get_post(
    post_id: Annotated[str, Path(alias="postId")],
    service: Annotated[PostService, Depends(get_post_service)],
) -> Post:
    return service.get_post(post_id=post_id)


@router.put(
    "/{postId}",
    response_model=Post,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
async def update_post(
    post_id: Annotated[str, Path(alias="postId")],
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[PostService, Depends(get_post_service)],
    # Parsed by the service after the ownership check; see UpdatePostRequest.
    payload: Annotated[Any, Body()] = None,
) -> Post:
    return service.update_post_from_payload(principal=principal, post_id=post_id, payload=payload)


@router.delete(
    "/{postId}",
    response_model=DeletePostResponse,
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_post(
    post_id: Annotated[str, Path(alias="postId")],
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[PostService, Depends(get_post_service)],
) -> DeletePostResponse:
    return DeletePostResponse(message=service.delete_post(principal=principal, post_id=post_id))
