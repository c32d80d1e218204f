"""Post API schemas."""

from datetime import datetime

from pydantic import BaseModel


class CreatePostRequest(BaseModel):
    title: str | None = None
    content: str | None = None
    category: str | None = None


class UpdatePostRequest(BaseModel):
    title: str | None = None
    content: str | None = None
    category: str | None = None


class CreatePostResponse(BaseModel):
    id: str
    message: str


class DeletePostResponse(BaseModel):
    message: str


class PostAuthor(BaseModel):
    id: str
    name: str
    email: str


class Post(BaseModel):
    id: str
    title: str
    content: str
    category: str
    author_id: str
    author: PostAuthor | None = None
    created_at: datetime
    updated_at: datetime
