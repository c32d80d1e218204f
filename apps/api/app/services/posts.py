"""Post service layer."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.core.logging_safety import safe_log_identifier
from app.domain.ownership import ensure_owner
from app.errors import Forbidden, NotFound, ValidationError
from app.repositories.memory import InMemoryStore, PostRecord
from app.schemas.auth import AuthPrincipal
from app.schemas.post import Post, PostAuthor, UpdatePostRequest

DEFAULT_CATEGORY = "Uncategorized"

logger = logging.getLogger(__name__)


def _present(value: str | None) -> str | None:
    """Return the value if it carries text; blank updates keep the prior value."""
    if value is None or not value.strip():
        return None
    return value


class PostService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def create_post(
        self,
        *,
        principal: AuthPrincipal,
        title: str | None,
        content: str | None,
        category: str | None,
    ) -> Post:
        title = _present(title)
        content = _present(content)
        if title is None or content is None:
            raise ValidationError("Please fill in all fields.")

        record = self._store.create_post(
            author_id=principal.user_id,
            title=title,
            content=content,
            category=_present(category) or DEFAULT_CATEGORY,
        )
        logger.info(
            "post.created post_id=%s author_id=%s",
            record.id,
            safe_log_identifier(principal.user_id, prefix="pid"),
        )
        return self._to_post(record)

    def list_posts(self) -> list[Post]:
        return [self._to_post(record) for record in self._store.list_posts()]

    def list_posts_by_category(self, *, category: str) -> list[Post]:
        return [self._to_post(record) for record in self._store.list_posts(category=category)]

    def list_posts_by_author(self, *, author_id: str) -> list[Post]:
        return [self._to_post(record) for record in self._store.list_posts(author_id=author_id)]

    def get_post(self, *, post_id: str) -> Post:
        return self._to_post(self._require_post(post_id))

    def update_post(
        self,
        *,
        principal: AuthPrincipal,
        post_id: str,
        title: str | None = None,
        content: str | None = None,
        category: str | None = None,
    ) -> Post:
        current = self._require_post(post_id)
        self._ensure_can_write(principal, current, action="edit")
        return self._apply_update(current, title=title, content=content, category=category)

    def update_post_from_payload(self, *, principal: AuthPrincipal, post_id: str, payload: Any) -> Post:
        """Edit a post from a raw request body.

        Ownership is checked before the body is interpreted, so a non-author is
        refused with Forbidden whatever the body holds. A missing body is an empty update.
        """
        current = self._require_post(post_id)
        self._ensure_can_write(principal, current, action="edit")

        try:
            changes = UpdatePostRequest.model_validate(payload if payload is not None else {})
        except PydanticValidationError as exc:
            raise ValidationError("Invalid request payload") from exc

        return self._apply_update(
            current,
            title=changes.title,
            content=changes.content,
            category=changes.category,
        )

    def _apply_update(
        self,
        current: PostRecord,
        *,
        title: str | None,
        content: str | None,
        category: str | None,
    ) -> Post:
        updated = self._store.update_post(
            post_id=current.id,
            title=_present(title),
            content=_present(content),
            category=_present(category),
        )
        if updated is None:
            raise NotFound("Post not found.")

        logger.info("post.updated post_id=%s", updated.id)
        return self._to_post(updated)

    def delete_post(self, *, principal: AuthPrincipal, post_id: str) -> str:
        current = self._require_post(post_id)
        self._ensure_can_write(principal, current, action="delete")

        if not self._store.delete_post(current.id):
            raise NotFound("Post not found.")

        logger.info("post.deleted post_id=%s", current.id)
        return "Post deleted successfully."

    def _require_post(self, post_id: str) -> PostRecord:
        record = self._store.get_post(post_id)
        if record is None:
            raise NotFound("Post not found.")
        return record

    @staticmethod
    def _ensure_can_write(principal: AuthPrincipal, record: PostRecord, *, action: str) -> None:
        try:
            ensure_owner(principal, record.author_id, action=action)
        except Forbidden:
            logger.warning(
                "post.write_forbidden post_id=%s principal_id=%s action=%s",
                record.id,
                safe_log_identifier(principal.user_id, prefix="pid"),
                action,
            )
            raise

    def _to_post(self, record: PostRecord) -> Post:
        author = self._store.get_user(record.author_id)
        return Post(
            id=record.id,
            title=record.title,
            content=record.content,
            category=record.category,
            author_id=record.author_id,
            author=PostAuthor(id=author.id, name=author.name, email=author.email) if author is not None else None,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
