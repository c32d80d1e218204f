"""In-memory document store used by the API and tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from threading import Lock
from uuid import uuid4


@dataclass(slots=True)
class UserRecord:
    id: str
    name: str
    email: str
    password_hash: str
    created_at: datetime
    avatar_ref: str | None = None


@dataclass(slots=True)
class PostRecord:
    id: str
    title: str
    content: str
    category: str
    author_id: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True)
class InMemoryStore:
    """Simple, deterministic persistence layer standing in for the document database.

    Every method is a single store operation; callers get no multi-record
    transactions, so concurrent writes to one record are last-write-wins. Email
    uniqueness is enforced by the store itself, like a unique index.
    """

    users: dict[str, UserRecord] = field(default_factory=dict)
    user_ids_by_email: dict[str, str] = field(default_factory=dict)
    posts: dict[str, PostRecord] = field(default_factory=dict)
    user_write_count: int = 0
    post_write_count: int = 0
    _email_lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    def create_user(self, *, name: str, email: str, password_hash: str) -> UserRecord | None:
        """Insert a user; return None if the email is already taken."""
        normalized = email.lower()
        with self._email_lock:
            existing_id = self.user_ids_by_email.get(normalized)
            if existing_id is not None and existing_id in self.users:
                return None
            user = UserRecord(
                id=str(uuid4()),
                name=name,
                email=normalized,
                password_hash=password_hash,
                created_at=datetime.now(UTC),
            )
            self.users[user.id] = user
            self.user_ids_by_email[normalized] = user.id
            self.user_write_count += 1
        return user

    def get_user(self, user_id: str) -> UserRecord | None:
        return self.users.get(user_id)

    def get_user_by_email(self, email: str) -> UserRecord | None:
        user_id = self.user_ids_by_email.get(email.lower())
        if user_id is None:
            return None
        return self.users.get(user_id)

    def list_users(self) -> list[UserRecord]:
        users = list(self.users.values())
        users.sort(key=lambda record: record.created_at)
        return users

    def set_user_avatar(self, *, user_id: str, avatar_ref: str) -> UserRecord | None:
        user = self.users.get(user_id)
        if user is None:
            return None
        user.avatar_ref = avatar_ref
        self.user_write_count += 1
        return user

    def create_post(self, *, author_id: str, title: str, content: str, category: str) -> PostRecord:
        now = datetime.now(UTC)
        post = PostRecord(
            id=str(uuid4()),
            title=title,
            content=content,
            category=category,
            author_id=author_id,
            created_at=now,
            updated_at=now,
        )
        self.posts[post.id] = post
        self.post_write_count += 1
        return post

    def get_post(self, post_id: str) -> PostRecord | None:
        return self.posts.get(post_id)

    def list_posts(self, *, category: str | None = None, author_id: str | None = None) -> list[PostRecord]:
        posts = [
            record
            for record in self.posts.values()
            if (category is None or record.category == category)
            and (author_id is None or record.author_id == author_id)
        ]
        posts.sort(key=lambda record: record.created_at)
        return posts

    def update_post(
        self,
        *,
        post_id: str,
        title: str | None = None,
        content: str | None = None,
        category: str | None = None,
    ) -> PostRecord | None:
        """Apply the given fields; ``None`` leaves a field unchanged."""
        post = self.posts.get(post_id)
        if post is None:
            return None
        if title is not None:
            post.title = title
        if content is not None:
            post.content = content
        if category is not None:
            post.category = category
        post.updated_at = datetime.now(UTC)
        self.post_write_count += 1
        return post

    def delete_post(self, post_id: str) -> bool:
        if self.posts.pop(post_id, None) is None:
            return False
        self.post_write_count += 1
        return True
