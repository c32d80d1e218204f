"""User registration, login and profile service layer."""

from __future__ import annotations

import logging

from app.adapters.auth import PasswordHasher, TokenIssuer
from app.adapters.auth.passwords import MAX_PASSWORD_BYTES
from app.core.logging_safety import safe_log_identifier
from app.errors import InvalidCredentials, NotFound, ValidationError
from app.repositories.memory import InMemoryStore, UserRecord
from app.schemas.auth import AuthPrincipal
from app.schemas.user import LoginResponse, User

MIN_PASSWORD_LENGTH = 6

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class UserService:
    def __init__(self, store: InMemoryStore, hasher: PasswordHasher, tokens: TokenIssuer) -> None:
        self._store = store
        self._hasher = hasher
        self._tokens = tokens

    def register(
        self,
        *,
        name: str | None,
        email: str | None,
        password: str | None,
        confirm_password: str | None,
    ) -> str:
        """Create a user account and return a confirmation message."""
        if _is_blank(name) or _is_blank(email) or _is_blank(password):
            raise ValidationError("Please fill in all fields.")

        normalized_email = email.strip().lower()
        safe_email = safe_log_identifier(normalized_email, prefix="email")
        if self._store.get_user_by_email(normalized_email) is not None:
            logger.info("user.register_rejected email=%s reason=duplicate_email", safe_email)
            raise ValidationError("Email already exists.")
        if len(password.strip()) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes.")
        if password != confirm_password:
            raise ValidationError("Passwords do not match.")

        record = self._store.create_user(
            name=name.strip(),
            email=normalized_email,
            password_hash=self._hasher.hash(password),
        )
        if record is None:
            # Lost a race with a concurrent registration for the same email.
            logger.info("user.register_rejected email=%s reason=duplicate_email", safe_email)
            raise ValidationError("Email already exists.")
        logger.info(
            "user.registered user_id=%s email=%s",
            safe_log_identifier(record.id, prefix="pid"),
            safe_email,
        )
        return f"New user {record.email} registered"

    def login(self, *, email: str | None, password: str | None) -> LoginResponse:
        if _is_blank(email) or not password:
            raise ValidationError("Fill in all fields.")

        normalized_email = email.strip().lower()
        record = self._store.get_user_by_email(normalized_email)
        # Unknown email and wrong password must be indistinguishable to the caller,
        # including in response time, so a hash is always verified.
        stored_hash = record.password_hash if record is not None else self._hasher.dummy_hash
        password_matches = self._hasher.verify(password, stored_hash)
        if record is None or not password_matches:
            logger.info(
                "user.login_failed email=%s",
                safe_log_identifier(normalized_email, prefix="email"),
            )
            raise InvalidCredentials("Invalid email or password.")

        token = self._tokens.issue_token(record.id, record.name)
        logger.info("user.login_succeeded user_id=%s", safe_log_identifier(record.id, prefix="pid"))
        return LoginResponse(token=token, id=record.id, name=record.name)

    def get_user(self, *, user_id: str) -> User:
        record = self._store.get_user(user_id)
        if record is None:
            raise NotFound("User not found.")
        return self._to_user(record)

    def list_authors(self) -> list[User]:
        return [self._to_user(record) for record in self._store.list_users()]

    def change_avatar(self, *, principal: AuthPrincipal, avatar: str | None) -> User:
        """Point the caller's own profile at an already-stored avatar file."""
        if _is_blank(avatar):
            raise ValidationError("Please choose an image.")

        record = self._store.set_user_avatar(user_id=principal.user_id, avatar_ref=avatar.strip())
        if record is None:
            raise NotFound("User not found.")

        logger.info("user.avatar_changed user_id=%s", safe_log_identifier(record.id, prefix="pid"))
        return self._to_user(record)

    @staticmethod
    def _to_user(record: UserRecord) -> User:
        return User(
            id=record.id,
            name=record.name,
            email=record.email,
            avatar=record.avatar_ref,
            created_at=record.created_at,
        )
