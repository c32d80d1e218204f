"""bcrypt password hasher adapter."""

from __future__ import annotations

import logging
import secrets
from functools import lru_cache

import bcrypt

from app.adapters.auth.base import PasswordHasher
from app.errors import CryptoUnavailable

logger = logging.getLogger(__name__)

# bcrypt only consumes the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


def _gensalt(rounds: int) -> bytes:
    try:
        return bcrypt.gensalt(rounds=rounds)
    except (NotImplementedError, OSError) as exc:
        logger.error("password.salt_failed reason=randomness_unavailable")
        raise CryptoUnavailable("Secure random source is unavailable") from exc


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> str:
    return bcrypt.hashpw(secrets.token_urlsafe(32).encode("ascii"), _gensalt(rounds)).decode("ascii")


class BcryptPasswordHasher(PasswordHasher):
    """Hashes passwords with bcrypt; the salt and work factor live in the hash string."""

    def __init__(self, rounds: int = 10) -> None:
        self._rounds = rounds

    @property
    def dummy_hash(self) -> str:
        return _dummy_hash(self._rounds)

    def hash(self, plaintext: str) -> str:
        return bcrypt.hashpw(plaintext.encode("utf-8"), _gensalt(self._rounds)).decode("ascii")

    def verify(self, plaintext: str, hashed: str) -> bool:
        if not plaintext or not hashed:
            return False
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False


__all__ = ["BcryptPasswordHasher", "MAX_PASSWORD_BYTES"]
