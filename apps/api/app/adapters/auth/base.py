"""Authentication provider interfaces."""

from abc import ABC, abstractmethod

from app.schemas.auth import AuthPrincipal


class AuthVerificationError(Exception):
    """Raised when a token cannot be verified or normalized."""


class InvalidToken(AuthVerificationError):
    """Raised for malformed, tampered or expired bearer tokens."""


class TokenVerifier(ABC):
    """Provider-neutral token verification interface."""

    @abstractmethod
    def verify_token(self, token: str) -> AuthPrincipal:
        """Verify token and return normalized principal."""


class TokenIssuer(ABC):
    """Signs identity assertions for authenticated users."""

    @abstractmethod
    def issue_token(self, principal_id: str, principal_name: str) -> str:
        """Return a signed, time-limited token for the principal."""


class PasswordHasher(ABC):
    """One-way salted password hashing."""

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """Return a salted hash of ``plaintext``."""

    @abstractmethod
    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return whether ``plaintext`` matches ``hashed``; never raises."""

    @property
    @abstractmethod
    def dummy_hash(self) -> str:
        """A valid hash no password is expected to match, with the same work factor as real ones.

        Verifying against it keeps unknown-account lookups as slow as wrong passwords.
        """


__all__ = [
    "AuthVerificationError",
    "InvalidToken",
    "PasswordHasher",
    "TokenIssuer",
    "TokenVerifier",
]
