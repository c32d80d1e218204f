"""Auth adapters: password hashing and bearer token signing/verification."""

from .base import AuthVerificationError, InvalidToken, PasswordHasher, TokenIssuer, TokenVerifier
from .jwt_tokens import JwtTokenService
from .passwords import BcryptPasswordHasher

__all__ = [
    "AuthVerificationError",
    "BcryptPasswordHasher",
    "InvalidToken",
    "JwtTokenService",
    "PasswordHasher",
    "TokenIssuer",
    "TokenVerifier",
]
