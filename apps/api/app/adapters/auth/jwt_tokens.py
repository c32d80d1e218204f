"""Signed bearer tokens backed by PyJWT."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from app.adapters.auth.base import InvalidToken, TokenIssuer, TokenVerifier
from app.schemas.auth import AuthPrincipal

DEFAULT_TOKEN_TTL = timedelta(hours=24)


def utc_now() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenIssuer, TokenVerifier):
    """Issues and verifies stateless HMAC-signed identity tokens.

    Tokens carry ``sub`` (user id), ``name``, ``iat`` and ``exp``. There is no
    server-side revocation: rotating ``secret`` invalidates every outstanding token.
    """

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    def issue_token(self, principal_id: str, principal_name: str) -> str:
        issued_at = self._clock()
        payload = {
            "sub": str(principal_id),
            "name": principal_name,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify_token(self, token: str) -> AuthPrincipal:
        try:
            # Expiry is checked below against the injected clock.
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp"], "verify_exp": False, "verify_iat": False},
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidToken("Invalid bearer token") from exc

        expires_at = claims.get("exp")
        if not isinstance(expires_at, (int, float)):
            raise InvalidToken("Invalid bearer token")
        if expires_at <= self._clock().timestamp():
            raise InvalidToken("Bearer token has expired")

        user_id = str(claims.get("sub") or "").strip()
        if not user_id:
            raise InvalidToken("Bearer token missing user identity")

        return AuthPrincipal(user_id=user_id, name=str(claims.get("name") or ""))


__all__ = ["DEFAULT_TOKEN_TTL", "JwtTokenService", "utc_now"]
