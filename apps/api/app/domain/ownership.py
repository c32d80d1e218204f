"""Resource ownership rules for mutating operations."""

from typing import Any

from app.errors import Forbidden
from app.schemas.auth import AuthPrincipal


def _canonical_id(value: Any) -> str:
    return str(value if value is not None else "").strip()


def authorize(principal: AuthPrincipal, resource_author_id: Any) -> bool:
    """Return True iff the principal is the recorded author of the resource."""
    author_id = _canonical_id(resource_author_id)
    if not author_id:
        return False
    return _canonical_id(principal.user_id) == author_id


def ensure_owner(principal: AuthPrincipal, resource_author_id: Any, *, action: str) -> None:
    """Raise Forbidden unless the principal owns the resource."""
    if not authorize(principal, resource_author_id):
        raise Forbidden(f"You are not authorized to {action} this post.")
