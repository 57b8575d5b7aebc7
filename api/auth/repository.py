"""
Auth persistence helpers (in-memory user store).

Rows are handed out as plain dicts so callers never hold a reference into the
store itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from core.store import KeyedResourceStore


@dataclass(frozen=True)
class User:
    email: str
    password_hash: str
    is_active: bool
    created_at: datetime


_store: KeyedResourceStore[User] | None = None


def init_store() -> None:
    global _store
    if _store is not None:
        return None
    _store = KeyedResourceStore()


def close_store() -> None:
    global _store
    _store = None


def store() -> KeyedResourceStore[User]:
    if _store is None:
        raise RuntimeError("User store is not initialized. Call init_store() on startup.")
    return _store


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def _to_row(user_id: int, user: User) -> dict:
    return {
        "id": user_id,
        "email": user.email,
        "password_hash": user.password_hash,
        "is_active": user.is_active,
        "created_at": user.created_at,
    }


def create_user_if_absent(*, email: str, password_hash: str, is_active: bool = True) -> dict | None:
    """
    Insert a user unless the email is already taken (None in that case).
    """
    user = User(
        email=normalize_email(email),
        password_hash=password_hash,
        is_active=is_active,
        created_at=datetime.now(timezone.utc),
    )
    user_id = store().add_unless(lambda existing: existing.email == user.email, user)
    if user_id is None:
        return None
    return _to_row(user_id, user)


def get_user_by_email(email: str) -> dict | None:
    wanted = normalize_email(email)
    found = store().find(lambda user: user.email == wanted)
    if found is None:
        return None
    return _to_row(*found)


def get_user_by_id(user_id: int) -> dict | None:
    user = store().get(user_id)
    if user is None:
        return None
    return _to_row(user_id, user)
