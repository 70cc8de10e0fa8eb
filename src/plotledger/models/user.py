"""Application user models."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel


class UserRole(StrEnum):
    ADMIN = "admin"
    USER = "user"


class User(BaseModel):
    """User identity as returned to clients. Never carries the password hash."""

    id: str
    username: str
    email: str = ""
    role: UserRole = UserRole.USER
    name: Optional[str] = None


class StoredUser(User):
    """User row as held by the user store."""

    password_hash: str = ""

    def public(self) -> User:
        return User.model_validate(self.model_dump(exclude={"password_hash"}))
