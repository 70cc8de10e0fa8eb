"""AuthService: login, user creation and password reset."""

from __future__ import annotations

import hashlib
import logging
import secrets
import uuid

from plotledger.core.exceptions import (
    InvalidCredentialsError,
    InvalidResetTokenError,
    UserExistsError,
)
from plotledger.core.protocols import ICacheBackend, IUserStore
from plotledger.models.user import StoredUser, User, UserRole

logger = logging.getLogger(__name__)

RESET_KEY_PREFIX = "reset:"


def hash_password(password: str) -> str:
    """SHA-256 hex digest, matching hashes already stored for existing users."""
    if not password:
        return ""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


class AuthService:
    """Credential checks over a user store; reset tokens live in the cache with a TTL."""

    def __init__(self, users: IUserStore, tokens: ICacheBackend, *,
                 reset_token_ttl: int = 3600, frontend_url: str = "http://localhost:5173") -> None:
        self._users = users
        self._tokens = tokens
        self._ttl = reset_token_ttl
        self._frontend_url = frontend_url.rstrip("/")

    def login(self, username: str, password: str) -> User:
        user = self._users.get_by_username(username)
        if user is None or not password:
            raise InvalidCredentialsError()
        # Legacy rows may still hold the plain-text password.
        if user.password_hash not in (hash_password(password), password):
            raise InvalidCredentialsError()
        return user.public()

    def add_user(self, username: str, password: str, email: str = "", name: str | None = None,
                 role: UserRole | str = UserRole.USER) -> User:
        if self._users.get_by_username(username) is not None:
            raise UserExistsError()
        if email and self._users.get_by_email(email) is not None:
            raise UserExistsError()
        user = StoredUser(
            id=uuid.uuid4().hex,
            username=username,
            email=email,
            name=name,
            role=UserRole(role or UserRole.USER),
            password_hash=hash_password(password),
        )
        return self._users.add(user).public()

    def update_password(self, user_id: str, new_password: str) -> bool:
        return self._users.set_password_hash(user_id, hash_password(new_password))

    def request_reset(self, identifier: str) -> str | None:
        """Issue a reset token for a username or email.

        Returns the reset link, or None when no account matches. Callers
        answer both cases identically so accounts cannot be probed.
        """
        user = self._users.get_by_username(identifier) or self._users.get_by_email(identifier)
        if user is None:
            return None
        token = secrets.token_hex(20)
        self._tokens.setex(f"{RESET_KEY_PREFIX}{token}", self._ttl, user.id)
        link = f"{self._frontend_url}/#/reset-password/{token}"
        # No mail transport is configured; the link goes to the log.
        logger.info("Password reset link for %s: %s", user.username, link)
        return link

    def reset_password(self, token: str, password: str) -> None:
        key = f"{RESET_KEY_PREFIX}{token}"
        user_id = self._tokens.get(key) if token else None
        if user_id is None:
            raise InvalidResetTokenError()
        if not self._users.set_password_hash(user_id, hash_password(password)):
            raise InvalidResetTokenError()
        self._tokens.delete(key)
