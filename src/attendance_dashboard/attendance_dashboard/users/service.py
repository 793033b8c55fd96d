from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import AVATAR_URL_TEMPLATE
from ..core.exceptions import AuthenticationError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after sign-in."""

    user_id: int
    email: str
    full_name: str
    is_admin: bool


class AuthService:
    """Use case: sign up and sign in."""

    def __init__(self, users: UserRepository):
        self._users = users

    def sign_up(self, *, email: str, password: str, full_name: str) -> int:
        email = require_non_empty(email, "Email").lower()
        full_name = require_non_empty(full_name, "Full name")
        require_min_length(password, "Password", 6)

        if "@" not in email:
            raise ValidationError("Email is invalid")
        if self._users.get_by_email(email):
            raise ValidationError("An account with this email already exists")

        user_id = self._users.create_user(
            email=email,
            full_name=full_name,
            password_hash=generate_password_hash(password),
            avatar_url=AVATAR_URL_TEMPLATE.format(seed=email),
        )
        logger.info("Registered user %s", user_id)
        return user_id

    def authenticate(self, email: str, password: str) -> SessionUser:
        if not isinstance(email, str) or not isinstance(password, str):
            raise AuthenticationError("Invalid email or password")

        user = self._users.get_by_email(email.strip().lower())
        if not user:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")

        return SessionUser(
            user_id=user.user_id,
            email=user.email,
            full_name=user.full_name,
            is_admin=user.is_admin,
        )

    def profile(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise AuthenticationError("Account no longer exists")
        return user
