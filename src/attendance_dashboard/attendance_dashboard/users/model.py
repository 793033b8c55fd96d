from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Dashboard account.

    Note: plain data object, no DB access code here.
    """

    user_id: int
    email: str
    full_name: str
    password_hash: str
    avatar_url: str = ""
    is_admin: bool = False
