"""Explicit per-request session lifecycle.

`start_session` runs on sign-in, `end_session` on sign-out; views read the
signed-in user through `current_user` instead of module-level state.
"""
from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import jsonify, session

from .service import SessionUser

_KEY = "user"


def start_session(user: SessionUser, *, permanent: bool = False) -> None:
    session.clear()
    session.permanent = permanent
    session[_KEY] = {
        "user_id": user.user_id,
        "email": user.email,
        "full_name": user.full_name,
        "is_admin": user.is_admin,
    }


def end_session() -> None:
    session.clear()


def current_user() -> Optional[SessionUser]:
    data = session.get(_KEY)
    if not data:
        return None
    return SessionUser(
        user_id=int(data["user_id"]),
        email=data["email"],
        full_name=data["full_name"],
        is_admin=bool(data["is_admin"]),
    )


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_user() is None:
            return jsonify({"success": False, "message": "Please sign in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user = current_user()
        if user is None:
            return jsonify({"success": False, "message": "Please sign in to continue"}), 401
        if not user.is_admin:
            return jsonify({"success": False, "message": "Admin access required"}), 403
        return view(*args, **kwargs)

    return wrapper
