from __future__ import annotations

import logging

from flask import Flask, request

from ..common.responses import domain_error, fail, ok
from ..container import Container
from ..core.exceptions import DomainError
from .session import current_user, end_session, login_required, start_session

logger = logging.getLogger(__name__)


def _form() -> dict:
    return request.get_json(silent=True) or request.form.to_dict()


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = _form()
        try:
            s_user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))
            start_session(s_user, permanent=bool(data.get("remember_me")))
            return ok({"user": {"email": s_user.email, "full_name": s_user.full_name, "is_admin": s_user.is_admin}})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Unexpected error during sign-in")
            return fail("Unexpected error while signing in", status=500)

    @app.route("/register", methods=["POST"], endpoint="register")
    def register_account():
        data = _form()
        try:
            user_id = container.auth_service.sign_up(
                email=data.get("email", ""),
                password=data.get("password", ""),
                full_name=data.get("full_name", ""),
            )
            return ok({"user_id": user_id}, status=201)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Unexpected error during sign-up")
            return fail("Unexpected error while creating the account", status=500)

    @app.route("/logout", methods=["POST"], endpoint="logout")
    @login_required
    def logout():
        end_session()
        return ok()

    @app.route("/api/me", endpoint="me")
    @login_required
    def me():
        try:
            user = container.auth_service.profile(current_user().user_id)
        except DomainError as e:
            end_session()
            return domain_error(e)
        return ok(
            {
                "user": {
                    "email": user.email,
                    "full_name": user.full_name,
                    "avatar_url": user.avatar_url,
                    "is_admin": user.is_admin,
                }
            }
        )
