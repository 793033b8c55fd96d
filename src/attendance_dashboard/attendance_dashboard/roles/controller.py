from __future__ import annotations

import logging

from flask import Flask, request

from ..common.responses import domain_error, fail, ok
from ..container import Container
from ..core.exceptions import DomainError
from ..users.session import admin_required, login_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/roles", methods=["GET"], endpoint="list_roles")
    @login_required
    def list_roles():
        try:
            roles = container.role_service.list_roles()
            return ok({"roles": [{"role_id": r.role_id, "name": r.name, "salary": r.salary} for r in roles]})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to list roles")
            return fail("Unexpected error while loading roles", status=500)

    @app.route("/api/roles", methods=["POST"], endpoint="create_role")
    @admin_required
    def create_role():
        data = request.get_json(silent=True) or request.form.to_dict()
        try:
            role_id = container.role_service.create_role(name=data.get("name", ""), salary=data.get("salary"))
            return ok({"role_id": role_id}, status=201)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to create role")
            return fail("Unexpected error while adding the role", status=500)

    @app.route("/api/roles/<int:role_id>", methods=["DELETE"], endpoint="delete_role")
    @admin_required
    def delete_role(role_id: int):
        try:
            container.role_service.delete_role(role_id)
            return ok()
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to delete role %s", role_id)
            return fail("Unexpected error while deleting the role", status=500)
