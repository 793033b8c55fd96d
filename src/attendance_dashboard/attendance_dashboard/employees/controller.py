from __future__ import annotations

import logging

from flask import Flask, request

from ..common.responses import domain_error, fail, ok
from ..common.validators import require_iso_date
from ..container import Container
from ..core.exceptions import DomainError
from ..users.session import admin_required, login_required

logger = logging.getLogger(__name__)


def _payload() -> dict:
    return request.get_json(silent=True) or request.form.to_dict()


def _joining_date(data: dict):
    value = data.get("joining_date")
    return require_iso_date(value, "Joining date") if value else None


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @login_required
    def list_employees():
        try:
            return ok({"employees": container.employee_service.list_with_roles()})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to list employees")
            return fail("Unexpected error while loading employees", status=500)

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @admin_required
    def create_employee():
        data = _payload()
        try:
            employee_id = container.employee_service.create_employee(
                name=data.get("name", ""),
                role_id=data.get("role_id"),
                joining_date=_joining_date(data),
            )
            return ok({"employee_id": employee_id}, status=201)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to create employee")
            return fail("Unexpected error while adding the employee", status=500)

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    @admin_required
    def update_employee(employee_id: int):
        data = _payload()
        try:
            container.employee_service.update_employee(
                employee_id=employee_id,
                name=data.get("name", ""),
                role_id=data.get("role_id"),
                joining_date=_joining_date(data),
            )
            return ok()
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to update employee %s", employee_id)
            return fail("Unexpected error while updating the employee", status=500)

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    def delete_employee(employee_id: int):
        try:
            container.employee_service.delete_employee(employee_id)
            return ok()
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to delete employee %s", employee_id)
            return fail("Unexpected error while deleting the employee", status=500)
