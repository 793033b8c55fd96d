from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollReportService
from .roles.mysql_role_repository import MySQLRoleRepository
from .roles.repository import RoleRepository
from .roles.service import RoleService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    employees_repo: EmployeeRepository
    roles_repo: RoleRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    employee_service: EmployeeService
    role_service: RoleService
    attendance_service: AttendanceService
    payroll_report_service: PayrollReportService


def wire_services(
    *,
    users_repo: UserRepository,
    employees_repo: EmployeeRepository,
    roles_repo: RoleRepository,
    attendance_repo: AttendanceRepository,
) -> Container:
    """Build every service on top of the given repositories."""

    calculator = StandardPayrollCalculator()

    return Container(
        users_repo=users_repo,
        employees_repo=employees_repo,
        roles_repo=roles_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(users_repo),
        employee_service=EmployeeService(employees_repo, roles_repo, attendance_repo),
        role_service=RoleService(roles_repo, employees_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo, roles_repo, calculator=calculator),
        payroll_report_service=PayrollReportService(attendance_repo, employees_repo, roles_repo, calculator=calculator),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return wire_services(
        users_repo=MySQLUserRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        roles_repo=MySQLRoleRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
    )
