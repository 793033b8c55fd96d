from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.attendance_dashboard.attendance_dashboard.attendance.model import AttendanceRecord
from src.attendance_dashboard.attendance_dashboard.attendance.service import AttendanceService, parse_status
from src.attendance_dashboard.attendance_dashboard.core.enums import AttendanceStatus
from src.attendance_dashboard.attendance_dashboard.core.exceptions import NotFoundError, ValidationError


@pytest.fixture
def service(attendance_repo, employees_repo, roles_repo) -> AttendanceService:
    return AttendanceService(attendance_repo, employees_repo, roles_repo)


def test_parse_status_accepts_known_values():
    assert parse_status("Present") is AttendanceStatus.PRESENT
    assert parse_status(" half-day ") is AttendanceStatus.HALF_DAY
    with pytest.raises(ValidationError):
        parse_status("late")
    with pytest.raises(ValidationError):
        parse_status(None)
    with pytest.raises(ValidationError):
        parse_status(1)


def test_bulk_absent_skips_employee_not_yet_joined(service, attendance_repo, fixed_today):
    # Employee 1 joined 2024-01-15.
    result = service.bulk_set_status(
        work_date=date(2024, 1, 10),
        status=AttendanceStatus.ABSENT,
        employee_ids=[1, 2],
        today=fixed_today,
    )

    assert result.written == [2]
    assert result.skipped == [1]
    keys = [r.key for r in attendance_repo.all()]
    assert (1, date(2024, 1, 10)) not in keys
    assert keys == [(2, date(2024, 1, 10))]


def test_bulk_without_ids_uses_whole_roster(service, attendance_repo, fixed_today):
    result = service.bulk_set_status(work_date=fixed_today, status=AttendanceStatus.PRESENT, today=fixed_today)

    assert sorted(result.written) == [1, 2]
    assert result.skipped == [3]
    assert attendance_repo.upsert_calls == 1
    assert len(attendance_repo.all()) == 2


def test_bulk_collapses_duplicate_ids(service, attendance_repo, fixed_today):
    result = service.bulk_set_status(
        work_date=fixed_today,
        status=AttendanceStatus.HALF_DAY,
        employee_ids=[2, 2, 1, 2],
        today=fixed_today,
    )

    assert result.written == [2, 1]
    assert len(attendance_repo.all()) == 2


def test_bulk_unknown_employee_writes_nothing(service, attendance_repo, fixed_today):
    with pytest.raises(NotFoundError):
        service.bulk_set_status(
            work_date=fixed_today,
            status=AttendanceStatus.PRESENT,
            employee_ids=[2, 99],
            today=fixed_today,
        )
    assert attendance_repo.upsert_calls == 0
    assert attendance_repo.all() == []


def test_bulk_refreshes_cached_status_only_for_today(service, employees_repo, fixed_today):
    service.bulk_set_status(
        work_date=fixed_today - timedelta(days=1),
        status=AttendanceStatus.ABSENT,
        employee_ids=[2],
        today=fixed_today,
    )
    assert employees_repo.status_updates == []
    assert employees_repo.get_by_id(2).status is AttendanceStatus.PRESENT

    service.bulk_set_status(work_date=fixed_today, status=AttendanceStatus.ABSENT, employee_ids=[2], today=fixed_today)
    assert employees_repo.status_updates == [([2], AttendanceStatus.ABSENT)]
    assert employees_repo.get_by_id(2).status is AttendanceStatus.ABSENT


def test_set_status_rejects_date_before_joining(service, attendance_repo, fixed_today):
    with pytest.raises(ValidationError):
        service.set_status(
            employee_id=1,
            work_date=date(2024, 1, 14),
            status=AttendanceStatus.PRESENT,
            today=fixed_today,
        )
    assert attendance_repo.all() == []


def test_set_status_unknown_employee(service, fixed_today):
    with pytest.raises(NotFoundError):
        service.set_status(employee_id=42, work_date=fixed_today, status=AttendanceStatus.PRESENT, today=fixed_today)


def test_second_mark_on_same_day_replaces_first(service, attendance_repo, fixed_today):
    service.set_status(employee_id=2, work_date=fixed_today, status=AttendanceStatus.PRESENT, today=fixed_today)
    service.set_status(employee_id=2, work_date=fixed_today, status=AttendanceStatus.HALF_DAY, today=fixed_today)

    assert attendance_repo.all() == [
        AttendanceRecord(employee_id=2, work_date=fixed_today, status=AttendanceStatus.HALF_DAY)
    ]


def test_monthly_overview_echoes_query(service, attendance_repo, fixed_today):
    attendance_repo.upsert_many(
        [
            AttendanceRecord(employee_id=1, work_date=date(2024, 1, 16), status=AttendanceStatus.PRESENT),
            AttendanceRecord(employee_id=1, work_date=date(2024, 1, 17), status=AttendanceStatus.HALF_DAY),
        ]
    )

    overview = service.monthly_overview(employee_id=1, month=date(2024, 1, 1), today=fixed_today)
    body = overview.to_dict()

    assert body["employee_id"] == 1
    assert body["month"] == "2024-01"
    assert body["employee_name"] == "John Doe"
    assert body["role_name"] == "Software Engineer"
    assert body["working_days"] == 3
    assert body["attendance_percentage"] == 50
    assert body["current_balance"] == 1550
    assert body["streak"] == 2
    assert len(body["days"]) == 31
    assert body["days"][14] == {
        "date": "2024-01-15",
        "status": "absent",
        "marked": False,
        "label": "Absent (not marked)",
        "hours": 0,
    }


def test_monthly_overview_missing_role_shows_placeholder(attendance_repo, employees_repo, roles_repo, fixed_today):
    roles_repo.delete_by_id(1)
    service = AttendanceService(attendance_repo, employees_repo, roles_repo)

    overview = service.monthly_overview(employee_id=2, month=date(2024, 1, 1), today=fixed_today)

    assert overview.role_name == "N/A"
    assert overview.summary.current_balance == 0


def test_monthly_overview_rejects_future_month(service, fixed_today):
    with pytest.raises(ValidationError):
        service.monthly_overview(employee_id=2, month=date(2024, 2, 1), today=fixed_today)


def test_monthly_overview_unknown_employee(service, fixed_today):
    with pytest.raises(NotFoundError):
        service.monthly_overview(employee_id=404, month=date(2024, 1, 1), today=fixed_today)
