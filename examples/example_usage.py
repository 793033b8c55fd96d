"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the attendance and payroll rules live in services.
"""

import importlib

from config import get_settings_module

from src.attendance_dashboard.attendance_dashboard.common.datetime_utils import today_utc
from src.attendance_dashboard.attendance_dashboard.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    report = container.payroll_report_service.build_month_report(month=today_utc().replace(day=1))
    for row in report.rows:
        print(f"{row['name']:<20} {row['attendance_percentage']:>3}%  streak={row['streak']}  balance={row['current_balance']}")


if __name__ == "__main__":
    main()
