from src.attendance_dashboard.attendance_dashboard.payroll.calculator.standard_calculator import StandardPayrollCalculator


def test_balance_pro_rated_by_hours():
    calc = StandardPayrollCalculator()
    assert calc.current_balance(hours_worked=12, expected_hours=24, salary=3100) == 1550


def test_balance_rounds_half_up():
    calc = StandardPayrollCalculator()
    # 4 / 8 * 1001 = 500.5
    assert calc.current_balance(hours_worked=4, expected_hours=8, salary=1001) == 501


def test_balance_zero_when_nothing_expected():
    calc = StandardPayrollCalculator()
    assert calc.current_balance(hours_worked=0, expected_hours=0, salary=5000) == 0


def test_daily_salary_divides_by_days_in_month():
    calc = StandardPayrollCalculator()
    assert calc.daily_salary(salary=3100, days_in_month=31) == 100
    assert calc.daily_salary(salary=3100, days_in_month=0) == 0
