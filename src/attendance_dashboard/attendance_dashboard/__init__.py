"""Attendance dashboard package.

This package is organized by feature modules (employees, roles, attendance,
payroll, users) with a thin Flask controller layer over service/repository
layers.
"""
