"""Warehouse Attendance package.

This package is organized by feature modules (attendance, employees)
with a thin Flask controller layer and service/repository layers.
"""
