"""Classroom Attendance package.

Organized by feature modules (credentials, attendance, ...) with a thin Flask
controller layer over service/repository layers.
"""
