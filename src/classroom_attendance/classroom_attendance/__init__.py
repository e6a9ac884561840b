"""Classroom Attendance package.

This package is organized by feature modules (schedules, seats, attendance)
with a thin Flask controller layer over plain service/repository layers.
The eligibility window matcher and the seat grid model are pure and can be
used without Flask or a database.
"""
