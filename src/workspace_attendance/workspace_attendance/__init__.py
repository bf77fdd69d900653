"""Workspace Attendance package.

Feature modules (workcalendar, attendance, worklog, members) each carry their own
model, repository interface and service; Flask controllers stay thin and the
MySQL adapters live next to the repository they implement.
"""
