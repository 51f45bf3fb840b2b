"""Workday Attendance package.

Organized by feature modules (employees, attendance, summaries, reports)
with a thin Flask controller layer over service/repository layers. The
status classifier and the summary aggregators are pure functions that take
their "today" from an injected clock.
"""
