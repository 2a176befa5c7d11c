"""Attendance Tracker package.

A small attendance log: a thin Flask controller layer over a service and a
SQLite-backed repository, wired together by the container.
"""
