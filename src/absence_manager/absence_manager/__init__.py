"""Absence Manager package.

This package is organized by feature modules (users, courses, students,
absences, reports, ...) backed by an in-memory store, with a thin Flask
controller layer on top of the service/repository layers.
"""
