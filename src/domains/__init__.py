# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain services layer.

Each domain module provides a service that validates input, runs the
queries for one resource and builds its response schemas.

Domains:
    auth: Admin registration, login and session tokens.
    teacher: Teacher records.
    course: Courses and their assigned teacher.
    class_: Scheduled sections of a course.
    student: Read-only student records.
    parent: Read-only parent records.
    dashboard: Counts and recent activity.
"""
