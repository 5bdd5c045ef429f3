# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Request and response schemas.

All schemas use camelCase JSON keys (``phoneNumber``, ``totalPages``) while
Python code uses snake_case attribute names.
"""
