"""
Service layer for image media.

This module contains the format registry, metadata extraction, URL
resolution and responsive rendering logic, independent of views and
templates. These functions are used by:
- The high-level operations and huey tasks (media/operations.py, media/tasks.py)
- The management commands, admin and template tags
"""
