"""
Top‑level package for the College Management System API.

This file makes ``college_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``college_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
