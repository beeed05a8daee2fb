"""
Top-level package for the Records API.

A FastAPI service exposing employees and customers stored as JSON
documents on disk.  All functionality lives in ``records_api.app``.
"""

__all__ = []
