"""
Application package.

The service is split into ``core`` (configuration, logging, errors and
the JSON document store), ``services`` (record locating, mutating and
searching), ``schemas`` (pydantic payload models) and ``api`` (FastAPI
routers and error translation).
"""

from .main import app  # noqa: F401
