"""
Pydantic schema definitions for API payloads.

Each resource defines the model its records are validated against, and
``envelope`` defines the response body shared by all endpoints.
"""
