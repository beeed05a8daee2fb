"""
Top-level router.

Aggregates the resource routers under their path prefixes.  New
resources are added here by including their router.
"""

from fastapi import APIRouter

from .endpoints import customers, employees, health

router = APIRouter()

router.include_router(employees.router, prefix="/employees", tags=["employees"])
router.include_router(customers.router, prefix="/customers", tags=["customers"])
router.include_router(health.router, prefix="/health", tags=["health"])
