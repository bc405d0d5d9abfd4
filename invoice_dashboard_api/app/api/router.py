"""
Top‑level router of the dashboard.

Aggregates the domain‑specific routers.  Dashboard pages live under
``settings.dashboard_path`` so the authorization gate protects them;
the health check lives under ``/api``, which the gate skips.
"""

from fastapi import APIRouter

from ..core.config import settings
from .endpoints import auth, customers, health, invoices

router = APIRouter()

router.include_router(invoices.router, prefix=settings.invoices_path, tags=["invoices"])
router.include_router(customers.router, prefix=f"{settings.dashboard_path}/customers", tags=["customers"])
router.include_router(auth.router, tags=["auth"])
router.include_router(health.router, prefix="/api", tags=["health"])
