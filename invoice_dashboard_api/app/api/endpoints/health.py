"""
Health check endpoint.

Public (it lives under ``/api``, which the authorization gate skips)
and verifies that the database answers.
"""

import logging
import sqlite3
from datetime import date

from fastapi import APIRouter, HTTPException, status

from invoice_dashboard_api.app.core.db import get_connection


router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    """Detailed health check with database connectivity."""
    try:
        conn = get_connection()
        try:
            row = conn.execute("SELECT COUNT(*) AS count FROM invoices").fetchone()
        finally:
            conn.close()
    except sqlite3.Error as e:
        logging.getLogger(__name__).error("Health check failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Service unavailable: {e}",
        )
    return {
        "status": "healthy",
        "database": "connected",
        "total_invoices": row["count"],
        "timestamp": date.today().isoformat(),
    }
