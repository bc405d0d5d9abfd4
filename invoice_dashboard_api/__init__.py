"""
Top‑level package for the Invoice Dashboard API.

This file makes ``invoice_dashboard_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``invoice_dashboard_api.app.main``.  The package provides no
public exports; all functionality lives in submodules under ``app``.
"""

__all__ = []
