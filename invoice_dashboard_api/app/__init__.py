"""
Application package initializer.

This package contains the main entrypoint for the dashboard API and
all of its submodules: ``core`` (configuration, database, security,
navigation and the authorization gate), ``schemas``, ``services``,
``middleware`` and ``api``.
"""

from .main import app  # noqa: F401
