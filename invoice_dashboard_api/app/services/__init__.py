"""
Service layer abstraction.

Each service encapsulates business logic for a domain so API handlers
stay thin: invoices (validation, repository and mutations), customers,
users and credential sign‑in.
"""
