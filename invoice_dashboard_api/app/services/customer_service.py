"""
Business logic for customers.

The dashboard only reads customers; creation exists for the
management CLI that seeds the database.
"""

import logging
from typing import List

from ..core.db import get_connection
from ..schemas.customer import CustomerCreate, CustomerRead


class CustomerService:
    """Read access to the ``customers`` table."""

    @classmethod
    async def list_customers(cls) -> List[CustomerRead]:
        """Return all customers ordered by name."""
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT id, name, email, image_url FROM customers ORDER BY name ASC"
            ).fetchall()
            return [CustomerRead.model_validate(dict(row)) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def create_customer(cls, data: CustomerCreate) -> CustomerRead:
        """Insert a customer and return it with the generated ID."""
        logger = logging.getLogger(__name__)
        logger.info("Registering customer %s", data.email)
        conn = get_connection()
        try:
            rows = conn.execute(
                "INSERT INTO customers (name, email, image_url) VALUES (?, ?, ?) RETURNING id",
                (data.name, data.email, data.image_url),
            ).fetchall()
            conn.commit()
            return CustomerRead(id=rows[0]["id"], **data.model_dump())
        finally:
            conn.close()
