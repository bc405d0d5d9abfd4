"""
Persistence gateway for the ``invoices`` table.

Every method opens its own connection, runs a single parameterized
statement and closes the connection again.  Errors raised by the
driver are not handled here: the service layer decides what a failed
write means for the user.
"""

import datetime
from decimal import Decimal
from typing import List, Optional

from ..core.db import get_connection
from ..schemas.invoice import InvoiceDetail, InvoiceListItem


class InvoiceRepository:
    """Parameterized SQL statements against the invoice store."""

    def insert_invoice(
        self,
        customer_id: str,
        amount: int,
        status: str,
        date: datetime.date,
    ) -> str:
        """Insert an invoice and return the identifier assigned by the store."""
        conn = get_connection()
        try:
            rows = conn.execute(
                """
                INSERT INTO invoices (customer_id, amount, status, date)
                VALUES (?, ?, ?, ?)
                RETURNING id
                """,
                (customer_id, amount, status, date.isoformat()),
            ).fetchall()
            conn.commit()
            return rows[0]["id"]
        finally:
            conn.close()

    def update_invoice(self, invoice_id: str, customer_id: str, amount: int, status: str) -> None:
        conn = get_connection()
        try:
            conn.execute(
                """
                UPDATE invoices
                SET customer_id = ?, amount = ?, status = ?
                WHERE id = ?
                """,
                (customer_id, amount, status, invoice_id),
            )
            conn.commit()
        finally:
            conn.close()

    def delete_invoice(self, invoice_id: str) -> None:
        conn = get_connection()
        try:
            conn.execute("DELETE FROM invoices WHERE id = ?", (invoice_id,))
            conn.commit()
        finally:
            conn.close()

    def fetch_invoices(self) -> List[InvoiceListItem]:
        """Return all invoices joined with their customer, newest first."""
        conn = get_connection()
        try:
            rows = conn.execute(
                """
                SELECT invoices.id, invoices.customer_id, invoices.amount,
                       invoices.status, invoices.date,
                       customers.name, customers.email, customers.image_url
                FROM invoices
                JOIN customers ON invoices.customer_id = customers.id
                ORDER BY invoices.date DESC, invoices.rowid DESC
                """
            ).fetchall()
            return [InvoiceListItem.model_validate(dict(row)) for row in rows]
        finally:
            conn.close()

    def fetch_invoice_by_id(self, invoice_id: str) -> Optional[InvoiceDetail]:
        """Return an invoice with its amount converted back to major units."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, customer_id, amount, status FROM invoices WHERE id = ?",
                (invoice_id,),
            ).fetchone()
        finally:
            conn.close()
        if not row:
            return None
        return InvoiceDetail(
            id=row["id"],
            customer_id=row["customer_id"],
            amount=Decimal(row["amount"]) / 100,
            status=row["status"],
        )
