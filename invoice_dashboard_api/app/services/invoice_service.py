"""
Business logic for invoice mutations.

Create, update and delete share one pipeline: validate the submitted
form, convert the amount to cents, issue a single statement through
the repository, then invalidate the cached invoice list and (for
create/update) redirect to it.  Failures never raise out of this
module; they come back as an ``InvoiceActionState`` the form can
render.  A successful create or update does not return at all: the
navigator raises ``RedirectRequired``.
"""

import datetime
import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Callable, Mapping, Optional

from ..core.config import settings
from ..core.navigation import Navigator, ViewCache
from ..schemas.invoice import InvoiceActionState, InvoiceDraft, InvoiceFieldErrors
from .invoice_repository import InvoiceRepository
from .validation import ValidationResult, validate_invoice_form


logger = logging.getLogger(__name__)


CREATE_VALIDATION_MESSAGE = "Campos faltantes. No se pudo crear la factura."
UPDATE_VALIDATION_MESSAGE = "Campos faltantes. No se pudo actualizar la factura."
CREATE_DATABASE_ERROR = "Database Error: Failed to Create Invoice."
UPDATE_DATABASE_ERROR = "Database Error: Failed to Update Invoice."
DELETE_DATABASE_ERROR = "Database Error: Failed to Delete Invoice."
DELETED_MESSAGE = "Deleted Invoice."


def to_minor_units(amount: Decimal) -> int:
    """Convert an amount in soles to integer cents, rounding half up."""
    amount = Decimal(amount)
    _, digits, exponent = amount.as_tuple()
    with localcontext() as ctx:
        # Enough digits for amount * 100 to be exact before rounding.
        ctx.prec = max(ctx.prec, len(digits) + abs(exponent) + 3)
        return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def utc_today() -> datetime.date:
    return datetime.datetime.now(datetime.timezone.utc).date()


def _validation_failure(result: ValidationResult, message: str) -> InvoiceActionState:
    return InvoiceActionState(
        message=message,
        errors=InvoiceFieldErrors.model_validate(result.errors),
    )


class InvoiceService:
    """Create, update and delete invoices.

    Collaborators are injected so the HTTP layer can pass the shared
    cache and navigator while tests pass doubles.
    """

    def __init__(
        self,
        repository: InvoiceRepository,
        view_cache: ViewCache,
        navigator: Navigator,
        today: Callable[[], datetime.date] = utc_today,
        invoices_path: Optional[str] = None,
    ) -> None:
        self.repository = repository
        self.view_cache = view_cache
        self.navigator = navigator
        self.today = today
        self.invoices_path = invoices_path or settings.invoices_path

    async def create_invoice(self, form_data: Mapping[str, Any]) -> InvoiceActionState:
        """Validate the form and insert a new invoice dated today.

        Returns an ``InvoiceActionState`` on validation or database
        failure.  On success the invoice list is invalidated and the
        navigator redirects to it, so this coroutine never returns
        normally.
        """
        result = validate_invoice_form(form_data)
        if not result.ok:
            return _validation_failure(result, CREATE_VALIDATION_MESSAGE)

        draft = InvoiceDraft(**result.form.model_dump(), date=self.today())
        amount_in_cents = to_minor_units(draft.amount)
        try:
            invoice_id = self.repository.insert_invoice(
                draft.customer_id,
                amount_in_cents,
                draft.status.value,
                draft.date,
            )
        except Exception:
            logger.exception("Failed to create invoice for customer %s", draft.customer_id)
            return InvoiceActionState(message=CREATE_DATABASE_ERROR)

        logger.info("Created invoice %s (%s cents)", invoice_id, amount_in_cents)
        self.view_cache.invalidate(self.invoices_path)
        self.navigator.redirect(self.invoices_path)

    async def update_invoice(
        self, invoice_id: str, form_data: Mapping[str, Any]
    ) -> InvoiceActionState:
        """Validate the form and overwrite customer, amount and status.

        The invoice date is left untouched.  Same return contract as
        ``create_invoice``.
        """
        result = validate_invoice_form(form_data)
        if not result.ok:
            return _validation_failure(result, UPDATE_VALIDATION_MESSAGE)

        form = result.form
        amount_in_cents = to_minor_units(form.amount)
        try:
            self.repository.update_invoice(
                invoice_id,
                form.customer_id,
                amount_in_cents,
                form.status.value,
            )
        except Exception:
            logger.exception("Failed to update invoice %s", invoice_id)
            return InvoiceActionState(message=UPDATE_DATABASE_ERROR)

        logger.info("Updated invoice %s", invoice_id)
        self.view_cache.invalidate(self.invoices_path)
        self.navigator.redirect(self.invoices_path)

    async def delete_invoice(self, invoice_id: str) -> InvoiceActionState:
        """Delete an invoice.  The caller decides where to go next."""
        try:
            self.repository.delete_invoice(invoice_id)
        except Exception:
            logger.exception("Failed to delete invoice %s", invoice_id)
            return InvoiceActionState(message=DELETE_DATABASE_ERROR)

        logger.info("Deleted invoice %s", invoice_id)
        self.view_cache.invalidate(self.invoices_path)
        return InvoiceActionState(message=DELETED_MESSAGE)
