"""
Validation of the invoice form.

The form arrives as an untyped mapping of field names to strings (or
lists of strings when a field is repeated).  ``validate_invoice_form``
runs it through ``InvoiceForm`` and folds any pydantic errors into one
user‑facing message per field, taken from ``FIELD_MESSAGES``.  The
result is tagged: either ``ok`` with the parsed form, or a mapping of
field name to messages.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from ..schemas.invoice import InvoiceForm


FORM_FIELDS = ("customerId", "amount", "status")

FIELD_MESSAGES: Dict[str, str] = {
    "customerId": "Por favor seleccione un cliente.",
    "amount": "Por favor ingrese un monto en S/.",
    "status": "Por favor seleccione un estado de la factura.",
}

# pydantic reports the alias when validating by alias, the attribute
# name otherwise.
_ERROR_KEYS = {"customer_id": "customerId"}


@dataclass(frozen=True)
class ValidationResult:
    """Either a parsed ``InvoiceForm`` or per‑field error messages."""

    form: Optional[InvoiceForm] = None
    errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.form is not None

    @classmethod
    def success(cls, form: InvoiceForm) -> "ValidationResult":
        return cls(form=form)

    @classmethod
    def failure(cls, errors: Dict[str, List[str]]) -> "ValidationResult":
        return cls(errors=errors)


def _first(form_data: Mapping[str, Any], name: str) -> Any:
    """Return the first value submitted for ``name``.

    Multi-dicts such as Starlette's ``FormData`` return the last value
    from ``get``, so their ``getlist`` is used instead.
    """
    if hasattr(form_data, "getlist"):
        values = form_data.getlist(name)
    else:
        values = form_data.get(name)
    if isinstance(values, (list, tuple)):
        return values[0] if values else None
    return values


def validate_invoice_form(form_data: Mapping[str, Any]) -> ValidationResult:
    """Validate the ``customerId``, ``amount`` and ``status`` form fields.

    Rules:

    * ``customerId`` must be a non‑empty string.
    * ``amount`` is coerced to a decimal number and must be worth at
      least one cent once rounded (so greater than zero) and at most
      ``MAX_AMOUNT``; infinities and NaN are rejected.
    * ``status`` must be exactly ``pending`` or ``paid``.

    Any other keys in ``form_data`` are ignored.
    """
    raw = {name: _first(form_data, name) for name in FORM_FIELDS}
    try:
        form = InvoiceForm.model_validate(raw)
    except ValidationError as exc:
        errors: Dict[str, List[str]] = {}
        for error in exc.errors():
            if not error["loc"]:
                continue
            key = str(error["loc"][0])
            key = _ERROR_KEYS.get(key, key)
            message = FIELD_MESSAGES.get(key)
            if message is None:
                continue
            messages = errors.setdefault(key, [])
            if message not in messages:
                messages.append(message)
        return ValidationResult.failure(errors)
    return ValidationResult.success(form)
