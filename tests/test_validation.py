from __future__ import annotations

from decimal import Decimal

import pytest

from starlette.datastructures import FormData

from invoice_dashboard_api.app.schemas.invoice import MAX_AMOUNT, InvoiceStatus
from invoice_dashboard_api.app.services.validation import FIELD_MESSAGES, validate_invoice_form


def test_valid_form_is_parsed() -> None:
    result = validate_invoice_form({"customerId": "c1", "amount": "45.5", "status": "pending"})

    assert result.ok
    assert result.errors == {}
    assert result.form.customer_id == "c1"
    assert result.form.amount == Decimal("45.5")
    assert result.form.status is InvoiceStatus.PENDING


def test_extra_fields_are_ignored() -> None:
    result = validate_invoice_form(
        {"customerId": "c1", "amount": "10", "status": "paid", "date": "1999-01-01", "id": "x"}
    )

    assert result.ok
    assert result.form.status is InvoiceStatus.PAID


@pytest.mark.parametrize(
    "amount",
    ["0", "-1", "-0.01", "abc", "", None, "Infinity", "NaN", "0.001", "0.0049", "1e30", "92233720368547758.08"],
)
def test_amount_must_be_a_positive_number(amount) -> None:
    result = validate_invoice_form({"customerId": "c1", "amount": amount, "status": "paid"})

    assert not result.ok
    assert result.errors == {"amount": ["Por favor ingrese un monto en S/."]}


@pytest.mark.parametrize("customer_id", [None, ""])
def test_customer_is_required(customer_id) -> None:
    result = validate_invoice_form({"customerId": customer_id, "amount": "5", "status": "paid"})

    assert not result.ok
    assert result.errors == {"customerId": ["Por favor seleccione un cliente."]}


@pytest.mark.parametrize("status", [None, "", "PAID", "overdue", "pending "])
def test_status_must_be_pending_or_paid(status) -> None:
    result = validate_invoice_form({"customerId": "c1", "amount": "5", "status": status})

    assert not result.ok
    assert result.errors == {"status": ["Por favor seleccione un estado de la factura."]}


def test_empty_form_reports_every_field_once() -> None:
    result = validate_invoice_form({})

    assert not result.ok
    assert result.form is None
    assert result.errors == {key: [message] for key, message in FIELD_MESSAGES.items()}


def test_repeated_fields_use_first_value() -> None:
    result = validate_invoice_form(
        {"customerId": ["c1", "c2"], "amount": ["12.30", "-4"], "status": ["paid"]}
    )

    assert result.ok
    assert result.form.customer_id == "c1"
    assert result.form.amount == Decimal("12.30")


def test_repeated_form_fields_use_first_value() -> None:
    form = FormData(
        [("customerId", "c1"), ("amount", "12.30"), ("amount", "-4"), ("status", "paid"), ("status", "bogus")]
    )

    result = validate_invoice_form(form)

    assert result.ok
    assert result.form.amount == Decimal("12.30")
    assert result.form.status is InvoiceStatus.PAID


@pytest.mark.parametrize("amount", ["0.005", "0.01", str(MAX_AMOUNT)])
def test_amount_bounds_are_inclusive(amount) -> None:
    result = validate_invoice_form({"customerId": "c1", "amount": amount, "status": "paid"})

    assert result.ok
    assert result.form.amount == Decimal(amount)
