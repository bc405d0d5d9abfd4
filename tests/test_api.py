from __future__ import annotations

import datetime

from invoice_dashboard_api.app.core.config import settings
from invoice_dashboard_api.app.core.navigation import view_cache


def test_health_is_public(client) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["database"] == "connected"


def test_dashboard_requires_a_session(client) -> None:
    response = client.get("/dashboard/invoices")

    assert response.status_code == 303
    assert response.headers["location"].startswith("/login?callbackUrl=")


def test_login_with_wrong_password(client, user) -> None:
    response = client.post("/login", data={"email": "user@nextmail.com", "password": "nope-nope"})

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials."}
    assert settings.session_cookie_name not in client.cookies


def test_login_sets_cookie_and_redirects(client, user) -> None:
    response = client.post("/login", data={"email": "user@nextmail.com", "password": "123456"})

    assert response.status_code == 303
    assert response.headers["location"] == "/dashboard"
    assert settings.session_cookie_name in client.cookies


def test_signed_in_users_are_sent_to_the_dashboard(signed_in_client) -> None:
    response = signed_in_client.get("/login")

    assert response.status_code == 303
    assert response.headers["location"] == "/dashboard"


def test_bearer_token_counts_as_session(client, user) -> None:
    from invoice_dashboard_api.app.core.security import create_access_token

    token = create_access_token({"sub": "user@nextmail.com"})
    response = client.get("/dashboard/customers", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200


def test_create_invoice_flow(signed_in_client, customer) -> None:
    assert signed_in_client.get("/dashboard/invoices").json() == []

    response = signed_in_client.post(
        "/dashboard/invoices/create",
        data={"customerId": customer.id, "amount": "45.5", "status": "pending"},
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/dashboard/invoices"
    [invoice] = signed_in_client.get("/dashboard/invoices").json()
    assert invoice["amount"] == 4550
    assert invoice["status"] == "pending"
    assert invoice["customer_id"] == customer.id
    assert invoice["name"] == "Lee Robinson"
    today = datetime.datetime.now(datetime.timezone.utc).date()
    assert invoice["date"] == today.isoformat()


def test_create_invoice_validation_errors(signed_in_client) -> None:
    response = signed_in_client.post(
        "/dashboard/invoices/create",
        data={"amount": "-3", "status": "archived"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "message": "Campos faltantes. No se pudo crear la factura.",
        "errors": {
            "customerId": ["Por favor seleccione un cliente."],
            "amount": ["Por favor ingrese un monto en S/."],
            "status": ["Por favor seleccione un estado de la factura."],
        },
    }


def test_create_invoice_for_unknown_customer(signed_in_client) -> None:
    response = signed_in_client.post(
        "/dashboard/invoices/create",
        data={"customerId": "missing", "amount": "10", "status": "paid"},
    )

    assert response.status_code == 500
    assert response.json() == {"message": "Database Error: Failed to Create Invoice."}


def test_edit_and_delete_invoice(signed_in_client, customer) -> None:
    signed_in_client.post(
        "/dashboard/invoices/create",
        data={"customerId": customer.id, "amount": "10", "status": "pending"},
    )
    [invoice] = signed_in_client.get("/dashboard/invoices").json()

    response = signed_in_client.post(
        f"/dashboard/invoices/{invoice['id']}/edit",
        data={"customerId": customer.id, "amount": "12.34", "status": "paid"},
    )
    assert response.status_code == 303
    detail = signed_in_client.get(f"/dashboard/invoices/{invoice['id']}").json()
    assert detail["status"] == "paid"
    assert float(detail["amount"]) == 12.34

    response = signed_in_client.post(f"/dashboard/invoices/{invoice['id']}/delete")
    assert response.status_code == 200
    assert response.json() == {"message": "Deleted Invoice."}
    assert signed_in_client.get("/dashboard/invoices").json() == []
    assert signed_in_client.get(f"/dashboard/invoices/{invoice['id']}").status_code == 404


def test_list_view_is_served_from_cache_until_invalidated(signed_in_client, customer) -> None:
    assert signed_in_client.get("/dashboard/invoices").json() == []
    assert view_cache.get(settings.invoices_path) == []

    signed_in_client.post(
        "/dashboard/invoices/create",
        data={"customerId": customer.id, "amount": "1", "status": "paid"},
    )

    assert view_cache.get(settings.invoices_path) is None
    assert len(signed_in_client.get("/dashboard/invoices").json()) == 1


def test_customers_listing(signed_in_client, customer) -> None:
    response = signed_in_client.get("/dashboard/customers")

    assert response.status_code == 200
    assert response.json() == [
        {
            "id": customer.id,
            "name": "Lee Robinson",
            "email": "lee@robinson.com",
            "image_url": "/customers/lee.png",
        }
    ]


def test_repeated_form_fields_use_first_value(signed_in_client, customer) -> None:
    response = signed_in_client.post(
        "/dashboard/invoices/create",
        data={"customerId": customer.id, "amount": ["12.30", "-4"], "status": "paid"},
    )

    assert response.status_code == 303
    [invoice] = signed_in_client.get("/dashboard/invoices").json()
    assert invoice["amount"] == 1230


def test_oversized_amount_is_a_validation_error(signed_in_client, customer) -> None:
    response = signed_in_client.post(
        "/dashboard/invoices/create",
        data={"customerId": customer.id, "amount": "1e30", "status": "paid"},
    )

    assert response.status_code == 400
    assert response.json()["errors"] == {"amount": ["Por favor ingrese un monto en S/."]}


def test_public_prefixes_match_whole_path_segments(signed_in_client) -> None:
    assert signed_in_client.get("/api/health").status_code == 200

    response = signed_in_client.get("/apiary")

    assert response.status_code == 303
    assert response.headers["location"] == "/dashboard"
