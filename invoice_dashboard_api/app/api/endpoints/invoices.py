"""
Invoice endpoints of the dashboard.

The mutation routes accept the same form fields as the dashboard forms
(``customerId``, ``amount``, ``status``).  A successful create or edit
answers with ``303 See Other`` to the invoice list; any failure answers
with the JSON action state so the form can show the messages.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, status
from fastapi.responses import JSONResponse

from invoice_dashboard_api.app.core.config import settings
from invoice_dashboard_api.app.core.navigation import navigator, view_cache
from invoice_dashboard_api.app.schemas.invoice import InvoiceActionState, InvoiceDetail
from invoice_dashboard_api.app.services.invoice_repository import InvoiceRepository
from invoice_dashboard_api.app.services.invoice_service import DELETED_MESSAGE, InvoiceService


router = APIRouter()


def get_invoice_repository() -> InvoiceRepository:
    return InvoiceRepository()


def get_invoice_service(
    repository: InvoiceRepository = Depends(get_invoice_repository),
) -> InvoiceService:
    return InvoiceService(repository, view_cache, navigator)


def _state_response(state: InvoiceActionState) -> JSONResponse:
    code = status.HTTP_400_BAD_REQUEST if state.errors else status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=code, content=state.to_payload())


@router.get("", response_model=List[Dict[str, Any]])
async def list_invoices(
    repository: InvoiceRepository = Depends(get_invoice_repository),
) -> List[Dict[str, Any]]:
    """Return the invoice list view.

    The payload is cached under the list path and recomputed only after
    a mutation invalidates it.
    """
    return view_cache.get_or_compute(
        settings.invoices_path,
        lambda: [invoice.model_dump(mode="json") for invoice in repository.fetch_invoices()],
    )


@router.get("/{invoice_id}", response_model=InvoiceDetail)
async def get_invoice(
    invoice_id: str = Path(..., description="ID de la factura"),
    repository: InvoiceRepository = Depends(get_invoice_repository),
) -> InvoiceDetail:
    invoice = repository.fetch_invoice_by_id(invoice_id)
    if not invoice:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice not found")
    return invoice


@router.post("/create")
async def create_invoice(
    request: Request,
    service: InvoiceService = Depends(get_invoice_service),
):
    """Create an invoice from the submitted form."""
    form = await request.form()
    state = await service.create_invoice(form)
    return _state_response(state)


@router.post("/{invoice_id}/edit")
async def update_invoice(
    request: Request,
    invoice_id: str = Path(..., description="ID de la factura"),
    service: InvoiceService = Depends(get_invoice_service),
):
    """Update customer, amount and status of an invoice."""
    form = await request.form()
    state = await service.update_invoice(invoice_id, form)
    return _state_response(state)


@router.post("/{invoice_id}/delete")
async def delete_invoice(
    invoice_id: str = Path(..., description="ID de la factura"),
    service: InvoiceService = Depends(get_invoice_service),
):
    """Delete an invoice and report the outcome."""
    state = await service.delete_invoice(invoice_id)
    if state.message == DELETED_MESSAGE:
        return state.to_payload()
    return _state_response(state)
