"""
Customer endpoints of the dashboard.

Only listing is exposed; the invoice forms use it to fill the
customer selector.
"""

from typing import List

from fastapi import APIRouter

from invoice_dashboard_api.app.schemas.customer import CustomerRead
from invoice_dashboard_api.app.services.customer_service import CustomerService


router = APIRouter()


@router.get("", response_model=List[CustomerRead])
async def list_customers() -> List[CustomerRead]:
    """Return all customers ordered by name."""
    return await CustomerService.list_customers()
