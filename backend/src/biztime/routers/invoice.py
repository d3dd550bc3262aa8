"""Invoice endpoints."""

from fastapi import APIRouter

from biztime.dependencies import DB
from biztime.schemas.invoice import (
    InvoiceCreate,
    InvoiceDeletedResponse,
    InvoiceDetail,
    InvoiceDetailEnvelope,
    InvoiceEnvelope,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceSummary,
    InvoiceUpdate,
)
from biztime.services import invoice as invoice_service

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("", response_model=InvoiceListResponse, status_code=200)
async def list_invoices(db: DB) -> InvoiceListResponse:
    invoices = await invoice_service.get_invoices(db)
    return InvoiceListResponse(invoices=[InvoiceSummary.model_validate(i) for i in invoices])


@router.get("/{invoice_id}", response_model=InvoiceDetailEnvelope, status_code=200)
async def get_invoice(invoice_id: int, db: DB) -> InvoiceDetailEnvelope:
    """Single invoice with its company nested."""
    invoice = await invoice_service.get_invoice(db, invoice_id)
    return InvoiceDetailEnvelope(invoice=InvoiceDetail.model_validate(invoice))


@router.post("", response_model=InvoiceEnvelope, status_code=201)
async def create_invoice(db: DB, payload: InvoiceCreate | None = None) -> InvoiceEnvelope:
    payload = payload or InvoiceCreate()
    invoice = await invoice_service.create_invoice(db, payload.comp_code, payload.amt)
    return InvoiceEnvelope(invoice=InvoiceResponse.model_validate(invoice))


@router.put("/{invoice_id}", response_model=InvoiceEnvelope, status_code=200)
async def update_invoice(
    invoice_id: int, db: DB, payload: InvoiceUpdate | None = None
) -> InvoiceEnvelope:
    """Change the amount; pass ``paid`` to pay or un-pay the invoice."""
    payload = payload or InvoiceUpdate()
    invoice = await invoice_service.update_invoice(db, invoice_id, payload.amt, payload.paid)
    return InvoiceEnvelope(invoice=InvoiceResponse.model_validate(invoice))


@router.delete("/{invoice_id}", response_model=InvoiceDeletedResponse, status_code=200)
async def delete_invoice(invoice_id: int, db: DB) -> InvoiceDeletedResponse:
    await invoice_service.delete_invoice(db, invoice_id)
    return InvoiceDeletedResponse(status="deleted")
