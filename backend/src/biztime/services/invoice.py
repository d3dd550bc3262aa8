"""Invoice business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from biztime.exceptions import NotFoundError
from biztime.logging import get_logger
from biztime.models import Invoice
from biztime.repositories import invoice as invoice_repo

logger = get_logger(__name__)


async def get_invoices(db: AsyncSession) -> list[Invoice]:
    return await invoice_repo.list_invoices(db)


async def get_invoice(db: AsyncSession, invoice_id: int) -> Invoice:
    invoice = await invoice_repo.get_invoice(db, invoice_id)
    if invoice is None:
        raise NotFoundError(f"Can't find invoice with id of {invoice_id}")
    return invoice


async def create_invoice(db: AsyncSession, comp_code: str | None, amt: float | None) -> Invoice:
    invoice = await invoice_repo.insert_invoice(db, comp_code, amt)
    logger.info("invoice_created", invoice_id=invoice.id, comp_code=invoice.comp_code)
    return invoice


async def update_invoice(
    db: AsyncSession, invoice_id: int, amt: float | None, paid: bool | None
) -> Invoice:
    invoice = await invoice_repo.update_invoice(db, invoice_id, amt, paid)
    if invoice is None:
        raise NotFoundError(f"Can't update invoice with id of {invoice_id}")
    logger.info("invoice_updated", invoice_id=invoice_id, paid=invoice.paid)
    return invoice


async def delete_invoice(db: AsyncSession, invoice_id: int) -> None:
    deleted = await invoice_repo.delete_invoice(db, invoice_id)
    if deleted is None:
        raise NotFoundError(f"Can't delete invoice with id of {invoice_id}")
    logger.info("invoice_deleted", invoice_id=invoice_id)
