"""Invoice data-access layer.

Pure query functions: no business logic, no HTTP concerns.
Each function takes a session and issues exactly one statement.
"""

from typing import Any

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from biztime.models import Invoice


async def list_invoices(db: AsyncSession) -> list[Invoice]:
    result = await db.execute(select(Invoice).order_by(Invoice.id))
    return list(result.scalars().all())


async def list_invoices_for_company(db: AsyncSession, comp_code: str) -> list[Invoice]:
    stmt = select(Invoice).where(Invoice.comp_code == comp_code).order_by(Invoice.id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_invoice(db: AsyncSession, invoice_id: int) -> Invoice | None:
    """Return the invoice with its company eagerly loaded, or None."""
    stmt = (
        select(Invoice)
        .options(selectinload(Invoice.company))
        .where(Invoice.id == invoice_id)
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def insert_invoice(db: AsyncSession, comp_code: str | None, amt: float | None) -> Invoice:
    stmt = insert(Invoice).values(comp_code=comp_code, amt=amt).returning(Invoice)
    result = await db.execute(stmt)
    return result.scalar_one()


async def update_invoice(
    db: AsyncSession, invoice_id: int, amt: float | None, paid: bool | None = None
) -> Invoice | None:
    """Update the amount and, when given, the paid flag.

    paid=True keeps an existing paid_date and stamps today otherwise;
    paid=False clears it. Returns None when no row matched.
    """
    values: dict[str, Any] = {"amt": amt}
    if paid is not None:
        values["paid"] = paid
        values["paid_date"] = (
            func.coalesce(Invoice.paid_date, func.current_date()) if paid else None
        )
    stmt = (
        update(Invoice)
        .where(Invoice.id == invoice_id)
        .values(**values)
        .returning(Invoice)
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def delete_invoice(db: AsyncSession, invoice_id: int) -> int | None:
    """Delete an invoice, returning its id or None when it did not exist."""
    stmt = delete(Invoice).where(Invoice.id == invoice_id).returning(Invoice.id)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()
