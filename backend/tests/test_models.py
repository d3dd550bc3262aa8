from datetime import date

import pytest
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from biztime.models import Company, Invoice
from tests.factories import make_company, make_invoice


# ---------------------------------------------------------------------------
# 1. Defaults: unpaid, add_date set by the database, no paid_date
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_invoice_defaults(seeded_db: AsyncSession) -> None:
    invoice = (await seeded_db.execute(select(Invoice))).scalar_one()
    await seeded_db.refresh(invoice)

    assert invoice.paid is False
    assert isinstance(invoice.add_date, date)
    assert invoice.paid_date is None


# ---------------------------------------------------------------------------
# 2. Unique company code and name
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_duplicate_code_raises(seeded_db: AsyncSession) -> None:
    # Forget the seeded instance so the database, not the identity map, rejects it.
    seeded_db.expunge_all()
    async with seeded_db.begin_nested():
        seeded_db.add(make_company(code="ibm", name="Another"))
        with pytest.raises(IntegrityError):
            await seeded_db.flush()


@pytest.mark.asyncio
async def test_duplicate_name_raises(seeded_db: AsyncSession) -> None:
    async with seeded_db.begin_nested():
        seeded_db.add(make_company(code="ibm2", name="IBM"))
        with pytest.raises(IntegrityError):
            await seeded_db.flush()


# ---------------------------------------------------------------------------
# 3. Invoice must reference an existing company
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_invoice_for_unknown_company_raises(db: AsyncSession) -> None:
    async with db.begin_nested():
        db.add(make_invoice(comp_code="ghost"))
        with pytest.raises(IntegrityError):
            await db.flush()


# ---------------------------------------------------------------------------
# 4. Amount must be positive
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
@pytest.mark.parametrize("amt", [0, -5], ids=["zero", "negative"])
async def test_non_positive_amount_raises(seeded_db: AsyncSession, amt: float) -> None:
    async with seeded_db.begin_nested():
        seeded_db.add(make_invoice(amt=amt))
        with pytest.raises(IntegrityError):
            await seeded_db.flush()


# ---------------------------------------------------------------------------
# 5. Deleting a company cascades to its invoices
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_delete_company_cascades_to_invoices(seeded_db: AsyncSession) -> None:
    await seeded_db.execute(delete(Company).where(Company.code == "ibm"))
    await seeded_db.flush()

    remaining = (await seeded_db.execute(select(Invoice))).scalars().all()
    assert remaining == []
