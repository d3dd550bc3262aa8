"""Reusable seed data fixtures for integration tests."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from tests.factories import make_company, make_invoice


@pytest_asyncio.fixture
async def seeded_db(db: AsyncSession) -> AsyncSession:
    """Seed one company (ibm) with one unpaid invoice of 400."""
    db.add(make_company())
    await db.flush()

    db.add(make_invoice(comp_code="ibm", amt=400))
    await db.commit()
    return db
