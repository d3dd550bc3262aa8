"""Create the BizTime tables on the active database and load sample rows.

Usage:
    python scripts/seed_db.py            # development database
    BIZTIME_ENV=test python scripts/seed_db.py

Existing tables are dropped first, so this resets the database.
"""

import asyncio
from datetime import date

from biztime.config import settings
from biztime.db.session import Base, async_session, engine, shutdown
from biztime.logging import get_logger
from biztime.models import Company, Invoice

logger = get_logger("seed_db")

COMPANIES = [
    Company(code="apple", name="Apple Computer", description="Maker of OSX."),
    Company(code="ibm", name="IBM", description="Big blue."),
]

INVOICES = [
    Invoice(comp_code="apple", amt=100, paid=False),
    Invoice(comp_code="apple", amt=200, paid=False),
    Invoice(comp_code="apple", amt=300, paid=True, paid_date=date(2018, 1, 1)),
    Invoice(comp_code="ibm", amt=400, paid=False),
]


async def main() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        session.add_all(COMPANIES)
        await session.flush()
        session.add_all(INVOICES)
        await session.commit()

    logger.info(
        "database_seeded",
        environment=settings.environment,
        companies=len(COMPANIES),
        invoices=len(INVOICES),
    )
    await shutdown()


if __name__ == "__main__":
    asyncio.run(main())
