"""Company data-access layer.

Pure query functions: no business logic, no HTTP concerns.
Each function takes a session and issues exactly one statement.
"""

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from biztime.models import Company


async def list_companies(db: AsyncSession) -> list[Company]:
    result = await db.execute(select(Company).order_by(Company.code))
    return list(result.scalars().all())


async def get_company(db: AsyncSession, code: str) -> Company | None:
    result = await db.execute(select(Company).where(Company.code == code))
    return result.scalar_one_or_none()


async def insert_company(
    db: AsyncSession, code: str | None, name: str | None, description: str | None
) -> Company:
    """Insert a company and return the stored row.

    No checks here: a missing field or duplicate code is left for the
    database constraints to reject.
    """
    stmt = (
        insert(Company)
        .values(code=code, name=name, description=description)
        .returning(Company)
    )
    result = await db.execute(stmt)
    return result.scalar_one()


async def update_company(
    db: AsyncSession, code: str, name: str | None, description: str | None
) -> Company | None:
    """Update name/description, returning the row or None when no row matched."""
    stmt = (
        update(Company)
        .where(Company.code == code)
        .values(name=name, description=description)
        .returning(Company)
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def delete_company(db: AsyncSession, code: str) -> None:
    await db.execute(delete(Company).where(Company.code == code))
