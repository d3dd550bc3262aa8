"""Company business logic.

Thin orchestration over the repository: raises NotFoundError where a lookup
or update hits no row, and assembles the company-with-invoices view.
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from biztime.exceptions import NotFoundError
from biztime.logging import get_logger
from biztime.models import Company, Invoice
from biztime.repositories import company as company_repo
from biztime.repositories.invoice import list_invoices_for_company

logger = get_logger(__name__)


@dataclass
class CompanyWithInvoices:
    """A company row plus the invoices that reference it."""

    company: Company
    invoices: list[Invoice]


async def get_companies(db: AsyncSession) -> list[Company]:
    return await company_repo.list_companies(db)


async def get_company_with_invoices(db: AsyncSession, code: str) -> CompanyWithInvoices:
    """Fetch a company, then its invoices.

    Two sequential queries and no transaction between them: if the second
    one fails the whole request fails.
    """
    company = await company_repo.get_company(db, code)
    if company is None:
        raise NotFoundError(f"Can't find company with code of {code}")
    invoices = await list_invoices_for_company(db, company.code)
    return CompanyWithInvoices(company=company, invoices=invoices)


async def create_company(
    db: AsyncSession, code: str | None, name: str | None, description: str | None
) -> Company:
    company = await company_repo.insert_company(db, code, name, description)
    logger.info("company_created", code=company.code)
    return company


async def update_company(
    db: AsyncSession, code: str, name: str | None, description: str | None
) -> Company:
    company = await company_repo.update_company(db, code, name, description)
    if company is None:
        raise NotFoundError(f"Can't update company with code of {code}")
    logger.info("company_updated", code=code)
    return company


async def delete_company(db: AsyncSession, code: str) -> None:
    """Delete a company if present. Deleting an unknown code is not an error."""
    await company_repo.delete_company(db, code)
    logger.info("company_deleted", code=code)
