"""Company endpoints."""

from fastapi import APIRouter

from biztime.dependencies import DB
from biztime.schemas.company import (
    CompanyCreate,
    CompanyDeletedResponse,
    CompanyDetail,
    CompanyDetailEnvelope,
    CompanyEnvelope,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
)
from biztime.schemas.invoice import InvoiceResponse
from biztime.services import company as company_service

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("", response_model=CompanyListResponse, status_code=200)
async def list_companies(db: DB) -> CompanyListResponse:
    companies = await company_service.get_companies(db)
    return CompanyListResponse(
        companies=[CompanyResponse.model_validate(c) for c in companies]
    )


@router.get("/{code}", response_model=CompanyDetailEnvelope, status_code=200)
async def get_company(code: str, db: DB) -> CompanyDetailEnvelope:
    """Single company with every invoice whose comp_code matches it."""
    result = await company_service.get_company_with_invoices(db, code)
    detail = CompanyDetail(
        **CompanyResponse.model_validate(result.company).model_dump(),
        invoices=[InvoiceResponse.model_validate(inv) for inv in result.invoices],
    )
    return CompanyDetailEnvelope(company=detail)


@router.post("", response_model=CompanyEnvelope, status_code=201)
async def create_company(db: DB, payload: CompanyCreate | None = None) -> CompanyEnvelope:
    """Insert a company. Missing fields are left for the database to reject."""
    payload = payload or CompanyCreate()
    company = await company_service.create_company(
        db, payload.code, payload.name, payload.description
    )
    return CompanyEnvelope(company=CompanyResponse.model_validate(company))


# Answers 201 rather than 200; existing clients depend on it.
@router.patch("/{code}", response_model=CompanyEnvelope, status_code=201)
async def update_company(
    code: str, db: DB, payload: CompanyUpdate | None = None
) -> CompanyEnvelope:
    payload = payload or CompanyUpdate()
    company = await company_service.update_company(db, code, payload.name, payload.description)
    return CompanyEnvelope(company=CompanyResponse.model_validate(company))


@router.delete("/{code}", response_model=CompanyDeletedResponse, status_code=200)
async def delete_company(code: str, db: DB) -> CompanyDeletedResponse:
    """Delete a company. Succeeds whether or not the code existed."""
    await company_service.delete_company(db, code)
    return CompanyDeletedResponse(msg=f"{code} DELETED!")
