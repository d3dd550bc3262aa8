"""Company request and response schemas.

Request fields are all optional on purpose: validation of presence is left to
the database constraints, so a missing field fails at insert/update time.
"""

from pydantic import BaseModel

from biztime.schemas.invoice import InvoiceResponse


class CompanyCreate(BaseModel):
    code: str | None = None
    name: str | None = None
    description: str | None = None


class CompanyUpdate(BaseModel):
    name: str | None = None
    description: str | None = None


class CompanyResponse(BaseModel):
    model_config = {"from_attributes": True}

    code: str
    name: str
    description: str | None


class CompanyDetail(CompanyResponse):
    """Company with its invoices attached (two queries, built per request)."""

    invoices: list[InvoiceResponse]


class CompanyEnvelope(BaseModel):
    company: CompanyResponse


class CompanyDetailEnvelope(BaseModel):
    company: CompanyDetail


class CompanyListResponse(BaseModel):
    companies: list[CompanyResponse]


class CompanyDeletedResponse(BaseModel):
    msg: str
