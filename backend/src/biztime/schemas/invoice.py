"""Invoice request and response schemas."""

from datetime import date

from pydantic import BaseModel


class InvoiceCreate(BaseModel):
    comp_code: str | None = None
    amt: float | None = None


class InvoiceUpdate(BaseModel):
    amt: float | None = None
    paid: bool | None = None


class InvoiceSummary(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    comp_code: str


class InvoiceResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    comp_code: str
    amt: float
    paid: bool
    add_date: date
    paid_date: date | None


class CompanyInInvoice(BaseModel):
    """Owning company nested inside a single-invoice response."""

    model_config = {"from_attributes": True}

    code: str
    name: str
    description: str | None


class InvoiceDetail(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    amt: float
    paid: bool
    add_date: date
    paid_date: date | None
    company: CompanyInInvoice


class InvoiceEnvelope(BaseModel):
    invoice: InvoiceResponse


class InvoiceDetailEnvelope(BaseModel):
    invoice: InvoiceDetail


class InvoiceListResponse(BaseModel):
    invoices: list[InvoiceSummary]


class InvoiceDeletedResponse(BaseModel):
    status: str
