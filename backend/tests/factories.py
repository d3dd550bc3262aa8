"""Factory functions for creating model instances in tests."""

from datetime import date

from biztime.models import Company, Invoice


def make_company(
    *,
    code: str = "ibm",
    name: str = "IBM",
    description: str | None = "Big blue.",
) -> Company:
    return Company(code=code, name=name, description=description)


def make_invoice(
    *,
    comp_code: str = "ibm",
    amt: float = 400,
    paid: bool = False,
    paid_date: date | None = None,
) -> Invoice:
    return Invoice(comp_code=comp_code, amt=amt, paid=paid, paid_date=paid_date)
