"""SQLAlchemy models for companies and their invoices."""

from datetime import date

from sqlalchemy import CheckConstraint, Float, ForeignKey, Text, false, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from biztime.db.session import Base


class Company(Base):
    __tablename__ = "companies"

    code: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, unique=True)
    description: Mapped[str | None] = mapped_column(Text)

    invoices: Mapped[list["Invoice"]] = relationship(
        back_populates="company", passive_deletes=True
    )


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (CheckConstraint("amt > 0", name="amt_positive"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    # Deleting a company takes its invoices with it.
    comp_code: Mapped[str] = mapped_column(
        ForeignKey("companies.code", ondelete="CASCADE"), index=True
    )
    amt: Mapped[float] = mapped_column(Float)
    paid: Mapped[bool] = mapped_column(default=False, server_default=false())
    add_date: Mapped[date] = mapped_column(server_default=func.current_date())
    paid_date: Mapped[date | None]

    company: Mapped["Company"] = relationship(back_populates="invoices")
