"""Valuation report models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from pricegraph.models.commodity import Commodity


class ValuationLine(BaseModel):
    commodity: Commodity
    amount: Decimal
    rate: float
    value: Decimal


class ValuationReport(BaseModel):
    """Output of the valuator for one set of holdings."""

    base: Commodity
    valuation_date: date | None = None
    lines: list[ValuationLine] = Field(default_factory=list)
    total: Decimal = Decimal("0")
    warnings: list[str] = Field(default_factory=list)
