"""Data models for PriceGraph."""

from pricegraph.models.commodity import Commodity
from pricegraph.models.enums import MissingPricePolicy
from pricegraph.models.price import Holding, Price
from pricegraph.models.reports import ValuationLine, ValuationReport

__all__ = [
    "Commodity",
    "Holding",
    "MissingPricePolicy",
    "Price",
    "ValuationLine",
    "ValuationReport",
]
