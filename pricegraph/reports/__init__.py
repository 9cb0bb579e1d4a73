"""Report generation for PriceGraph."""

from pricegraph.reports.prices_report import NormalizedPricesReportGenerator
from pricegraph.reports.valuation_report import ValuationReportGenerator

__all__ = ["NormalizedPricesReportGenerator", "ValuationReportGenerator"]
