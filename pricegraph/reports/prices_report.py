"""Normalized price table report generator."""

from datetime import date
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from pricegraph.engines.prices import NormalizedPrices

TEMPLATE_DIR = Path(__file__).parent / "templates"


class NormalizedPricesReportGenerator:
    """Renders the price of every reachable commodity in the base commodity."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)))

    def generate_rows(self, prices: NormalizedPrices) -> list[tuple[str, float]]:
        """Sorted (symbol, rate) rows, base commodity first."""
        rows = [(c.symbol, rate) for c, rate in prices.items() if c != prices.base]
        rows.sort()
        return [(prices.base.symbol, prices[prices.base])] + rows

    def render(self, prices: NormalizedPrices, valuation_date: date | None = None) -> str:
        template = self.env.get_template("normalized_prices.txt")
        return template.render(
            base=prices.base.symbol,
            valuation_date=valuation_date,
            rows=self.generate_rows(prices),
        )
