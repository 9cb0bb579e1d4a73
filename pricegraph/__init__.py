"""PriceGraph: commodity price graphs and valuation."""

__version__ = "0.1.0"
