"""Price graph engines."""

from pricegraph.engines.history import PriceHistory
from pricegraph.engines.prices import NormalizedPrices, PriceGraph, normalize
from pricegraph.engines.valuator import Valuator

__all__ = [
    "NormalizedPrices",
    "PriceGraph",
    "PriceHistory",
    "Valuator",
    "normalize",
]
