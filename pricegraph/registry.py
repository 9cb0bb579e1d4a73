"""Commodity registry: one canonical Commodity per symbol."""

import re

from pricegraph.exceptions import InvalidCommodityError
from pricegraph.models.commodity import Commodity

_SYMBOL_RE = re.compile(r"^[A-Za-z0-9_.\-]+$")


class CommodityRegistry:
    """Allocates commodities by symbol and hands out the same instance on every lookup."""

    def __init__(self) -> None:
        self._commodities: dict[str, Commodity] = {}

    def get(self, symbol: str, name: str | None = None) -> Commodity:
        """Return the commodity for `symbol`, creating it on first use.

        `name` is only recorded when the commodity is created.
        """
        symbol = symbol.strip()
        existing = self._commodities.get(symbol)
        if existing is not None:
            return existing
        if not _SYMBOL_RE.match(symbol):
            raise InvalidCommodityError(symbol)
        commodity = Commodity(symbol=symbol, name=name)
        self._commodities[symbol] = commodity
        return commodity

    def find(self, symbol: str) -> Commodity | None:
        return self._commodities.get(symbol.strip())

    def all(self) -> list[Commodity]:
        return sorted(self._commodities.values(), key=lambda c: c.symbol)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and symbol.strip() in self._commodities

    def __len__(self) -> int:
        return len(self._commodities)
