"""Price graph and normalization engine.

A PriceGraph stores exchange rates keyed by (target, commodity):
``graph[target][commodity] == rate`` means one unit of `commodity` is worth
`rate` units of `target`. Every insert also stores the inverse edge, so the
graph is symmetric.

Normalization walks the graph from a base commodity and composes edge
rates multiplicatively, producing the price of every reachable commodity
in units of the base. When several paths reach the same commodity the
settled rate depends on traversal order and is not part of the contract.
"""

import logging
from collections.abc import Iterator, Mapping
from decimal import Decimal
from types import MappingProxyType

from pricegraph.exceptions import NoPriceFoundError
from pricegraph.models.commodity import Commodity
from pricegraph.models.price import Price

logger = logging.getLogger(__name__)


class PriceGraph(Mapping):
    """Symmetric graph of exchange rates.

    Outer key: target commodity. Inner key: commodity.
    Value: price in (target commodity / commodity).
    """

    def __init__(self) -> None:
        self._prices: dict[Commodity, dict[Commodity, float]] = {}

    def insert(self, price: Price) -> None:
        """Insert an observation and its inverse. Later inserts overwrite earlier ones."""
        self._add(price.target, price.commodity, price.rate)
        self._add(price.commodity, price.target, 1.0 / price.rate)
        logger.debug(
            "Inserted price %s: 1 %s = %r %s",
            price.date, price.commodity, price.rate, price.target,
        )

    def _add(self, target: Commodity, commodity: Commodity, rate: float) -> None:
        inner = self._prices.get(target)
        if inner is None:
            inner = {}
            self._prices[target] = inner
        inner[commodity] = rate

    def copy(self) -> "PriceGraph":
        """Deep copy: the new graph shares no inner mappings with this one."""
        graph = PriceGraph()
        for target, rates in self._prices.items():
            for commodity, rate in rates.items():
                graph._add(target, commodity, rate)
        return graph

    def rate(self, target: Commodity, commodity: Commodity) -> float | None:
        """Direct edge rate, or None if the two commodities are not adjacent."""
        return self._prices.get(target, {}).get(commodity)

    def normalize(self, base: Commodity) -> "NormalizedPrices":
        return normalize(self, base)

    def __getitem__(self, target: Commodity) -> Mapping[Commodity, float]:
        return MappingProxyType(self._prices[target])

    def __iter__(self) -> Iterator[Commodity]:
        return iter(self._prices)

    def __len__(self) -> int:
        return len(self._prices)

    def __repr__(self) -> str:
        edges = sum(len(rates) for rates in self._prices.values())
        return f"PriceGraph(commodities={len(self._prices)}, edges={edges})"


class NormalizedPrices(Mapping):
    """Read-only prices of commodities in units of a single base commodity."""

    def __init__(self, base: Commodity, prices: dict[Commodity, float]):
        self.base = base
        self._prices = dict(prices)

    def valuate(self, commodity: Commodity, amount: Decimal) -> Decimal:
        """Convert `amount` of `commodity` into the base commodity.

        The multiplication happens in floating point; the result is converted
        back to Decimal from its shortest repr.

        Raises:
            NoPriceFoundError: `commodity` is not reachable from the base.
        """
        price = self._prices.get(commodity)
        if price is None:
            raise NoPriceFoundError(commodity, self.base)
        value = float(amount) * price
        return Decimal(repr(value))

    def __getitem__(self, commodity: Commodity) -> float:
        return self._prices[commodity]

    def __iter__(self) -> Iterator[Commodity]:
        return iter(self._prices)

    def __len__(self) -> int:
        return len(self._prices)

    def __repr__(self) -> str:
        body = ", ".join(f"{c}: {p!r}" for c, p in self._prices.items())
        return f"NormalizedPrices(base={self.base}, {{{body}}})"


def normalize(graph: PriceGraph, base: Commodity) -> NormalizedPrices:
    """Compute the price of every commodity reachable from `base`, in units of `base`."""
    # prices in (base / commodity)
    todo: dict[Commodity, float] = {base: 1.0}
    done: dict[Commodity, float] = {}

    while todo:
        current = next(iter(todo))
        current_price = todo.pop(current)
        done[current] = current_price
        for neighbor, rate in graph.get(current, {}).items():
            if neighbor in done:
                continue
            todo[neighbor] = rate * current_price

    logger.debug("Normalized %d commodities against %s", len(done), base)
    return NormalizedPrices(base, done)
