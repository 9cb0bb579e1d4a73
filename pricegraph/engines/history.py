"""Dated price history: one price graph per observation date."""

import logging
from collections.abc import Iterable, Iterator
from datetime import date

from pricegraph.engines.prices import NormalizedPrices, PriceGraph, normalize
from pricegraph.models.commodity import Commodity
from pricegraph.models.price import Price

logger = logging.getLogger(__name__)


class PriceHistory:
    """Collects dated price observations and replays them in chronological order.

    Each date's graph is the previous date's graph copied forward with that
    date's observations inserted on top, so a later observation for the same
    pair supersedes an earlier one.
    """

    def __init__(self, prices: Iterable[Price] = ()) -> None:
        self._by_date: dict[date, list[Price]] = {}
        self.add_all(prices)

    def add(self, price: Price) -> None:
        self._by_date.setdefault(price.date, []).append(price)

    def add_all(self, prices: Iterable[Price]) -> None:
        for price in prices:
            self.add(price)

    def dates(self) -> list[date]:
        return sorted(self._by_date)

    def snapshots(self) -> Iterator[tuple[date, PriceGraph]]:
        """Yield (date, graph) for every observation date, oldest first.

        Every yielded graph is an independent copy; mutating it does not
        affect later snapshots.
        """
        running = PriceGraph()
        for day in self.dates():
            for price in self._by_date[day]:
                running.insert(price)
            yield day, running.copy()

    def graph_at(self, day: date) -> PriceGraph:
        """Graph holding every observation dated on or before `day`."""
        graph = PriceGraph()
        for obs_date in self.dates():
            if obs_date > day:
                break
            for price in self._by_date[obs_date]:
                graph.insert(price)
        logger.debug("Built price graph for %s: %r", day, graph)
        return graph

    def normalized_at(self, day: date, base: Commodity) -> NormalizedPrices:
        return normalize(self.graph_at(day), base)

    def __len__(self) -> int:
        return sum(len(prices) for prices in self._by_date.values())
