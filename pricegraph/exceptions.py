"""Custom exceptions for PriceGraph."""


class PriceGraphError(Exception):
    """Base exception for price graph errors."""


class NoPriceFoundError(PriceGraphError):
    """Raised when a commodity cannot be valued in the requested base."""

    def __init__(self, commodity: object, base: object):
        self.commodity = commodity
        self.base = base
        super().__init__(f"No price found for {commodity} in {base}")


class InvalidCommodityError(PriceGraphError):
    """Raised when a commodity symbol is malformed."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Invalid commodity symbol: {symbol!r}")


class PriceImportError(PriceGraphError):
    """Raised when a price file cannot be imported."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Import error from {source}: {message}")
