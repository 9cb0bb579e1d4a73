"""Ingestion adapters for importing price observations."""

from pricegraph.ingestion.base import BaseAdapter, ImportResult
from pricegraph.ingestion.csv_prices import CsvPriceAdapter
from pricegraph.ingestion.json_prices import JsonPriceAdapter

__all__ = ["BaseAdapter", "CsvPriceAdapter", "ImportResult", "JsonPriceAdapter", "get_adapter"]


def get_adapter(suffix: str, registry=None) -> BaseAdapter:
    """Return the adapter for a file suffix (".json" or ".csv")."""
    adapters = {".json": JsonPriceAdapter, ".csv": CsvPriceAdapter}
    try:
        adapter_cls = adapters[suffix.lower()]
    except KeyError:
        raise ValueError(f"Unsupported price file type: {suffix}") from None
    return adapter_cls(registry)
