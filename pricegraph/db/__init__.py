"""Database layer for PriceGraph."""

from pricegraph.db.repository import PriceRepository
from pricegraph.db.schema import create_schema

__all__ = ["PriceRepository", "create_schema"]
