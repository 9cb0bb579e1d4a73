"""Enumerations for PriceGraph."""

from enum import StrEnum


class MissingPricePolicy(StrEnum):
    RAISE = "raise"
    SKIP = "skip"
    ZERO = "zero"
