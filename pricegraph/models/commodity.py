"""Commodity identity model."""

from pydantic import BaseModel, ConfigDict


class Commodity(BaseModel):
    """A unit of value: currency, security, or anything else that can be priced.

    Identity is the symbol alone; `name` is descriptive and does not take
    part in equality or hashing, so commodities key price graphs by symbol.
    """

    model_config = ConfigDict(frozen=True)

    symbol: str
    name: str | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Commodity):
            return NotImplemented
        return self.symbol == other.symbol

    def __hash__(self) -> int:
        return hash(self.symbol)

    def __str__(self) -> str:
        return self.symbol
