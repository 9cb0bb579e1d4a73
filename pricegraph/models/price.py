"""Price observation and holding models."""

import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from pricegraph.models.commodity import Commodity


class Price(BaseModel):
    """A dated observation: one unit of `commodity` is worth `rate` units of `target`."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    commodity: Commodity
    target: Commodity
    rate: float = Field(gt=0, allow_inf_nan=False)


class Holding(BaseModel):
    commodity: Commodity
    amount: Decimal
