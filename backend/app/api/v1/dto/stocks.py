from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StockSummaryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    ticker: str
    name: str


class ActiveStockDetailOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    ticker: str
    name: str
    market: str
    locale: str
    primary_exchange: str
    type: str
    active: bool
    currency_name: str
    last_updated_utc: str
